from datetime import date
import unittest
from cookbook.domain.IngredientStore import IngredientStore, AddOutcome, RemoveOutcome
from cookbook.domain.MergeDecision import MergeDecision, always, UNIT_PRICE, EXPIRE_DATE
from cookbook.domain.errors import InvalidDateRangeError
from cookbook.events.Event_Bus import EventBus, STORAGE_INGREDIENT_ADDED

DEC_1 = date(2023, 12, 1)


class TestIngredientStore(unittest.TestCase):

    def setUp(self):
        self.store = IngredientStore().set_event_bus(EventBus())

    def test_add_new_ingredient(self):
        outcome = self.store.add("Eggs", 10, "pcs", DEC_1, 50.0)
        self.assertEqual(outcome, AddOutcome.ADDED)
        self.assertEqual(len(self.store), 1)

    def test_add_same_details_merges_amount(self):
        self.store.add("Tomato", 5, "kg", DEC_1, 50.0)
        outcome = self.store.add("tomato", 3, "kg", DEC_1, 50.0)
        self.assertEqual(outcome, AddOutcome.MERGED)
        records = self.store.find_by_name("Tomato")
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].amount, 8)

    def test_matching_details_do_not_consult_decision(self):
        calls = []

        def decide(existing, incoming, mismatches):
            calls.append(mismatches)
            return MergeDecision.cancel()

        store = IngredientStore(decide).set_event_bus(EventBus())
        store.add("Milk", 1, "liter", DEC_1, 60.0)
        store.add("Milk", 1, "LITER", DEC_1, 60.0)
        self.assertEqual(calls, [])
        self.assertEqual(store.find_by_name("milk")[0].amount, 2)

    def test_store_decision_consulted_on_mismatch(self):
        calls = []

        def decide(existing, incoming, mismatches):
            calls.append((existing.unit_price, incoming.unit_price, mismatches))
            return MergeDecision.add_duplicate()

        store = IngredientStore(decide).set_event_bus(EventBus())
        store.add("Milk", 1, "liter", DEC_1, 60.0)
        outcome = store.add("Milk", 2, "liter", DEC_1, 55.0)
        self.assertEqual(calls, [(60.0, 55.0, [UNIT_PRICE])])
        self.assertEqual(outcome, AddOutcome.DUPLICATED)
        self.assertEqual([r.amount for r in store.find_by_name("milk")], [1, 2])

    def test_mismatch_default_merges_without_overwrite(self):
        self.store.add("Butter", 0.2, "kg", DEC_1, 20.0)
        outcome = self.store.add("Butter", 0.3, "kg", date(2024, 1, 1), 25.0)
        self.assertEqual(outcome, AddOutcome.MERGED)
        butter = self.store.find_by_name("Butter")[0]
        self.assertAlmostEqual(butter.amount, 0.5)
        self.assertEqual(butter.expire_date, DEC_1)
        self.assertEqual(butter.unit_price, 20.0)

    def test_mismatch_merge_overwrites_only_consented_fields(self):
        seen = []

        def decide(existing, incoming, mismatches):
            seen.append(mismatches)
            return MergeDecision.merge(unit_price=True)

        self.store.add("Flour", 1, "kg", DEC_1, 25.0)
        self.store.add("Flour", 2, "kg", date(2024, 5, 15), 30.0, decide=decide)
        self.assertEqual(seen, [[EXPIRE_DATE, UNIT_PRICE]])
        flour = self.store.find_by_name("Flour")[0]
        self.assertEqual(flour.amount, 3)
        self.assertEqual(flour.unit_price, 30.0)
        self.assertEqual(flour.expire_date, DEC_1)

    def test_mismatch_add_duplicate_keeps_original(self):
        self.store.add("Eggs", 10, "pcs", DEC_1, 50.0)
        outcome = self.store.add("Eggs", 6, "pcs", DEC_1, 30.0, decide=always(MergeDecision.add_duplicate()))
        self.assertEqual(outcome, AddOutcome.DUPLICATED)
        records = self.store.find_by_name("eggs")
        self.assertEqual([r.amount for r in records], [10, 6])
        self.assertEqual(records[0].unit_price, 50.0)

    def test_mismatch_cancel_changes_nothing(self):
        self.store.add("Eggs", 10, "pcs", DEC_1, 50.0)
        outcome = self.store.add("Eggs", 6, "dozen", DEC_1, 50.0, decide=always(MergeDecision.cancel()))
        self.assertEqual(outcome, AddOutcome.UNCHANGED)
        records = self.store.find_by_name("Eggs")
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].amount, 10)
        self.assertEqual(records[0].unit, "pcs")

    def test_remove_partial_amount(self):
        self.store.add("Eggs", 10, "pcs", DEC_1, 50.0)
        self.assertEqual(self.store.remove("eggs", 4), RemoveOutcome.DECREMENTED)
        self.assertEqual(self.store.find_by_name("Eggs")[0].amount, 6)

    def test_remove_whole_amount_deletes_record(self):
        self.store.add("Eggs", 10, "pcs", DEC_1, 50.0)
        self.assertEqual(self.store.remove("Eggs", 10), RemoveOutcome.DELETED)
        self.assertEqual(self.store.find_by_name("Eggs"), [])
        self.store.add("Milk", 1, "liter", DEC_1, 60.0)
        self.assertEqual(self.store.remove("Milk", 5), RemoveOutcome.DELETED)
        self.assertEqual(len(self.store), 0)

    def test_remove_missing_is_not_an_error(self):
        self.assertEqual(self.store.remove("Saffron", 1), RemoveOutcome.NOT_FOUND)

    def test_remove_touches_only_first_duplicate(self):
        self.store.add("Eggs", 2, "pcs", DEC_1, 50.0)
        self.store.add("Eggs", 6, "pcs", DEC_1, 30.0, decide=always(MergeDecision.add_duplicate()))
        self.store.remove("Eggs", 5)
        self.assertEqual([r.amount for r in self.store.find_by_name("Eggs")], [6])

    def test_stores_do_not_share_records(self):
        other = IngredientStore().set_event_bus(EventBus())
        self.store.add("Eggs", 2, "pcs", DEC_1, 50.0)
        self.assertEqual(len(other), 0)

    def test_default_stores_do_not_share_a_bus(self):
        first, second = IngredientStore(), IngredientStore()
        self.assertIsNot(first.event_bus, second.event_bus)
        seen = []
        second.event_bus.subscribe(STORAGE_INGREDIENT_ADDED, lambda name, payload: seen.append(payload))
        first.add("Eggs", 2, "pcs", DEC_1, 50.0)
        self.assertEqual(seen, [])
        second.add("Eggs", 2, "pcs", DEC_1, 50.0)
        self.assertEqual(len(seen), 1)

    def test_find_in_date_interval_is_inclusive_and_sorted(self):
        self.store.add("Late", 1, "pcs", date(2023, 12, 20), 1.0)
        self.store.add("Early", 1, "pcs", date(2023, 11, 1), 1.0)
        self.store.add("Middle", 1, "pcs", date(2023, 11, 15), 1.0)
        self.store.add("Outside", 1, "pcs", date(2024, 1, 1), 1.0)
        found = self.store.find_in_date_interval(date(2023, 11, 1), date(2023, 12, 20))
        self.assertEqual([i.name for i in found], ["Early", "Middle", "Late"])

    def test_find_in_date_interval_rejects_bad_range(self):
        with self.assertRaises(InvalidDateRangeError):
            self.store.find_in_date_interval(date(2023, 12, 1), date(2023, 11, 1))
        with self.assertRaises(InvalidDateRangeError):
            self.store.find_in_date_interval(None, date(2023, 11, 1))
        with self.assertRaises(ValueError):
            self.store.find_in_date_interval(date(2023, 11, 1), None)

    def test_expired_and_values(self):
        self.store.add("Milk", 2, "liter", date(2023, 11, 30), 60.0)
        self.store.add("Lettuce", 2, "head", date(2023, 11, 28), 40.0)
        self.store.add("Rice", 2, "kg", date(2025, 7, 15), 90.0)
        expired = self.store.expired(date(2023, 12, 1))
        self.assertEqual([i.name for i in expired], ["Lettuce", "Milk"])
        self.assertEqual(self.store.expired_value(date(2023, 12, 1)), 200.0)
        self.assertEqual(self.store.total_value(), 380.0)
        self.assertEqual(self.store.expired(date(2023, 11, 28)), [])

    def test_negative_amount_is_stored(self):
        self.store.add("Salt", -1, "g", DEC_1, 1.0)
        self.assertEqual(self.store.find_by_name("salt")[0].amount, -1)

    def test_str_of_empty_store(self):
        self.assertEqual(str(self.store), "Storage is empty.")


if __name__ == '__main__':
    unittest.main()
