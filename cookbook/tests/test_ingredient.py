from datetime import date
import unittest
from cookbook.domain.Ingredient import Ingredient


class TestIngredient(unittest.TestCase):

    def test_set_amount(self):
        ingredient = Ingredient("Sugar", 100, "g", date(2024, 1, 1), 2.0)
        ingredient.set_amount(50)
        self.assertEqual(ingredient.amount, 150)
        ingredient.set_amount(-30)
        self.assertEqual(ingredient.amount, 120)

    def test_matches_ignores_case_only_on_name(self):
        ingredient = Ingredient("Eggs", 2, "pcs", date(2024, 1, 1), 5.0)
        self.assertTrue(ingredient.matches("eggs"))
        self.assertTrue(ingredient.matches("EGGS"))
        self.assertFalse(ingredient.matches("Egg"))

    def test_value_and_expiry(self):
        ingredient = Ingredient("Milk", 2, "liter", date(2023, 11, 30), 60.0)
        self.assertEqual(ingredient.value(), 120.0)
        self.assertTrue(ingredient.is_expired(date(2023, 12, 1)))
        self.assertFalse(ingredient.is_expired(date(2023, 11, 30)))

    def test_str_is_field_complete(self):
        ingredient = Ingredient("Tomato", 5, "kg", date(2023, 12, 2), 50.0)
        self.assertEqual(str(ingredient),
                         "Ingredient: Tomato 5 kg | Expire date: 2023-12-02 | Price: 50.0 kr")

    def test_dict_conversion(self):
        ingredient = Ingredient.from_dict({
            "name": "Flour", "amount": 1, "unit": "kg", "expire_date": "2024-05-15",
            "unit_price": 25.0, "unknown": "ignored",
        })
        self.assertEqual(ingredient.expire_date, date(2024, 5, 15))
        self.assertEqual(ingredient.to_dict()["expire_date"], "2024-05-15")
        self.assertEqual(ingredient.to_dict()["unit_price"], 25.0)


if __name__ == '__main__':
    unittest.main()
