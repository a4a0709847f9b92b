"""IngredientStore aggregate: the ingredients currently in storage.

Every store owns its own list of records. Records are unique by name
(case-insensitive) as long as they come in through the normal merge path; a
declined merge may append a second record under the same name.
"""
import logging
from datetime import date
from enum import Enum
from typing import List, Optional

from cookbook.domain.Ingredient import Ingredient
from cookbook.domain.MergeDecision import (
    DecisionFunction, MergeChoice, keep_existing_details, find_mismatches,
    UNIT, EXPIRE_DATE, UNIT_PRICE,
)
from cookbook.domain.errors import InvalidDateRangeError
from cookbook.events.Event_Bus import (
    EventBus,
    STORAGE_INGREDIENT_ADDED, STORAGE_INGREDIENT_MERGED, STORAGE_INGREDIENT_DUPLICATED,
    STORAGE_ADD_CANCELLED, STORAGE_INGREDIENT_DECREMENTED, STORAGE_INGREDIENT_REMOVED,
    STORAGE_INGREDIENT_NOT_FOUND,
)

logger = logging.getLogger(__name__)


class AddOutcome(Enum):
    ADDED = "added"
    MERGED = "merged"
    DUPLICATED = "duplicated"
    UNCHANGED = "unchanged"


class RemoveOutcome(Enum):
    DECREMENTED = "decremented"
    DELETED = "deleted"
    NOT_FOUND = "not_found"


class IngredientStore:
    def __init__(self, decide: Optional[DecisionFunction] = None):
        self.items: List[Ingredient] = []
        self._decide = decide or keep_existing_details
        self._event_bus = EventBus()

    # --- Observer helpers -------------------------------------------------
    @property
    def event_bus(self):
        return self._event_bus

    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    # --- Mutators ---------------------------------------------------------
    def add(self, name: str, amount: float, unit: str, expire_date: Optional[date],
            unit_price: float, decide: Optional[DecisionFunction] = None) -> AddOutcome:
        '''
        Adds an ingredient, merging it into an existing record of the same name.

        Identical details merge silently. Mismatched details are handed to the
        decision function (``decide`` for this call, else the store's own) which
        chooses between merging, adding a separate record or doing nothing.
        '''
        incoming = Ingredient(name, amount, unit, expire_date, unit_price)
        existing = self._first(name)
        if existing is None:
            self.items.append(incoming)
            logger.info("Added new ingredient: %s (%s %s)", name, amount, unit)
            self._event_bus.publish(STORAGE_INGREDIENT_ADDED, {"ingredient": incoming})
            return AddOutcome.ADDED

        mismatches = find_mismatches(existing, incoming)
        if not mismatches:
            existing.set_amount(amount)
            logger.info("Ingredient '%s' merged, amount now %s %s", existing.name, existing.amount, existing.unit)
            self._event_bus.publish(STORAGE_INGREDIENT_MERGED, {
                "ingredient": existing, "added": amount, "overwritten": []
            })
            return AddOutcome.MERGED

        logger.info("Ingredient '%s' already exists with different %s", existing.name, ", ".join(mismatches))
        decision = (decide or self._decide)(existing, incoming, list(mismatches))

        if decision.choice is MergeChoice.MERGE:
            existing.set_amount(amount)
            overwritten = [field for field in mismatches if decision.overwrites(field)]
            if UNIT in overwritten:
                existing.unit = unit
            if EXPIRE_DATE in overwritten:
                existing.expire_date = expire_date
            if UNIT_PRICE in overwritten:
                existing.unit_price = unit_price
            logger.info("Ingredient '%s' updated, overwritten fields: %s", existing.name, overwritten or "none")
            self._event_bus.publish(STORAGE_INGREDIENT_MERGED, {
                "ingredient": existing, "added": amount, "overwritten": overwritten
            })
            return AddOutcome.MERGED

        if decision.choice is MergeChoice.ADD_DUPLICATE:
            self.items.append(incoming)
            logger.info("Added new ingredient entry: %s (%s %s)", name, amount, unit)
            self._event_bus.publish(STORAGE_INGREDIENT_DUPLICATED, {
                "ingredient": incoming, "existing": existing
            })
            return AddOutcome.DUPLICATED

        logger.info("No changes were made to '%s'", existing.name)
        self._event_bus.publish(STORAGE_ADD_CANCELLED, {"name": name, "mismatches": mismatches})
        return AddOutcome.UNCHANGED

    def remove(self, name: str, amount: float) -> RemoveOutcome:
        '''
        Removes an amount from the first record with the given name.
        The record is deleted once the requested amount covers what is left.
        '''
        item = self._first(name)
        if item is None:
            logger.info("Ingredient %s not found in storage", name)
            self._event_bus.publish(STORAGE_INGREDIENT_NOT_FOUND, {"name": name})
            return RemoveOutcome.NOT_FOUND
        if item.amount > amount:
            item.set_amount(-amount)
            logger.info("%s. Remaining amount: %s %s", item.name, item.amount, item.unit)
            self._event_bus.publish(STORAGE_INGREDIENT_DECREMENTED, {"ingredient": item, "removed": amount})
            return RemoveOutcome.DECREMENTED
        self.items.remove(item)
        logger.info("Removed %s from storage", item.name)
        self._event_bus.publish(STORAGE_INGREDIENT_REMOVED, {"ingredient": item})
        return RemoveOutcome.DELETED

    # --- Queries ----------------------------------------------------------
    def _first(self, name: str) -> Optional[Ingredient]:
        return next((item for item in self.items if item.matches(name)), None)

    def find_by_name(self, name: str) -> List[Ingredient]:
        return [item for item in self.items if item.matches(name)]

    def find_in_date_interval(self, lower: Optional[date], upper: Optional[date]) -> List[Ingredient]:
        '''Ingredients expiring within [lower, upper], earliest first.'''
        if lower is None or upper is None:
            raise InvalidDateRangeError("Date range cannot be null.")
        if lower > upper:
            raise InvalidDateRangeError("Lower date cannot be after upper date.")
        found = [item for item in self.items
                 if item.expire_date is not None and lower <= item.expire_date <= upper]
        return sorted(found, key=lambda item: item.expire_date)

    def expired(self, as_of: Optional[date] = None) -> List[Ingredient]:
        '''Ingredients whose expiration date is strictly before ``as_of`` (today by default).'''
        as_of = as_of or date.today()
        return sorted((item for item in self.items if item.is_expired(as_of)),
                      key=lambda item: item.expire_date)

    def total_value(self) -> float:
        return sum(item.value() for item in self.items)

    def expired_value(self, as_of: Optional[date] = None) -> float:
        return sum(item.value() for item in self.expired(as_of))

    def get_items(self) -> List[Ingredient]:
        '''
        Returns a copy of the stored records.
        '''
        return list(self.items)

    def sorted_items(self) -> List[Ingredient]:
        return sorted(self.items, key=Ingredient.sort_key)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(list(self.items))

    def __str__(self) -> str:
        if not self.items:
            return "Storage is empty."
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self):
        return [item.to_dict() for item in self.items]
