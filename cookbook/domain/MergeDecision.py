"""Merge-consent protocol used by IngredientStore.add.

When an ingredient is added under a name that is already stored but with a
different unit, expiration date or price, the store asks a decision function
what to do. The function receives the existing record, the incoming record
and the names of the mismatched fields, and returns a MergeDecision.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List

from cookbook.domain.Ingredient import Ingredient

UNIT = "unit"
EXPIRE_DATE = "expire_date"
UNIT_PRICE = "unit_price"
MERGEABLE_FIELDS = (UNIT, EXPIRE_DATE, UNIT_PRICE)


class MergeChoice(Enum):
    MERGE = "merge"
    ADD_DUPLICATE = "add_duplicate"
    CANCEL = "cancel"


@dataclass(frozen=True)
class MergeDecision:
    choice: MergeChoice
    overwrite_unit: bool = False
    overwrite_expire_date: bool = False
    overwrite_unit_price: bool = False

    @classmethod
    def merge(cls, unit: bool = False, expire_date: bool = False, unit_price: bool = False) -> "MergeDecision":
        return cls(MergeChoice.MERGE, unit, expire_date, unit_price)

    @classmethod
    def add_duplicate(cls) -> "MergeDecision":
        return cls(MergeChoice.ADD_DUPLICATE)

    @classmethod
    def cancel(cls) -> "MergeDecision":
        return cls(MergeChoice.CANCEL)

    def overwrites(self, field: str) -> bool:
        return {
            UNIT: self.overwrite_unit,
            EXPIRE_DATE: self.overwrite_expire_date,
            UNIT_PRICE: self.overwrite_unit_price,
        }.get(field, False)


DecisionFunction = Callable[[Ingredient, Ingredient, List[str]], MergeDecision]


def keep_existing_details(existing: Ingredient, incoming: Ingredient, mismatches: List[str]) -> MergeDecision:
    """Default decision: merge the amount, keep every stored detail."""
    return MergeDecision.merge()


def always(decision: MergeDecision) -> DecisionFunction:
    """Decision function returning the same decision for every mismatch."""
    def _decide(existing: Ingredient, incoming: Ingredient, mismatches: List[str]) -> MergeDecision:
        return decision
    return _decide


def find_mismatches(existing: Ingredient, incoming: Ingredient) -> List[str]:
    '''Names of the detail fields that differ. Units compare case-insensitively.'''
    mismatches = []
    if (existing.unit or "").lower() != (incoming.unit or "").lower():
        mismatches.append(UNIT)
    if existing.expire_date != incoming.expire_date:
        mismatches.append(EXPIRE_DATE)
    if existing.unit_price != incoming.unit_price:
        mismatches.append(UNIT_PRICE)
    return mismatches
