"""Recipe feasibility against current storage.

Nothing in this module mutates the store or the catalog.

Duplicate-named storage records are resolved by ``duplicates``:
  "last" -> the last record with that name wins (the other records are ignored)
  "sum"  -> amounts of all records with that name are added together
"""
from __future__ import annotations
import logging
from typing import Dict, List, NamedTuple, Optional

from cookbook.domain.IngredientStore import IngredientStore
from cookbook.domain.Recipe import Recipe
from cookbook.domain.RecipeCatalog import RecipeCatalog
from cookbook.events.Event_Bus import EventBus, FEASIBILITY_SHORTFALL

logger = logging.getLogger(__name__)

__all__ = ["Shortfall", "Feasibility", "stock_levels", "can_make", "suggest", "times_possible"]

LAST_WINS = "last"
SUM = "sum"


class Shortfall(NamedTuple):
    ingredient_name: str
    required: float
    available: Optional[float]  # None when the ingredient is absent

    @property
    def absent(self) -> bool:
        return self.available is None

    def __str__(self) -> str:
        reason = "not available" if self.absent else f"only {self.available} available"
        return f"{self.ingredient_name} ({reason}, requires {self.required})"


class Feasibility(NamedTuple):
    ok: bool
    shortfalls: List[Shortfall]


def stock_levels(store: IngredientStore, duplicates: str = LAST_WINS) -> Dict[str, float]:
    """Lower-cased ingredient name -> amount on hand."""
    if duplicates not in (LAST_WINS, SUM):
        raise ValueError(f"Unknown duplicates policy: {duplicates}")
    stock: Dict[str, float] = {}
    for ing in store.get_items():
        key = ing.name.lower()
        if duplicates == SUM:
            stock[key] = stock.get(key, 0) + ing.amount
        else:
            stock[key] = ing.amount
    return stock


def _shortfalls(recipe: Recipe, stock: Dict[str, float]) -> List[Shortfall]:
    missing: List[Shortfall] = []
    for required in recipe.ingredients:
        available = stock.get(required.name.lower())
        if available is None or available < required.amount:
            missing.append(Shortfall(required.name, required.amount, available))
    return missing


def can_make(recipe: Recipe, store: IngredientStore, *, duplicates: str = LAST_WINS,
             bus: Optional[EventBus] = None) -> Feasibility:
    """Check every required ingredient of ``recipe`` against the store.

    Returns ``Feasibility(ok, shortfalls)``; ``shortfalls`` lists each
    requirement that is absent or under-supplied. A shortfall is published
    only on an explicitly given ``bus``.
    """
    missing = _shortfalls(recipe, stock_levels(store, duplicates))
    if missing:
        logger.info("Cannot make %s due to insufficient ingredients: %s",
                    recipe.name, "; ".join(str(s) for s in missing))
        if bus is not None:
            bus.publish(FEASIBILITY_SHORTFALL, {"recipe": recipe, "shortfalls": missing})
    return Feasibility(not missing, missing)


def suggest(catalog: RecipeCatalog, store: IngredientStore, *, duplicates: str = LAST_WINS) -> List[Recipe]:
    """Every catalog recipe that can be made from current stock."""
    stock = stock_levels(store, duplicates)
    makeable = [recipe for recipe in catalog.recipes() if not _shortfalls(recipe, stock)]
    logger.debug("%d of %d recipes can be made", len(makeable), len(catalog))
    return makeable


def times_possible(recipe: Recipe, store: IngredientStore, *, duplicates: str = LAST_WINS) -> int:
    """How many whole times ``recipe`` can be made from current stock."""
    stock = stock_levels(store, duplicates)
    if _shortfalls(recipe, stock):
        return 0
    times_min = None
    for required in recipe.ingredients:
        if required.amount <= 0:
            # zero requirement does not limit the count
            continue
        possible_here = int(stock[required.name.lower()] // required.amount)
        times_min = possible_here if times_min is None else min(times_min, possible_here)
    return times_min if times_min is not None else 0
