"""Simple Event Bus / Observer implementation for storage and cookbook facts.

Event names used so far:
  storage.ingredient_added      -> {"ingredient": Ingredient}
  storage.ingredient_merged     -> {"ingredient": Ingredient, "added": float, "overwritten": [str]}
  storage.ingredient_duplicated -> {"ingredient": Ingredient, "existing": Ingredient}
  storage.add_cancelled         -> {"name": str, "mismatches": [str]}
  storage.ingredient_decremented -> {"ingredient": Ingredient, "removed": float}
  storage.ingredient_removed    -> {"ingredient": Ingredient}
  storage.ingredient_not_found  -> {"name": str}
  cookbook.recipe_added         -> {"recipe": Recipe, "category": Category}
  feasibility.shortfall         -> {"recipe": Recipe, "shortfalls": [Shortfall]}
  pantry.low_stock / pantry.near_expiry -> alert payloads from the pantry analysis

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
STORAGE_INGREDIENT_ADDED = "storage.ingredient_added"
STORAGE_INGREDIENT_MERGED = "storage.ingredient_merged"
STORAGE_INGREDIENT_DUPLICATED = "storage.ingredient_duplicated"
STORAGE_ADD_CANCELLED = "storage.add_cancelled"
STORAGE_INGREDIENT_DECREMENTED = "storage.ingredient_decremented"
STORAGE_INGREDIENT_REMOVED = "storage.ingredient_removed"
STORAGE_INGREDIENT_NOT_FOUND = "storage.ingredient_not_found"
COOKBOOK_RECIPE_ADDED = "cookbook.recipe_added"
FEASIBILITY_SHORTFALL = "feasibility.shortfall"
PANTRY_LOW_STOCK = "pantry.low_stock"
PANTRY_NEAR_EXPIRY = "pantry.near_expiry"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any = None):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


def log_listener(event_name: str, payload: Any):
	"""Listener that mirrors every event it receives to the log."""
	logger.info("[EVENT] %s: %s", event_name, payload)


__all__ = [
	'EventBus', 'log_listener',
	'STORAGE_INGREDIENT_ADDED', 'STORAGE_INGREDIENT_MERGED', 'STORAGE_INGREDIENT_DUPLICATED',
	'STORAGE_ADD_CANCELLED', 'STORAGE_INGREDIENT_DECREMENTED', 'STORAGE_INGREDIENT_REMOVED',
	'STORAGE_INGREDIENT_NOT_FOUND', 'COOKBOOK_RECIPE_ADDED', 'FEASIBILITY_SHORTFALL',
	'PANTRY_LOW_STOCK', 'PANTRY_NEAR_EXPIRY'
]
