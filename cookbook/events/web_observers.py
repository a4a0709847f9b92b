"""Recent-event log for the web layer.

An EventLog subscribes to an EventBus and keeps a bounded buffer of the facts
the storage and cookbook report, so the API can show what happened without
the domain doing any I/O.

Each event gets an auto-increment id (cursor); clients ask for ``since=<id>``
to fetch only newer ones.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    EventBus,
    STORAGE_INGREDIENT_ADDED, STORAGE_INGREDIENT_MERGED, STORAGE_INGREDIENT_DUPLICATED,
    STORAGE_ADD_CANCELLED, STORAGE_INGREDIENT_DECREMENTED, STORAGE_INGREDIENT_REMOVED,
    STORAGE_INGREDIENT_NOT_FOUND, COOKBOOK_RECIPE_ADDED, FEASIBILITY_SHORTFALL,
    PANTRY_LOW_STOCK, PANTRY_NEAR_EXPIRY,
)

MAX_EVENTS = 300  # keep a few hundred recent events

RECORDED_EVENTS = (
    STORAGE_INGREDIENT_ADDED, STORAGE_INGREDIENT_MERGED, STORAGE_INGREDIENT_DUPLICATED,
    STORAGE_ADD_CANCELLED, STORAGE_INGREDIENT_DECREMENTED, STORAGE_INGREDIENT_REMOVED,
    STORAGE_INGREDIENT_NOT_FOUND, COOKBOOK_RECIPE_ADDED, FEASIBILITY_SHORTFALL,
    PANTRY_LOW_STOCK, PANTRY_NEAR_EXPIRY,
)


class EventLog:
    def __init__(self, max_events: int = MAX_EVENTS):
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self.max_events = max_events

    def attach(self, bus: EventBus) -> "EventLog":
        for name in RECORDED_EVENTS:
            bus.subscribe(name, self.record)
        return self

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        with self._lock:
            evt = {
                'id': self._next_id,
                'type': event_name,
                'ts': datetime.now(timezone.utc).isoformat(),
            }
            if isinstance(payload, dict):
                ing = payload.get('ingredient')
                if ing is not None and hasattr(ing, 'name'):
                    evt['name'] = ing.name
                    evt['unit'] = ing.unit
                    evt['amount'] = ing.amount
                recipe = payload.get('recipe')
                if recipe is not None and hasattr(recipe, 'recipe_id'):
                    evt['recipe'] = recipe.name
                    evt['recipe_id'] = recipe.recipe_id
                if 'shortfalls' in payload:
                    evt['shortfalls'] = [str(s) for s in payload['shortfalls']]
                # Copy plain fields
                for k in ('name', 'unit', 'amount', 'added', 'removed', 'overwritten',
                          'mismatches', 'days_left', 'threshold'):
                    if k in payload and k not in evt:
                        evt[k] = payload[k]
            self._events.append(evt)
            self._next_id += 1
            # Trim buffer
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive), plus the cursor to poll with next."""
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['EventLog', 'MAX_EVENTS']
