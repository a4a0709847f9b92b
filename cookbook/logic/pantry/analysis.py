"""Storage analysis helpers: expiring-soon and low-stock snapshots."""
from __future__ import annotations
from datetime import date as _date
from typing import List, Dict, Any, Optional
from cookbook.domain.IngredientStore import IngredientStore
from cookbook.events.Event_Bus import PANTRY_LOW_STOCK, PANTRY_NEAR_EXPIRY
from cookbook.utilities.config import DAYS_BEFORE_EXPIRY, LOW_STOCK_THRESHOLD
from cookbook.utilities.constants import DATE_FORMAT

__all__ = ["compute_expiring_soon", "compute_low_stock", "compute_pantry_snapshots", "publish_alerts"]


def compute_expiring_soon(store: IngredientStore, as_of: Optional[_date] = None, *,
                          window: int | None = None) -> List[Dict[str, Any]]:
    """Return ingredients expiring in <= window days (including already expired)."""
    expiring_window = window if window is not None else DAYS_BEFORE_EXPIRY
    today = as_of or _date.today()
    result: List[Dict[str, Any]] = []
    for ing in store.get_items():
        if ing.expire_date is None:
            continue
        days_left = (ing.expire_date - today).days
        if days_left <= expiring_window:
            result.append({
                'name': ing.name,
                'amount': ing.amount,
                'unit': ing.unit,
                'exp': ing.expire_date.strftime(DATE_FORMAT),
                'days_left': days_left,
            })
    result.sort(key=lambda x: (x['days_left'], x['name']))
    return result


def compute_low_stock(store: IngredientStore, thresholds: Optional[Dict[str, float]] = None) -> List[Dict[str, Any]]:
    """Return ingredients whose amount is at or below the threshold for their unit."""
    limits = LOW_STOCK_THRESHOLD if thresholds is None else thresholds
    low: List[Dict[str, Any]] = []
    for ing in store.get_items():
        th = limits.get(ing.unit.lower(), 0)
        if th > 0 and ing.amount <= th:
            low.append({
                'name': ing.name,
                'amount': ing.amount,
                'unit': ing.unit,
                'threshold': th,
            })
    low.sort(key=lambda x: (x['amount'], x['name']))
    return low


def compute_pantry_snapshots(store: IngredientStore, as_of: Optional[_date] = None, *, window: int | None = None):
    exp = compute_expiring_soon(store, as_of, window=window)
    low = compute_low_stock(store)
    return exp, low


def publish_alerts(store: IngredientStore, as_of: Optional[_date] = None, *, window: int | None = None):
    """Publish one pantry alert event per expiring or low-stock ingredient."""
    exp, low = compute_pantry_snapshots(store, as_of, window=window)
    for entry in exp:
        store.event_bus.publish(PANTRY_NEAR_EXPIRY, entry)
    for entry in low:
        store.event_bus.publish(PANTRY_LOW_STOCK, entry)
    return exp, low
