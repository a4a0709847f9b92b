from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from cookbook.api.session import Session, get_session
from cookbook.domain.errors import CookbookError
from cookbook.logic.pantry.analysis import publish_alerts
from cookbook.utilities.config import CURRENCY
from cookbook.utilities.validators import AddIngredientInput, RemoveInput
from cookbook.domain.MergeDecision import always

router = APIRouter(prefix="/api/storage", tags=["storage"])


def _items(ingredients):
    return [ing.to_dict() for ing in ingredients]


@router.get("")
def list_storage(session: Session = Depends(get_session)):
    """All stored ingredients, sorted by name then expiration date."""
    store = session.store
    return {
        'count': len(store),
        'total_value': store.total_value(),
        'currency': CURRENCY,
        'items': _items(store.sorted_items()),
    }


@router.post("")
def add_ingredient(payload: AddIngredientInput, session: Session = Depends(get_session)):
    """Add an ingredient; ``decision`` answers a detail mismatch with a stored record."""
    ing = payload.ingredient
    outcome = session.store.add(ing.name, ing.amount, ing.unit, ing.expire_date, ing.unit_price,
                                decide=always(payload.decision.to_decision()))
    return {'outcome': outcome.value, 'items': _items(session.store.find_by_name(ing.name))}


@router.post("/remove")
def remove_ingredient(payload: RemoveInput, session: Session = Depends(get_session)):
    outcome = session.store.remove(payload.name, payload.amount)
    return {'outcome': outcome.value, 'items': _items(session.store.find_by_name(payload.name))}


@router.get("/search")
def search_storage(name: str = Query(..., min_length=1), session: Session = Depends(get_session)):
    found = sorted(session.store.find_by_name(name), key=lambda ing: ing.sort_key())
    return {'count': len(found), 'items': _items(found)}


@router.get("/interval")
def storage_in_interval(lower: Optional[date] = Query(default=None), upper: Optional[date] = Query(default=None),
                        session: Session = Depends(get_session)):
    try:
        found = session.store.find_in_date_interval(lower, upper)
    except CookbookError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {'count': len(found), 'items': _items(found)}


@router.get("/expired")
def expired_storage(as_of: Optional[date] = Query(default=None), session: Session = Depends(get_session)):
    found = session.store.expired(as_of)
    return {'count': len(found), 'value': session.store.expired_value(as_of), 'items': _items(found)}


@router.get("/value")
def storage_value(as_of: Optional[date] = Query(default=None), session: Session = Depends(get_session)):
    return {
        'total': session.store.total_value(),
        'expired': session.store.expired_value(as_of),
        'currency': CURRENCY,
    }


@router.get("/alerts")
def storage_alerts(as_of: Optional[date] = Query(default=None), window: Optional[int] = Query(default=None, ge=0),
                   session: Session = Depends(get_session)):
    """Expiring-soon and low-stock snapshots; each entry is also published as an event."""
    expiring, low = publish_alerts(session.store, as_of, window=window)
    return {'expiring_soon': expiring, 'low_stock': low}
