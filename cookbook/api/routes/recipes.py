from fastapi import APIRouter, Depends, HTTPException, Query

from cookbook.api.session import Session, get_session
from cookbook.domain.Recipe import Recipe
from cookbook.domain.errors import CookbookError
from cookbook.logic.feasibility.evaluator import can_make, suggest, times_possible
from cookbook.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _summary(session: Session, recipe: Recipe) -> dict:
    data = recipe.to_dict()
    category = session.catalog.category_of(recipe)
    data['category'] = category.label if category else None
    return data


def _find(session: Session, name: str) -> Recipe:
    try:
        recipe = session.catalog.find_by_name(name)
    except CookbookError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe {name} not found")
    return recipe


@router.get("")
def list_recipes(session: Session = Depends(get_session)):
    recipes = session.catalog.recipes()
    return {'count': len(recipes), 'recipes': [_summary(session, r) for r in recipes]}


@router.post("")
def add_recipe(payload: RecipeInput, session: Session = Depends(get_session)):
    recipe = Recipe(payload.name, payload.description, payload.instructions)
    for ing in payload.ingredients:
        recipe.add_ingredient(ing.name, ing.amount, ing.unit, ing.expire_date, ing.unit_price)
    try:
        session.catalog.add(recipe, payload.category)
    except CookbookError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {'status': 'ok', 'recipe': _summary(session, recipe)}


@router.get("/find")
def find_recipe(name: str = Query(default=""), session: Session = Depends(get_session)):
    """Exact (case-sensitive) recipe name lookup."""
    return _summary(session, _find(session, name))


@router.get("/category/{category}")
def recipes_by_category(category: str, session: Session = Depends(get_session)):
    recipes = session.catalog.by_category(category)
    return {'category': category, 'count': len(recipes), 'recipes': [_summary(session, r) for r in recipes]}


@router.get("/can-make")
def can_make_recipe(name: str = Query(default=""), duplicates: str = Query(default="last", pattern="^(last|sum)$"),
                    session: Session = Depends(get_session)):
    recipe = _find(session, name)
    ok, shortfalls = can_make(recipe, session.store, duplicates=duplicates, bus=session.event_bus)
    return {
        'name': recipe.name,
        'ok': ok,
        'shortfalls': [
            {
                'ingredient': s.ingredient_name,
                'required': s.required,
                'available': s.available,
                'message': str(s),
            }
            for s in shortfalls
        ],
    }


@router.get("/available")
def available_recipes(duplicates: str = Query(default="last", pattern="^(last|sum)$"),
                      session: Session = Depends(get_session)):
    """Return recipes for which storage currently has all required ingredient amounts.

    Response JSON structure:
        {
          "count": <int>,
          "total": <int>,
          "recipes": [ { id, name, category, times_possible } ]
        }
    """
    makeable = suggest(session.catalog, session.store, duplicates=duplicates)
    return {
        'count': len(makeable),
        'total': len(session.catalog),
        'recipes': [
            {
                'id': r.recipe_id,
                'name': r.name,
                'category': _summary(session, r)['category'],
                'times_possible': times_possible(r, session.store, duplicates=duplicates),
            }
            for r in makeable
        ],
    }
