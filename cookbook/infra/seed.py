"""Demo storage and cookbook built from the bundled JSON files.

Every call builds fresh instances; nothing is written back to disk.
"""
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from cookbook.domain.IngredientStore import IngredientStore
from cookbook.domain.Recipe import Recipe
from cookbook.domain.RecipeCatalog import RecipeCatalog
from cookbook.infra.paths import STORAGE_FILE, COOKBOOK_FILE
from cookbook.utilities.validators import IngredientInput, RecipeInput

logger = logging.getLogger(__name__)


def _read(path: Path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def load_storage(path: Optional[Path] = None, store: Optional[IngredientStore] = None) -> IngredientStore:
    """Fill ``store`` (a new one by default) with the demo ingredients."""
    store = store if store is not None else IngredientStore()
    for entry in _read(path or STORAGE_FILE):
        try:
            item = IngredientInput.model_validate(entry)
        except ValidationError as e:
            logger.warning("Skipping invalid storage entry %s: %s", entry.get('name'), e)
            continue
        store.add(item.name, item.amount, item.unit, item.expire_date, item.unit_price)
    logger.info("Loaded %d ingredients into storage", len(store))
    return store


def load_cookbook(path: Optional[Path] = None, catalog: Optional[RecipeCatalog] = None) -> RecipeCatalog:
    """Fill ``catalog`` (a new one by default) with the demo recipes."""
    catalog = catalog if catalog is not None else RecipeCatalog()
    for entry in _read(path or COOKBOOK_FILE):
        try:
            data = RecipeInput.model_validate(entry)
        except ValidationError as e:
            logger.warning("Skipping invalid recipe %s: %s", entry.get('name'), e)
            continue
        recipe = catalog.add(Recipe(data.name, data.description, data.instructions), data.category)
        for ing in data.ingredients:
            recipe.add_ingredient(ing.name, ing.amount, ing.unit, ing.expire_date, ing.unit_price)
    logger.info("Loaded %d recipes into the cookbook", len(catalog))
    return catalog
