"""RecipeCatalog aggregate: recipes indexed by id and by category.

Ids are generated from the catalog's own state, ``prefix * 1000 + n`` where
``prefix`` is the category band and ``n`` the recipe's position in its
category, so every id encodes the category it was filed under.
"""
import logging
from typing import Dict, List, Optional, Union

from cookbook.domain.Category import Category
from cookbook.domain.Recipe import Recipe
from cookbook.domain.errors import InvalidRecipeNameError
from cookbook.events.Event_Bus import EventBus, COOKBOOK_RECIPE_ADDED
from cookbook.utilities.constants import RECIPE_ID_BAND

logger = logging.getLogger(__name__)


class RecipeCatalog:
    def __init__(self):
        self._recipes: Dict[int, Recipe] = {}
        self._by_category: Dict[Category, List[Recipe]] = {category: [] for category in Category}
        self._category_of: Dict[int, Category] = {}
        self._event_bus = EventBus()

    @property
    def event_bus(self):
        return self._event_bus

    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def next_id(self, category: Union[Category, str]) -> int:
        '''Id the next recipe filed under ``category`` will receive.'''
        category = Category.parse(category)
        return category.prefix * RECIPE_ID_BAND + len(self._by_category[category]) + 1

    def add(self, recipe: Recipe, category: Union[Category, str]) -> Recipe:
        '''
        Files a recipe under a category and assigns its id.
        Returns the recipe so ingredients can be chained onto it.
        '''
        category = Category.parse(category)
        recipe_id = self.next_id(category)
        recipe.assign_id(recipe_id)
        self._recipes[recipe_id] = recipe
        self._by_category[category].append(recipe)
        self._category_of[recipe_id] = category
        logger.info("Recipe added: %s with ID: %s", recipe.name, recipe_id)
        self._event_bus.publish(COOKBOOK_RECIPE_ADDED, {"recipe": recipe, "category": category})
        return recipe

    def find_by_name(self, name: str) -> Optional[Recipe]:
        """First recipe whose name matches exactly (case-sensitive)."""
        if not name:
            raise InvalidRecipeNameError()
        return next((recipe for recipe in self._recipes.values() if recipe.name == name), None)

    def by_category(self, category: Union[Category, str]) -> List[Recipe]:
        found = Category.lookup(category, ignore_case=True)
        if found is None:
            logger.debug("No recipes found under category: %s", category)
            return []
        return list(self._by_category[found])

    def category_of(self, recipe: Recipe) -> Optional[Category]:
        if self._recipes.get(recipe.recipe_id) is not recipe:
            return None
        return self._category_of[recipe.recipe_id]

    def categories(self) -> Dict[Category, List[Recipe]]:
        return {category: list(recipes) for category, recipes in self._by_category.items()}

    def get(self, recipe_id: int) -> Optional[Recipe]:
        return self._recipes.get(recipe_id)

    def recipes(self) -> List[Recipe]:
        return list(self._recipes.values())

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self):
        return iter(self.recipes())

    def __str__(self) -> str:
        if not self._recipes:
            return "No recipes found in the cookbook."
        return "\n\n".join(str(recipe) for recipe in self._recipes.values())
