"""Recipe domain entity: id, name, description, instructions, required ingredients."""
from datetime import date
from typing import List, Optional

from cookbook.domain.Ingredient import Ingredient


class Recipe:
    def __init__(self, name: str = "", description: str = "", instructions: str = "",
                 ingredients: Optional[List[Ingredient]] = None):
        self.recipe_id: Optional[int] = None
        self.name = name
        self.description = description
        self.instructions = instructions
        self.ingredients: List[Ingredient] = []
        for ing in ingredients or []:
            self.add_ingredient(ing.name, ing.amount, ing.unit, ing.expire_date, ing.unit_price)

    def assign_id(self, recipe_id: int):
        '''Ids are handed out once, by the catalog the recipe is added to.'''
        if self.recipe_id is not None:
            raise ValueError(f"Recipe '{self.name}' already has id {self.recipe_id}")
        self.recipe_id = recipe_id

    def add_ingredient(self, name: str, amount: float, unit: str,
                       expire_date: Optional[date] = None, unit_price: float = 0.0) -> "Recipe":
        """Add a required ingredient; a repeated name accumulates into the existing entry."""
        for ingredient in self.ingredients:
            if ingredient.matches(name):
                ingredient.set_amount(amount)
                return self
        self.ingredients.append(Ingredient(name, amount, unit, expire_date, unit_price))
        return self

    def __str__(self) -> str:
        lines = [
            f"Recipe: {self.name}",
            f"Description: {self.description}",
            f"Instruction: {self.instructions}",
            "Ingredients:",
        ]
        lines += [f"- {ing.name}: {ing.amount} {ing.unit}" for ing in self.ingredients]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Recipe(id={self.recipe_id}, name={self.name!r}, ingredients={len(self.ingredients)})"

    @staticmethod
    def from_dict(data):
        d = dict(data)
        recipe = Recipe(d.get("name", ""), d.get("description", ""), d.get("instructions", ""))
        for ing in d.get("ingredients", []):
            item = Ingredient.from_dict(ing)
            recipe.add_ingredient(item.name, item.amount, item.unit, item.expire_date, item.unit_price)
        return recipe

    def to_dict(self):
        return {
            "id": self.recipe_id,
            "name": self.name,
            "description": self.description,
            "instructions": self.instructions,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }
