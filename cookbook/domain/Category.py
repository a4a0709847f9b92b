"""Recipe categories and the numeric band each one encodes in recipe ids."""
from enum import Enum
from typing import Optional, Union

from cookbook.domain.errors import InvalidCategoryError
from cookbook.utilities.constants import CATEGORY_PREFIXES


class Category(Enum):
    LUNCH = "Lunch"
    DINNER = "Dinner"
    BREAKFAST = "Breakfast"
    DESSERT = "Dessert"

    @property
    def label(self) -> str:
        return self.value

    @property
    def prefix(self) -> int:
        return CATEGORY_PREFIXES[self.value]

    @classmethod
    def parse(cls, value: Union["Category", str]) -> "Category":
        '''Accepts a Category or one of the canonical labels (exact spelling).'''
        category = cls.lookup(value)
        if category is None:
            raise InvalidCategoryError(value)
        return category

    @classmethod
    def lookup(cls, value, ignore_case: bool = False) -> Optional["Category"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        for category in cls:
            if category.value == value or (ignore_case and category.value.lower() == value.lower()):
                return category
        return None

    def __str__(self) -> str:
        return self.value
