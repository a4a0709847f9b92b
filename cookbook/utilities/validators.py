"""
Input validation schemas using Pydantic for data reaching the storage and cookbook.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional
from datetime import date

from cookbook.domain.MergeDecision import MergeChoice, MergeDecision

CategoryLabel = Literal["Lunch", "Dinner", "Breakfast", "Dessert"]


class IngredientInput(BaseModel):
    """Schema for a storage ingredient."""
    name: str = Field(..., min_length=1, max_length=100)
    amount: float
    unit: str = Field(..., min_length=1, max_length=20)
    expire_date: date
    unit_price: float = 0.0

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        v = v.strip()
        if not v:
            raise ValueError('must not be blank')
        return v


class RecipeIngredientInput(IngredientInput):
    """Recipe requirement: same shape, expiration date optional."""
    expire_date: Optional[date] = None


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    instructions: str = ""
    category: CategoryLabel
    ingredients: List[RecipeIngredientInput] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()


class MergeDecisionInput(BaseModel):
    """Caller's answer when an added ingredient's details differ from the stored record."""
    choice: MergeChoice = MergeChoice.MERGE
    overwrite_unit: bool = False
    overwrite_expire_date: bool = False
    overwrite_unit_price: bool = False

    def to_decision(self) -> MergeDecision:
        return MergeDecision(self.choice, self.overwrite_unit, self.overwrite_expire_date,
                             self.overwrite_unit_price)


class AddIngredientInput(BaseModel):
    ingredient: IngredientInput
    decision: MergeDecisionInput = Field(default_factory=MergeDecisionInput)


class RemoveInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    amount: float
