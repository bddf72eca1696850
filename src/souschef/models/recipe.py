"""Recipe and ingredient data models consumed by the measurement engine."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from souschef.measurement.units import Unit, parse_unit


class GroceryCategory(str, Enum):
    """Store sections, in shopping display order."""

    PRODUCE = "produce"
    MEAT = "meat"
    SEAFOOD = "seafood"
    DAIRY = "dairy"
    BAKERY = "bakery"
    FROZEN = "frozen"
    PANTRY = "pantry"
    SPICES = "spices"
    BEVERAGES = "beverages"
    OTHER = "other"


def coerce_category(value: Any) -> GroceryCategory:
    """Map arbitrary input to a grocery category; anything unrecognised becomes ``other``."""
    if isinstance(value, GroceryCategory):
        return value
    if isinstance(value, str):
        try:
            return GroceryCategory(value.strip().lower())
        except ValueError:
            return GroceryCategory.OTHER
    return GroceryCategory.OTHER


def coerce_unit(value: Any) -> Any:
    """Accept spelled-out unit names wherever a :class:`Unit` is expected."""
    if isinstance(value, str) and not isinstance(value, Unit):
        parsed = parse_unit(value)
        if parsed is not None:
            return parsed
    return value


class Ingredient(BaseModel):
    """Single ingredient line of a recipe."""

    name: str
    quantity: float
    unit: Unit
    notes: Optional[str] = Field(default=None)
    category: Optional[GroceryCategory] = Field(default=None)

    model_config = ConfigDict(frozen=True)

    @field_validator("unit", mode="before")
    @classmethod
    def normalize_unit(cls, value: Any) -> Any:
        return coerce_unit(value)

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, value: Any) -> Optional[GroceryCategory]:
        if value is None:
            return None
        return coerce_category(value)


class Recipe(BaseModel):
    """Recipe as supplied by the recipe lookup collaborator."""

    id: str
    title: str = Field(default="")
    servings: int = Field(gt=0, description="Base servings the ingredient list yields.")
    ingredients: list[Ingredient] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


__all__ = ["GroceryCategory", "Ingredient", "Recipe", "coerce_category", "coerce_unit"]
