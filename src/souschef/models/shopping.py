"""Shopping list models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from souschef.measurement.units import Unit
from souschef.models.recipe import GroceryCategory, coerce_category, coerce_unit


class ShoppingItem(BaseModel):
    """Single entry on a generated shopping list."""

    id: str
    list_id: str
    name: str
    quantity: float
    unit: Unit
    category: GroceryCategory = Field(default=GroceryCategory.OTHER)
    checked: bool = Field(default=False)
    recipe_ids: list[str] = Field(default_factory=list)
    cook_by_date: Optional[date] = Field(default=None)

    model_config = ConfigDict(frozen=True)

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, value: Any) -> GroceryCategory:
        return coerce_category(value)


class ShoppingList(BaseModel):
    """A shopping list generated from a menu or a set of recipes."""

    id: str
    menu_id: Optional[str] = Field(default=None)
    items: list[ShoppingItem] = Field(default_factory=list)
    created_at: datetime

    model_config = ConfigDict(frozen=True)


class CustomItemInput(BaseModel):
    """Hand-entered item with no recipe provenance."""

    name: str = Field(min_length=1, max_length=255)
    quantity: float = Field(default=1.0)
    unit: Unit = Field(default=Unit.PIECE)
    category: GroceryCategory = Field(default=GroceryCategory.OTHER)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("unit", mode="before")
    @classmethod
    def normalize_unit(cls, value: Any) -> Any:
        return coerce_unit(value)

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, value: Any) -> GroceryCategory:
        return coerce_category(value)


class CategoryBucket(BaseModel):
    """Items of one grocery category, as displayed together."""

    category: GroceryCategory
    items: list[ShoppingItem]

    model_config = ConfigDict(frozen=True)


__all__ = ["CategoryBucket", "CustomItemInput", "ShoppingItem", "ShoppingList"]
