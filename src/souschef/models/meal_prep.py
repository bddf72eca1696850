"""Meal prep analysis models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from souschef.measurement.units import Unit


class SharedIngredient(BaseModel):
    """Ingredient needed by more than one recipe of a prep session."""

    name: str
    unit: Unit
    total_quantity: float
    recipe_ids: list[str]
    quantities_per_recipe: dict[str, float] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


__all__ = ["SharedIngredient"]
