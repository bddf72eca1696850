"""Ingredient consolidation across recipes for shopping lists and meal prep."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from souschef.measurement.scaling import scale_factor
from souschef.measurement.units import Unit
from souschef.models.meal_prep import SharedIngredient
from souschef.models.recipe import GroceryCategory, Ingredient, Recipe

logger = logging.getLogger(__name__)

RecipeProvider = Callable[[str], Optional[Recipe]]


def normalize_ingredient_name(value: str) -> str:
    return value.strip().lower()


@dataclass(frozen=True)
class ConsolidationKey:
    """Identity under which ingredient lines are merged: normalized name plus exact unit."""

    name: str
    unit: Unit

    @classmethod
    def for_ingredient(cls, ingredient: Ingredient) -> "ConsolidationKey":
        return cls(normalize_ingredient_name(ingredient.name), ingredient.unit)


@dataclass(frozen=True)
class RecipeDemand:
    """How many servings of a recipe are wanted, and by when."""

    servings: float
    relevant_date: Optional[date] = None


@dataclass
class ConsolidationEntry:
    """Running total for one consolidation key."""

    name: str
    quantity: float
    unit: Unit
    category: GroceryCategory
    recipe_ids: Dict[str, None] = field(default_factory=dict)
    earliest_date: Optional[date] = None

    @property
    def contributing_recipe_ids(self) -> List[str]:
        return list(self.recipe_ids)

    def absorb(self, quantity: float, recipe_id: str, relevant_date: Optional[date]) -> None:
        self.quantity += quantity
        self.recipe_ids.setdefault(recipe_id, None)
        if relevant_date is not None and (
            self.earliest_date is None or relevant_date < self.earliest_date
        ):
            self.earliest_date = relevant_date


def consolidate_ingredients(
    demands: Mapping[str, RecipeDemand],
    recipe_provider: RecipeProvider,
) -> List[ConsolidationEntry]:
    """Merge the scaled ingredient lines of every demanded recipe.

    Lines merge only when their normalized name and unit are identical; the same
    ingredient in two different units stays as two entries. The first occurrence fixes
    the displayed name, the unit and the grocery category. Recipes the provider cannot
    find are skipped.
    """
    consolidated: Dict[ConsolidationKey, ConsolidationEntry] = {}

    for recipe_id, demand in demands.items():
        recipe = recipe_provider(recipe_id)
        if recipe is None:
            logger.debug("Skipping unknown recipe %s during consolidation", recipe_id)
            continue

        factor = scale_factor(recipe.servings, demand.servings)
        for ingredient in recipe.ingredients:
            key = ConsolidationKey.for_ingredient(ingredient)
            scaled_quantity = ingredient.quantity * factor

            entry = consolidated.get(key)
            if entry is None:
                entry = ConsolidationEntry(
                    name=ingredient.name,
                    quantity=0.0,
                    unit=ingredient.unit,
                    category=ingredient.category or GroceryCategory.OTHER,
                    earliest_date=demand.relevant_date,
                )
                consolidated[key] = entry
            entry.absorb(scaled_quantity, recipe_id, demand.relevant_date)

    logger.debug(
        "Consolidated %s recipe(s) into %s shopping entr%s",
        len(demands),
        len(consolidated),
        "y" if len(consolidated) == 1 else "ies",
    )
    return list(consolidated.values())


def analyze_shared_ingredients(
    recipes: Sequence[Recipe],
    servings_override: Optional[Mapping[str, float]] = None,
) -> List[SharedIngredient]:
    """Find ingredients used by more than one recipe of a prep session.

    Without an override every recipe is taken at its base servings.
    """
    per_key: Dict[ConsolidationKey, tuple[str, Dict[str, float]]] = {}

    for recipe in recipes:
        factor = 1.0
        if servings_override is not None:
            factor = scale_factor(
                recipe.servings, servings_override.get(recipe.id, recipe.servings)
            )
        for ingredient in recipe.ingredients:
            key = ConsolidationKey.for_ingredient(ingredient)
            name, quantities = per_key.setdefault(key, (ingredient.name, {}))
            quantities[recipe.id] = quantities.get(recipe.id, 0.0) + ingredient.quantity * factor

    shared: List[SharedIngredient] = []
    for key, (name, quantities) in per_key.items():
        if len(quantities) < 2:
            continue
        shared.append(
            SharedIngredient(
                name=name,
                unit=key.unit,
                total_quantity=sum(quantities.values()),
                recipe_ids=list(quantities),
                quantities_per_recipe=dict(quantities),
            )
        )
    return shared


__all__ = [
    "ConsolidationEntry",
    "ConsolidationKey",
    "RecipeDemand",
    "RecipeProvider",
    "consolidate_ingredients",
    "analyze_shared_ingredients",
    "normalize_ingredient_name",
]
