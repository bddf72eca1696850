"""Scaling and practical rounding of ingredient quantities."""

from __future__ import annotations

import math
from typing import Optional

from souschef.errors import ValidationError
from souschef.models.recipe import Ingredient, Recipe

from .conversion import convert_to_system
from .units import Unit, UnitCategory, UnitSystem, category

# Scanned in order; on equal distance the earlier fraction wins.
PRACTICAL_FRACTIONS = (0.125, 0.25, 0.333, 0.5, 0.667, 0.75, 1.0)

SMALL_QUANTITY_LIMIT = 0.125
NEGLIGIBLE_FRACTION = 0.0625


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def round_to_practical(quantity: float, unit: Unit) -> float:
    """Round ``quantity`` to a measurement a cook can actually portion out.

    * below 1/8 the value keeps two decimals;
    * count units round to the nearest half;
    * special units (pinch, dash, to taste) round to whole numbers;
    * volume and weight drop fractions under 1/16 and otherwise snap the fraction
      to the closest of 1/8, 1/4, 1/3, 1/2, 2/3, 3/4 or a whole unit.
    """
    if quantity < SMALL_QUANTITY_LIMIT:
        return _round_half_up(quantity * 100) / 100

    kind = category(unit)
    if kind is UnitCategory.COUNT:
        return _round_half_up(quantity * 2) / 2
    if kind is UnitCategory.SPECIAL:
        return float(_round_half_up(quantity))

    whole = math.floor(quantity)
    fraction = quantity - whole
    if fraction < NEGLIGIBLE_FRACTION:
        return float(whole)

    closest = 0.0
    min_distance = math.inf
    for candidate in PRACTICAL_FRACTIONS:
        distance = abs(fraction - candidate)
        if distance < min_distance:
            min_distance = distance
            closest = candidate

    if closest == 1.0:
        return float(whole + 1)
    return whole + closest


def scale_ingredient(ingredient: Ingredient, factor: float) -> Ingredient:
    """Multiply the ingredient quantity by ``factor``; unit and category are kept."""
    return ingredient.model_copy(update={"quantity": ingredient.quantity * factor})


def scale_recipe(recipe: Recipe, factor: float) -> Recipe:
    """Scale every ingredient of ``recipe`` and round the servings to a whole number."""
    if factor <= 0:
        raise ValidationError(f"Scale factor must be positive, got {factor}")
    servings = int(_round_half_up(recipe.servings * factor))
    if servings <= 0:
        raise ValidationError(
            f"Scaling {recipe.servings} servings by {factor} leaves no servings"
        )
    return recipe.model_copy(
        update={
            "ingredients": [scale_ingredient(ing, factor) for ing in recipe.ingredients],
            "servings": servings,
        }
    )


def scale_factor(base_servings: float, requested_servings: float) -> float:
    """Ratio between requested and base servings, both of which must be positive."""
    if base_servings <= 0:
        raise ValidationError(f"Base servings must be positive, got {base_servings}")
    if requested_servings <= 0:
        raise ValidationError(f"Requested servings must be positive, got {requested_servings}")
    return requested_servings / base_servings


def scale_to_servings(recipe: Recipe, servings: int) -> Recipe:
    return scale_recipe(recipe, scale_factor(recipe.servings, servings))


def present_ingredient(
    ingredient: Ingredient,
    target_system: Optional[UnitSystem] = None,
    practical: bool = True,
) -> Ingredient:
    """Prepare an ingredient for display: convert to ``target_system`` then round."""
    shown = convert_to_system(ingredient, target_system) if target_system else ingredient
    if practical:
        shown = shown.model_copy(
            update={"quantity": round_to_practical(shown.quantity, shown.unit)}
        )
    return shown


__all__ = [
    "PRACTICAL_FRACTIONS",
    "round_to_practical",
    "scale_ingredient",
    "scale_recipe",
    "scale_factor",
    "scale_to_servings",
    "present_ingredient",
]
