"""Unit algebra: same-category conversion and best-unit selection per system."""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

from souschef.models.recipe import Ingredient

from .units import Unit, UnitCategory, UnitSystem, category, system

logger = logging.getLogger(__name__)

# Multiplicative factor from each unit to its category base unit (ml or g).
BASE_FACTORS: Dict[Unit, float] = {
    Unit.TEASPOON: 4.92892,
    Unit.TABLESPOON: 14.7868,
    Unit.FLUID_OUNCE: 29.5735,
    Unit.CUP: 236.588,
    Unit.PINT: 473.176,
    Unit.QUART: 946.353,
    Unit.GALLON: 3785.41,
    Unit.MILLILITER: 1.0,
    Unit.LITER: 1000.0,
    Unit.OUNCE: 28.3495,
    Unit.POUND: 453.592,
    Unit.GRAM: 1.0,
    Unit.KILOGRAM: 1000.0,
}

BASE_UNITS: Dict[UnitCategory, Unit] = {
    UnitCategory.VOLUME: Unit.MILLILITER,
    UnitCategory.WEIGHT: Unit.GRAM,
}

# Ordered (exclusive upper bound in base units, unit) pairs; the last bound is unbounded.
THRESHOLDS: Dict[Tuple[UnitCategory, UnitSystem], List[Tuple[float, Unit]]] = {
    (UnitCategory.VOLUME, UnitSystem.US): [
        (14.7868, Unit.TEASPOON),
        (59.1471, Unit.TABLESPOON),
        (946.353, Unit.CUP),
        (3785.41, Unit.QUART),
        (math.inf, Unit.GALLON),
    ],
    (UnitCategory.VOLUME, UnitSystem.METRIC): [
        (1000.0, Unit.MILLILITER),
        (math.inf, Unit.LITER),
    ],
    (UnitCategory.WEIGHT, UnitSystem.US): [
        (453.592, Unit.OUNCE),
        (math.inf, Unit.POUND),
    ],
    (UnitCategory.WEIGHT, UnitSystem.METRIC): [
        (1000.0, Unit.GRAM),
        (math.inf, Unit.KILOGRAM),
    ],
}

PREFERRED_UNITS: Dict[UnitSystem, Dict[UnitCategory, List[Unit]]] = {
    UnitSystem.US: {
        UnitCategory.VOLUME: [
            Unit.TEASPOON,
            Unit.TABLESPOON,
            Unit.CUP,
            Unit.PINT,
            Unit.QUART,
            Unit.GALLON,
        ],
        UnitCategory.WEIGHT: [Unit.OUNCE, Unit.POUND],
    },
    UnitSystem.METRIC: {
        UnitCategory.VOLUME: [Unit.MILLILITER, Unit.LITER],
        UnitCategory.WEIGHT: [Unit.GRAM, Unit.KILOGRAM],
    },
}


def _is_convertible(kind: UnitCategory) -> bool:
    if kind is UnitCategory.VOLUME or kind is UnitCategory.WEIGHT:
        return True
    if kind is UnitCategory.COUNT or kind is UnitCategory.SPECIAL:
        return False
    raise AssertionError(f"Unhandled unit category {kind!r}")


def to_base(quantity: float, unit: Unit) -> Optional[float]:
    """Express ``quantity`` in the base unit of its category, or ``None`` if not convertible."""
    if not _is_convertible(category(unit)):
        return None
    return quantity * BASE_FACTORS[unit]


def convert(quantity: float, from_unit: Unit, to_unit: Unit) -> Optional[float]:
    """Convert ``quantity`` between two units of the same category.

    Identical units return the quantity untouched. Crossing categories, or involving a
    count or special unit, is not possible without a density model and yields ``None``.
    """
    if from_unit == to_unit:
        return quantity

    from_category = category(from_unit)
    if from_category is not category(to_unit) or not _is_convertible(from_category):
        logger.debug("Incompatible conversion requested %s -> %s", from_unit.value, to_unit.value)
        return None

    return quantity * BASE_FACTORS[from_unit] / BASE_FACTORS[to_unit]


def best_unit_for_system(
    quantity: float, from_unit: Unit, target_system: UnitSystem
) -> Optional[Unit]:
    """Pick the most readable unit of ``target_system`` for the given amount."""
    base_quantity = to_base(quantity, from_unit)
    if base_quantity is None:
        return None

    thresholds = THRESHOLDS[(category(from_unit), target_system)]
    for upper_bound, unit in thresholds:
        if base_quantity < upper_bound:
            return unit
    return thresholds[-1][1]


def convert_to_system(ingredient: Ingredient, target_system: UnitSystem) -> Ingredient:
    """Return ``ingredient`` re-expressed in ``target_system``; never raises.

    Count and special units, ingredients already in the target system and
    unconvertible amounts come back unchanged.
    """
    current_system = system(ingredient.unit)
    if current_system is None or current_system == target_system:
        return ingredient

    target_unit = best_unit_for_system(ingredient.quantity, ingredient.unit, target_system)
    if target_unit is None:
        return ingredient

    converted = convert(ingredient.quantity, ingredient.unit, target_unit)
    if converted is None:
        return ingredient

    return ingredient.model_copy(update={"quantity": converted, "unit": target_unit})


def are_units_compatible(first: Unit, second: Unit) -> bool:
    """True when a quantity in ``first`` can be converted to ``second``."""
    if first == second:
        return True
    first_category = category(first)
    return first_category is category(second) and _is_convertible(first_category)


def units_for_system(target_system: UnitSystem) -> List[Unit]:
    """Preferred volume then weight units for ``target_system``."""
    preferred = PREFERRED_UNITS[target_system]
    return [*preferred[UnitCategory.VOLUME], *preferred[UnitCategory.WEIGHT]]


__all__ = [
    "BASE_FACTORS",
    "BASE_UNITS",
    "THRESHOLDS",
    "PREFERRED_UNITS",
    "to_base",
    "convert",
    "best_unit_for_system",
    "convert_to_system",
    "are_units_compatible",
    "units_for_system",
]
