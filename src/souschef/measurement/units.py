"""Unit taxonomy: categories and measurement systems for every supported unit."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class UnitCategory(str, Enum):
    """Physical dimension a unit measures."""

    VOLUME = "volume"
    WEIGHT = "weight"
    COUNT = "count"
    SPECIAL = "special"


class UnitSystem(str, Enum):
    """Display preference for measurements."""

    US = "us"
    METRIC = "metric"


class Unit(str, Enum):
    """Every unit an ingredient quantity may be expressed in."""

    TEASPOON = "tsp"
    TABLESPOON = "tbsp"
    FLUID_OUNCE = "fl_oz"
    CUP = "cup"
    PINT = "pint"
    QUART = "quart"
    GALLON = "gallon"
    MILLILITER = "ml"
    LITER = "l"
    OUNCE = "oz"
    POUND = "lb"
    GRAM = "g"
    KILOGRAM = "kg"
    PIECE = "piece"
    DOZEN = "dozen"
    PINCH = "pinch"
    DASH = "dash"
    TO_TASTE = "to_taste"


_TAXONOMY: Dict[Unit, tuple[UnitCategory, Optional[UnitSystem]]] = {
    Unit.TEASPOON: (UnitCategory.VOLUME, UnitSystem.US),
    Unit.TABLESPOON: (UnitCategory.VOLUME, UnitSystem.US),
    Unit.FLUID_OUNCE: (UnitCategory.VOLUME, UnitSystem.US),
    Unit.CUP: (UnitCategory.VOLUME, UnitSystem.US),
    Unit.PINT: (UnitCategory.VOLUME, UnitSystem.US),
    Unit.QUART: (UnitCategory.VOLUME, UnitSystem.US),
    Unit.GALLON: (UnitCategory.VOLUME, UnitSystem.US),
    Unit.MILLILITER: (UnitCategory.VOLUME, UnitSystem.METRIC),
    Unit.LITER: (UnitCategory.VOLUME, UnitSystem.METRIC),
    Unit.OUNCE: (UnitCategory.WEIGHT, UnitSystem.US),
    Unit.POUND: (UnitCategory.WEIGHT, UnitSystem.US),
    Unit.GRAM: (UnitCategory.WEIGHT, UnitSystem.METRIC),
    Unit.KILOGRAM: (UnitCategory.WEIGHT, UnitSystem.METRIC),
    Unit.PIECE: (UnitCategory.COUNT, None),
    Unit.DOZEN: (UnitCategory.COUNT, None),
    Unit.PINCH: (UnitCategory.SPECIAL, None),
    Unit.DASH: (UnitCategory.SPECIAL, None),
    Unit.TO_TASTE: (UnitCategory.SPECIAL, None),
}

# Free-text spellings accepted by parse_unit, on top of the canonical tokens.
UNIT_ALIASES: Dict[str, Unit] = {
    "teaspoon": Unit.TEASPOON,
    "teaspoons": Unit.TEASPOON,
    "tablespoon": Unit.TABLESPOON,
    "tablespoons": Unit.TABLESPOON,
    "tbs": Unit.TABLESPOON,
    "fluid ounce": Unit.FLUID_OUNCE,
    "fluid ounces": Unit.FLUID_OUNCE,
    "fl oz": Unit.FLUID_OUNCE,
    "floz": Unit.FLUID_OUNCE,
    "cups": Unit.CUP,
    "c": Unit.CUP,
    "pints": Unit.PINT,
    "pt": Unit.PINT,
    "quarts": Unit.QUART,
    "qt": Unit.QUART,
    "gallons": Unit.GALLON,
    "gal": Unit.GALLON,
    "milliliter": Unit.MILLILITER,
    "milliliters": Unit.MILLILITER,
    "millilitre": Unit.MILLILITER,
    "millilitres": Unit.MILLILITER,
    "liter": Unit.LITER,
    "liters": Unit.LITER,
    "litre": Unit.LITER,
    "litres": Unit.LITER,
    "ounce": Unit.OUNCE,
    "ounces": Unit.OUNCE,
    "pound": Unit.POUND,
    "pounds": Unit.POUND,
    "lbs": Unit.POUND,
    "gram": Unit.GRAM,
    "grams": Unit.GRAM,
    "kilogram": Unit.KILOGRAM,
    "kilograms": Unit.KILOGRAM,
    "pieces": Unit.PIECE,
    "pc": Unit.PIECE,
    "each": Unit.PIECE,
    "ea": Unit.PIECE,
    "dozens": Unit.DOZEN,
    "pinches": Unit.PINCH,
    "dashes": Unit.DASH,
    "to taste": Unit.TO_TASTE,
}


def category(unit: Unit) -> UnitCategory:
    """Return the category of ``unit``."""
    return _TAXONOMY[unit][0]


def system(unit: Unit) -> Optional[UnitSystem]:
    """Return the measurement system of ``unit`` (``None`` for count and special units)."""
    return _TAXONOMY[unit][1]


def is_volume(unit: Unit) -> bool:
    return category(unit) is UnitCategory.VOLUME


def is_weight(unit: Unit) -> bool:
    return category(unit) is UnitCategory.WEIGHT


def parse_unit(value: str) -> Optional[Unit]:
    """Resolve free text such as ``"Cups"`` or ``"tbsp"`` to a :class:`Unit`."""
    normalized = " ".join(value.strip().lower().replace(".", "").split())
    if not normalized:
        return None
    try:
        return Unit(normalized.replace(" ", "_"))
    except ValueError:
        return UNIT_ALIASES.get(normalized)


__all__ = [
    "Unit",
    "UnitCategory",
    "UnitSystem",
    "UNIT_ALIASES",
    "category",
    "system",
    "is_volume",
    "is_weight",
    "parse_unit",
]
