"""Measurement domain: unit taxonomy, unit algebra and practical rounding."""

from souschef.measurement.units import (
    Unit,
    UnitCategory,
    UnitSystem,
    category,
    parse_unit,
    system,
)

__all__ = [
    "Unit",
    "UnitCategory",
    "UnitSystem",
    "category",
    "parse_unit",
    "system",
]
