"""Validated setters for kitchen preferences."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from souschef.db.preferences import load_preferences, save_preferences
from souschef.errors import ValidationError
from souschef.measurement.units import UnitSystem
from souschef.models.preferences import KitchenPreferences

logger = logging.getLogger(__name__)


def get_preferences() -> KitchenPreferences:
    return load_preferences()


def _check_unit_system(value: Union[UnitSystem, str]) -> UnitSystem:
    try:
        return UnitSystem(value.strip().lower() if isinstance(value, str) else value)
    except ValueError as exc:
        raise ValidationError(f"Unknown unit system: {value}") from exc


def _check_servings(servings: int) -> int:
    if servings <= 0:
        raise ValidationError("Default servings must be a positive number")
    return int(servings)


def _check_leftover_days(days: int) -> int:
    if days < 0:
        raise ValidationError("Default leftover duration must be non-negative")
    return int(days)


def update_preferences(
    unit_system: Optional[Union[UnitSystem, str]] = None,
    default_servings: Optional[int] = None,
    default_leftover_days: Optional[int] = None,
) -> KitchenPreferences:
    """Validate every supplied value, then persist them together.

    Nothing is written when any value is rejected.
    """
    changes: Dict[str, Any] = {}
    if unit_system is not None:
        changes["unit_system"] = _check_unit_system(unit_system)
    if default_servings is not None:
        changes["default_servings"] = _check_servings(default_servings)
    if default_leftover_days is not None:
        changes["default_leftover_days"] = _check_leftover_days(default_leftover_days)
    if not changes:
        return load_preferences()

    updated = load_preferences().model_copy(update=changes)
    logger.info("Updating kitchen preferences %s", changes)
    return save_preferences(updated)


def set_unit_system(value: Union[UnitSystem, str]) -> KitchenPreferences:
    return update_preferences(unit_system=value)


def set_default_servings(servings: int) -> KitchenPreferences:
    return update_preferences(default_servings=servings)


def set_leftover_days(days: int) -> KitchenPreferences:
    return update_preferences(default_leftover_days=days)


__all__ = [
    "get_preferences",
    "update_preferences",
    "set_unit_system",
    "set_default_servings",
    "set_leftover_days",
]
