"""Kitchen-wide display and planning preferences."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from souschef.measurement.units import UnitSystem


class KitchenPreferences(BaseModel):
    """Household defaults applied when lists and recipes are displayed."""

    unit_system: UnitSystem = Field(default=UnitSystem.US)
    default_servings: int = Field(default=4, gt=0)
    default_leftover_days: int = Field(default=3, ge=0)

    model_config = ConfigDict(frozen=True)


__all__ = ["KitchenPreferences"]
