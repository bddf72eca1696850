"""Menu models supplied by the menu lookup collaborator."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class MenuAssignment(BaseModel):
    """A recipe scheduled on a given day of a menu."""

    recipe_id: str
    servings: int = Field(gt=0)
    cook_date: date
    is_leftover: bool = Field(default=False)

    model_config = ConfigDict(frozen=True)


class Menu(BaseModel):
    """A planned menu made of dated recipe assignments."""

    id: str
    name: str = Field(default="")
    assignments: list[MenuAssignment] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


__all__ = ["Menu", "MenuAssignment"]
