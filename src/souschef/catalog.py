"""Recipe and menu lookup backed by a JSON catalog file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from souschef.models.menu import Menu
from souschef.models.recipe import Recipe

logger = logging.getLogger(__name__)


class Catalog:
    """In-memory recipe and menu store.

    Shopping and meal-prep code only needs ``get_recipe`` and ``get_menu``; any object
    offering those lookups can stand in for this class.
    """

    def __init__(self, recipes: Iterable[Recipe] = (), menus: Iterable[Menu] = ()):
        self._recipes: Dict[str, Recipe] = {recipe.id: recipe for recipe in recipes}
        self._menus: Dict[str, Menu] = {menu.id: menu for menu in menus}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Catalog":
        recipes = [Recipe.model_validate(entry) for entry in payload.get("recipes", [])]
        menus = [Menu.model_validate(entry) for entry in payload.get("menus", [])]
        return cls(recipes, menus)

    @classmethod
    def from_file(cls, path: Path) -> "Catalog":
        """Load a catalog file; a missing file yields an empty catalog."""
        if not path.exists():
            logger.warning("Catalog file %s not found; starting with an empty catalog", path)
            return cls()
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        catalog = cls.from_payload(payload)
        logger.info(
            "Loaded catalog from %s (%s recipes, %s menus)",
            path,
            len(catalog._recipes),
            len(catalog._menus),
        )
        return catalog

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        return self._recipes.get(recipe_id)

    def get_menu(self, menu_id: str) -> Optional[Menu]:
        return self._menus.get(menu_id)

    def recipes(self) -> List[Recipe]:
        return list(self._recipes.values())


__all__ = ["Catalog"]
