"""Shopping list generation and bookkeeping on top of the consolidation engine."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from souschef import metrics
from souschef.db import shopping_lists as store
from souschef.errors import NotFoundError
from souschef.measurement.scaling import present_ingredient
from souschef.measurement.units import UnitSystem
from souschef.models.menu import Menu
from souschef.models.recipe import Ingredient
from souschef.models.shopping import (
    CategoryBucket,
    CustomItemInput,
    ShoppingItem,
    ShoppingList,
)

from .categories import group_by_category
from .consolidation import RecipeDemand, RecipeProvider, consolidate_ingredients
from .export import export_to_text

logger = logging.getLogger(__name__)

MenuProvider = Callable[[str], Optional[Menu]]


def present_item(
    item: ShoppingItem,
    target_system: Optional[UnitSystem] = None,
    practical: bool = True,
) -> ShoppingItem:
    """Run a stored item through system conversion and practical rounding for display."""
    shown = present_ingredient(
        Ingredient(name=item.name, quantity=item.quantity, unit=item.unit),
        target_system,
        practical,
    )
    return item.model_copy(update={"quantity": shown.quantity, "unit": shown.unit})


class ShoppingService:
    """Generate, query and update shopping lists.

    Recipes and menus come from the injected providers; lists are persisted through
    :mod:`souschef.db.shopping_lists`, which owns transaction boundaries.
    """

    def __init__(self, recipe_provider: RecipeProvider, menu_provider: MenuProvider):
        self._recipe_provider = recipe_provider
        self._menu_provider = menu_provider

    def generate_from_menu(self, menu_id: str) -> ShoppingList:
        """Build a list from every non-leftover assignment of a menu.

        A recipe scheduled several times contributes the sum of its servings and its
        earliest cook date.
        """
        menu = self._menu_provider(menu_id)
        if menu is None:
            raise NotFoundError("menu", menu_id)

        demands: Dict[str, RecipeDemand] = {}
        for assignment in menu.assignments:
            if assignment.is_leftover:
                continue
            existing = demands.get(assignment.recipe_id)
            if existing is None:
                demands[assignment.recipe_id] = RecipeDemand(
                    servings=assignment.servings, relevant_date=assignment.cook_date
                )
                continue
            earliest = existing.relevant_date
            if earliest is None or assignment.cook_date < earliest:
                earliest = assignment.cook_date
            demands[assignment.recipe_id] = RecipeDemand(
                servings=existing.servings + assignment.servings, relevant_date=earliest
            )

        return self._generate(demands, menu_id=menu_id, source="menu")

    def generate_from_recipes(
        self,
        recipe_ids: Sequence[str],
        servings: Optional[Mapping[str, float]] = None,
    ) -> ShoppingList:
        """Build a list from explicit recipes, each at its override or base servings."""
        demands: Dict[str, RecipeDemand] = {}
        for recipe_id in recipe_ids:
            if recipe_id in demands:
                continue
            recipe = self._recipe_provider(recipe_id)
            if recipe is None:
                raise NotFoundError("recipe", recipe_id)
            requested = (servings or {}).get(recipe_id, recipe.servings)
            demands[recipe_id] = RecipeDemand(servings=requested)

        return self._generate(demands, source="recipes")

    def get_list(self, list_id: str) -> ShoppingList:
        shopping_list = store.get_shopping_list(list_id)
        if shopping_list is None:
            raise NotFoundError("shopping list", list_id)
        return shopping_list

    def check_item(self, list_id: str, item_id: str) -> ShoppingItem:
        return store.set_item_checked(list_id, item_id, True)

    def uncheck_item(self, list_id: str, item_id: str) -> ShoppingItem:
        return store.set_item_checked(list_id, item_id, False)

    def add_custom_item(self, list_id: str, item: CustomItemInput) -> ShoppingItem:
        created = store.add_shopping_item(
            list_id,
            name=item.name,
            quantity=item.quantity,
            unit=item.unit.value,
            category=item.category.value,
        )
        logger.info("Added custom item %s to list %s", created.name, list_id)
        return created

    def remove_item(self, list_id: str, item_id: str) -> None:
        store.delete_shopping_item(list_id, item_id)

    def delete_list(self, list_id: str) -> None:
        store.delete_shopping_list(list_id)
        logger.info("Deleted shopping list %s", list_id)

    def get_items_by_category(
        self,
        list_id: str,
        target_system: Optional[UnitSystem] = None,
        practical: bool = False,
    ) -> List[CategoryBucket]:
        """Return the list's items bucketed in store order.

        With ``target_system`` or ``practical`` the quantities are converted and
        rounded for display; stored values are never modified.
        """
        items = self.get_list(list_id).items
        if target_system is not None or practical:
            items = [present_item(item, target_system, practical) for item in items]
        return group_by_category(items)

    def export_to_text(self, list_id: str) -> str:
        return export_to_text(self.get_list(list_id))

    def _generate(
        self,
        demands: Mapping[str, RecipeDemand],
        *,
        source: str,
        menu_id: Optional[str] = None,
    ) -> ShoppingList:
        entries = consolidate_ingredients(demands, self._recipe_provider)
        shopping_list = store.create_shopping_list(
            (
                {
                    "name": entry.name,
                    "quantity": entry.quantity,
                    "unit": entry.unit.value,
                    "category": entry.category.value,
                    "recipe_ids": entry.contributing_recipe_ids,
                    "cook_by_date": entry.earliest_date,
                }
                for entry in entries
            ),
            menu_id=menu_id,
        )
        metrics.SHOPPING_LISTS_GENERATED.labels(source=source).inc()
        metrics.ITEMS_CONSOLIDATED.inc(len(shopping_list.items))
        logger.info(
            "Generated shopping list %s from %s recipe(s) with %s item(s)",
            shopping_list.id,
            len(demands),
            len(shopping_list.items),
            extra={"list_id": shopping_list.id, "menu_id": menu_id},
        )
        return shopping_list


__all__ = ["MenuProvider", "ShoppingService", "present_item"]
