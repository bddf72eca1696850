"""Shopping list persistence helpers."""
# mypy: ignore-errors

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Mapping, Optional
from uuid import uuid4

from sqlalchemy import func, select

from souschef.errors import NotFoundError, OwnershipMismatchError
from souschef.models.shopping import ShoppingItem, ShoppingList

from .models import ShoppingItemORM, ShoppingItemRecipeORM, ShoppingListORM
from .repository import session_scope

logger = logging.getLogger(__name__)


def _item_to_model(row: ShoppingItemORM) -> ShoppingItem:
    return ShoppingItem.model_validate(
        {
            "id": row.id,
            "list_id": row.list_id,
            "name": row.name,
            "quantity": row.quantity,
            "unit": row.unit,
            "category": row.category,
            "checked": row.checked,
            "recipe_ids": [link.recipe_id for link in row.recipes],
            "cook_by_date": row.cook_by_date,
        }
    )


def _list_to_model(row: ShoppingListORM) -> ShoppingList:
    return ShoppingList(
        id=row.id,
        menu_id=row.menu_id,
        items=[_item_to_model(item) for item in row.items],
        created_at=row.created_at,
    )


def _new_item_row(
    list_id: str,
    position: int,
    *,
    name: str,
    quantity: float,
    unit: str,
    category: str,
    recipe_ids: Iterable[str] = (),
    cook_by_date: Optional[date] = None,
) -> ShoppingItemORM:
    row = ShoppingItemORM(
        id=str(uuid4()),
        list_id=list_id,
        position=position,
        name=name,
        quantity=float(quantity),
        unit=unit,
        category=category,
        checked=False,
        cook_by_date=cook_by_date,
    )
    row.recipes = [
        ShoppingItemRecipeORM(recipe_id=recipe_id, position=index)
        for index, recipe_id in enumerate(dict.fromkeys(recipe_ids))
    ]
    return row


def create_shopping_list(
    items: Iterable[Mapping[str, object]],
    *,
    menu_id: Optional[str] = None,
) -> ShoppingList:
    """Insert a list, its items and their recipe links in a single transaction.

    Each item mapping carries ``name``, ``quantity``, ``unit``, ``category`` and
    optionally ``recipe_ids`` and ``cook_by_date``.
    """
    with session_scope() as session:
        db_list = ShoppingListORM(id=str(uuid4()), menu_id=menu_id)
        db_list.items = [
            _new_item_row(db_list.id, position, **dict(payload))
            for position, payload in enumerate(items)
        ]
        session.add(db_list)
        session.flush()
        session.refresh(db_list)
        logger.debug("Stored shopping list %s with %s item(s)", db_list.id, len(db_list.items))
        return _list_to_model(db_list)


def get_shopping_list(list_id: str) -> Optional[ShoppingList]:
    with session_scope() as session:
        row = session.get(ShoppingListORM, list_id)
        if row is None:
            return None
        return _list_to_model(row)


def list_shopping_lists() -> List[ShoppingList]:
    """Return every stored list, newest first."""

    with session_scope() as session:
        rows = (
            session.execute(
                select(ShoppingListORM).order_by(ShoppingListORM.created_at.desc())
            )
            .scalars()
            .all()
        )
        return [_list_to_model(row) for row in rows]


def get_shopping_item(item_id: str) -> Optional[ShoppingItem]:
    with session_scope() as session:
        row = session.get(ShoppingItemORM, item_id)
        if row is None:
            return None
        return _item_to_model(row)


def set_item_checked(list_id: str, item_id: str, checked: bool) -> ShoppingItem:
    """Set the checked flag of an item that must belong to ``list_id``."""

    with session_scope() as session:
        row = session.get(ShoppingItemORM, item_id)
        if row is None:
            raise NotFoundError("item", item_id)
        if row.list_id != list_id:
            raise OwnershipMismatchError("item", item_id, "list", list_id)
        row.checked = bool(checked)
        session.flush()
        return _item_to_model(row)


def add_shopping_item(
    list_id: str,
    *,
    name: str,
    quantity: float,
    unit: str,
    category: str,
) -> ShoppingItem:
    """Append an item without recipe provenance to an existing list."""

    with session_scope() as session:
        if session.get(ShoppingListORM, list_id) is None:
            raise NotFoundError("shopping list", list_id)
        position = session.execute(
            select(func.coalesce(func.max(ShoppingItemORM.position) + 1, 0)).where(
                ShoppingItemORM.list_id == list_id
            )
        ).scalar_one()
        row = _new_item_row(
            list_id,
            position,
            name=name.strip(),
            quantity=quantity,
            unit=unit,
            category=category,
        )
        session.add(row)
        session.flush()
        return _item_to_model(row)


def delete_shopping_item(list_id: str, item_id: str) -> None:
    with session_scope() as session:
        row = session.get(ShoppingItemORM, item_id)
        if row is None:
            raise NotFoundError("item", item_id)
        if row.list_id != list_id:
            raise OwnershipMismatchError("item", item_id, "list", list_id)
        session.delete(row)


def delete_shopping_list(list_id: str) -> None:
    """Remove a list together with its items and their recipe links."""

    with session_scope() as session:
        row = session.get(ShoppingListORM, list_id)
        if row is None:
            raise NotFoundError("shopping list", list_id)
        session.delete(row)


__all__ = [
    "create_shopping_list",
    "get_shopping_list",
    "list_shopping_lists",
    "get_shopping_item",
    "set_item_checked",
    "add_shopping_item",
    "delete_shopping_item",
    "delete_shopping_list",
]
