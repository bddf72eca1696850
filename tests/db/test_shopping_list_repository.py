"""Unit tests for the shopping list repository helpers."""

from __future__ import annotations

from datetime import date

import pytest

from souschef.db.shopping_lists import (
    add_shopping_item,
    create_shopping_list,
    delete_shopping_item,
    delete_shopping_list,
    get_shopping_item,
    get_shopping_list,
    list_shopping_lists,
    set_item_checked,
)
from souschef.errors import NotFoundError, OwnershipMismatchError
from souschef.measurement.units import Unit
from souschef.models.recipe import GroceryCategory


def _create_list(menu_id=None):
    return create_shopping_list(
        [
            {
                "name": "Milk",
                "quantity": 2,
                "unit": "cup",
                "category": "dairy",
                "recipe_ids": ["pancakes", "waffles", "pancakes"],
                "cook_by_date": date(2025, 1, 4),
            },
            {"name": "Spinach", "quantity": 1, "unit": "piece", "category": "produce"},
        ],
        menu_id=menu_id,
    )


def test_create_and_fetch_shopping_list():
    created = _create_list(menu_id="menu-7")

    assert created.menu_id == "menu-7"
    assert created.created_at is not None
    assert [item.name for item in created.items] == ["Milk", "Spinach"]
    milk = created.items[0]
    assert milk.unit is Unit.CUP
    assert milk.category is GroceryCategory.DAIRY
    assert milk.recipe_ids == ["pancakes", "waffles"]
    assert milk.cook_by_date == date(2025, 1, 4)
    assert created.items[1].recipe_ids == []

    assert get_shopping_list(created.id) == created
    assert get_shopping_list("missing") is None


def test_list_shopping_lists():
    first = _create_list()
    second = _create_list()
    assert {item.id for item in list_shopping_lists()} == {first.id, second.id}


def test_set_item_checked():
    created = _create_list()
    milk = created.items[0]

    assert set_item_checked(created.id, milk.id, True).checked is True
    assert get_shopping_item(milk.id).checked is True
    assert set_item_checked(created.id, milk.id, False).checked is False


def test_set_item_checked_errors():
    created = _create_list()
    other = _create_list()

    with pytest.raises(NotFoundError):
        set_item_checked(created.id, "missing", True)
    with pytest.raises(OwnershipMismatchError):
        set_item_checked(other.id, created.items[0].id, True)


def test_add_item_appends_to_end():
    created = _create_list()
    added = add_shopping_item(
        created.id, name="  Lemons ", quantity=4, unit="piece", category="produce"
    )
    assert added.name == "Lemons"
    assert added.list_id == created.id
    assert get_shopping_list(created.id).items[-1] == added

    with pytest.raises(NotFoundError):
        add_shopping_item("missing", name="x", quantity=1, unit="piece", category="other")


def test_delete_item_and_list():
    created = _create_list()
    milk, spinach = created.items

    delete_shopping_item(created.id, milk.id)
    assert get_shopping_item(milk.id) is None
    assert [item.id for item in get_shopping_list(created.id).items] == [spinach.id]

    with pytest.raises(NotFoundError):
        delete_shopping_item(created.id, milk.id)

    delete_shopping_list(created.id)
    assert get_shopping_list(created.id) is None
    assert get_shopping_item(spinach.id) is None

    with pytest.raises(NotFoundError):
        delete_shopping_list(created.id)
