"""Shared pytest fixtures for the Sous Chef test suite."""

from __future__ import annotations

from datetime import date
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from souschef.catalog import Catalog
from souschef.config import get_settings
from souschef.db.repository import reset_repository_state
from souschef.models.menu import Menu, MenuAssignment
from souschef.models.recipe import Ingredient, Recipe
from souschef.server import deps
from souschef.server.app import create_app
from souschef.shopping.service import ShoppingService


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Ensure each test uses an isolated SQLite database location."""

    db_path = tmp_path / "test_souschef.db"
    monkeypatch.setenv("SOUSCHEF_DATABASE_PATH", str(db_path))
    monkeypatch.delenv("SOUSCHEF_API_TOKEN", raising=False)
    get_settings.cache_clear()
    reset_repository_state()
    deps.reset_catalog_cache()
    yield
    reset_repository_state()
    deps.reset_catalog_cache()
    monkeypatch.delenv("SOUSCHEF_DATABASE_PATH", raising=False)
    get_settings.cache_clear()


@pytest.fixture()
def pancakes() -> Recipe:
    return Recipe(
        id="pancakes",
        title="Buttermilk Pancakes",
        servings=4,
        ingredients=[
            Ingredient(name="Flour", quantity=2, unit="cup", category="pantry"),
            Ingredient(name="Buttermilk", quantity=2, unit="cup", category="dairy"),
            Ingredient(name="Egg", quantity=2, unit="piece", category="dairy"),
            Ingredient(name="Butter", quantity=3, unit="tbsp", category="dairy"),
            Ingredient(name="Salt", quantity=1, unit="pinch", category="spices"),
        ],
    )


@pytest.fixture()
def biscuits() -> Recipe:
    return Recipe(
        id="biscuits",
        title="Drop Biscuits",
        servings=2,
        ingredients=[
            Ingredient(name="flour ", quantity=1, unit="cup", category="pantry"),
            Ingredient(name="Butter", quantity=2, unit="oz", category="dairy"),
            Ingredient(name="Chives", quantity=1, unit="tbsp", category="produce"),
        ],
    )


@pytest.fixture()
def week_menu() -> Menu:
    return Menu(
        id="week-1",
        name="Week one",
        assignments=[
            MenuAssignment(recipe_id="pancakes", servings=4, cook_date=date(2024, 3, 5)),
            MenuAssignment(recipe_id="biscuits", servings=2, cook_date=date(2024, 3, 6)),
            MenuAssignment(recipe_id="pancakes", servings=2, cook_date=date(2024, 3, 3)),
            MenuAssignment(
                recipe_id="biscuits",
                servings=8,
                cook_date=date(2024, 3, 1),
                is_leftover=True,
            ),
        ],
    )


@pytest.fixture()
def catalog(pancakes, biscuits, week_menu) -> Catalog:
    return Catalog(recipes=[pancakes, biscuits], menus=[week_menu])


@pytest.fixture()
def shopping_service(catalog) -> ShoppingService:
    return ShoppingService(recipe_provider=catalog.get_recipe, menu_provider=catalog.get_menu)


@pytest.fixture()
def app(catalog) -> Generator[FastAPI, None, None]:
    """Create a new FastAPI app instance for each test and reset overrides."""

    application = create_app()
    application.dependency_overrides[deps.get_catalog] = lambda: catalog
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    """Return a test client bound to the FastAPI app."""

    return TestClient(app)
