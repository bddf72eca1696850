"""Dependency definitions for the Sous Chef API server."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Callable

from fastapi import Depends, HTTPException, Request, status

from souschef import preferences
from souschef.catalog import Catalog
from souschef.config import Settings, get_settings
from souschef.models.preferences import KitchenPreferences
from souschef.shopping.service import ShoppingService

PreferencesProvider = Callable[[], KitchenPreferences]


@lru_cache
def _load_catalog(path: Path) -> Catalog:
    return Catalog.from_file(path)


def get_catalog(settings: Settings = Depends(get_settings)) -> Catalog:
    """Return the catalog configured by ``catalog_path`` (loaded once per path)."""

    return _load_catalog(settings.catalog_path)


def get_shopping_service(catalog: Catalog = Depends(get_catalog)) -> ShoppingService:
    return ShoppingService(recipe_provider=catalog.get_recipe, menu_provider=catalog.get_menu)


def get_preferences_provider() -> PreferencesProvider:
    return preferences.get_preferences


def require_api_token(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> None:
    """Ensure requests carry the configured API token when required."""

    token = settings.api_token
    if not token:
        return

    auth_header = request.headers.get("Authorization") or ""
    scheme, _, credentials = auth_header.partition(" ")
    if scheme == "Bearer" and credentials.strip() == token:
        return

    if request.headers.get("X-API-Key") == token:
        return

    if request.query_params.get("api_token") == token:
        return

    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def reset_catalog_cache() -> None:
    """Forget loaded catalogs (intended for testing)."""

    _load_catalog.cache_clear()


__all__ = [
    "PreferencesProvider",
    "get_catalog",
    "get_shopping_service",
    "get_preferences_provider",
    "require_api_token",
    "reset_catalog_cache",
]
