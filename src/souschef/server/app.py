"""ASGI application for Sous Chef."""
# mypy: ignore-errors

from __future__ import annotations

import logging
from time import perf_counter
from typing import Optional
from uuid import uuid4

from fastapi import Body, Depends, FastAPI, Query, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, Field

from souschef import __version__, metrics, preferences
from souschef.config import Settings, get_settings
from souschef.errors import NotFoundError, OwnershipMismatchError, ValidationError
from souschef.logging_utils import configure_logging as configure_app_logging
from souschef.measurement.conversion import convert
from souschef.measurement.scaling import round_to_practical
from souschef.measurement.units import Unit, UnitSystem
from souschef.models.preferences import KitchenPreferences
from souschef.models.shopping import (
    CategoryBucket,
    CustomItemInput,
    ShoppingItem,
    ShoppingList,
)
from souschef.server import deps
from souschef.shopping.service import ShoppingService

logger = logging.getLogger(__name__)


class GenerateFromRecipesRequest(BaseModel):
    recipe_ids: list[str] = Field(min_length=1)
    servings: dict[str, float] = Field(default_factory=dict)


class PreferencesUpdateRequest(BaseModel):
    unit_system: Optional[str] = Field(default=None)
    default_servings: Optional[int] = Field(default=None)
    default_leftover_days: Optional[int] = Field(default=None)


class ConversionResult(BaseModel):
    quantity: Optional[float]
    unit: Unit
    compatible: bool


def _configure_logging(settings: Settings) -> None:
    configure_app_logging(settings.log_level, settings.log_format, [settings.api_token or ""])


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance."""

    settings = get_settings()
    _configure_logging(settings)

    application = FastAPI(title="Sous Chef", version=__version__)
    logger.debug("Application created with log level %s", settings.log_level)

    if settings.log_requests:
        access_logger = logging.getLogger("souschef.access")

        @application.middleware("http")
        async def log_request_response(request: Request, call_next):
            """Log request/response details and record request metrics."""

            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            request.state.request_id = request_id
            start = perf_counter()
            path = request.url.path
            method = request.method
            try:
                response: Response = await call_next(request)
            except Exception:
                duration_ms = (perf_counter() - start) * 1000
                access_logger.exception(
                    "HTTP %s %s status=500 duration_ms=%.2f",
                    method,
                    path,
                    duration_ms,
                    extra={"request_id": request_id},
                )
                metrics.REQUEST_COUNT.labels(method=method, path=path, status="500").inc()
                metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(
                    duration_ms / 1000.0
                )
                raise

            duration_ms = (perf_counter() - start) * 1000
            response.headers.setdefault("X-Request-ID", request_id)
            access_logger.info(
                "HTTP %s %s status=%s duration_ms=%.2f",
                method,
                path,
                response.status_code,
                duration_ms,
                extra={"request_id": request_id},
            )
            metrics.REQUEST_COUNT.labels(
                method=method, path=path, status=str(response.status_code)
            ).inc()
            metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000.0)
            return response

    @application.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error_response(status.HTTP_404_NOT_FOUND, exc)

    @application.exception_handler(OwnershipMismatchError)
    async def ownership_handler(request: Request, exc: OwnershipMismatchError):
        logger.warning("Ownership mismatch on %s %s: %s", request.method, request.url.path, exc)
        return _error_response(status.HTTP_409_CONFLICT, exc)

    @application.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, exc)

    @application.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @application.post(
        "/shopping-lists",
        response_model=ShoppingList,
        status_code=status.HTTP_201_CREATED,
        summary="Generate a shopping list from recipes",
    )
    def shopping_list_from_recipes(
        payload: GenerateFromRecipesRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        service: ShoppingService = Depends(deps.get_shopping_service),
    ) -> ShoppingList:
        return service.generate_from_recipes(payload.recipe_ids, payload.servings or None)

    @application.post(
        "/menus/{menu_id}/shopping-list",
        response_model=ShoppingList,
        status_code=status.HTTP_201_CREATED,
        summary="Generate a shopping list from a menu",
    )
    def shopping_list_from_menu(
        menu_id: str,
        auth: None = Depends(deps.require_api_token),
        service: ShoppingService = Depends(deps.get_shopping_service),
    ) -> ShoppingList:
        return service.generate_from_menu(menu_id)

    @application.get(
        "/shopping-lists/{list_id}",
        response_model=ShoppingList,
        summary="Fetch a shopping list",
    )
    def shopping_list_get(
        list_id: str,
        service: ShoppingService = Depends(deps.get_shopping_service),
    ) -> ShoppingList:
        return service.get_list(list_id)

    @application.get(
        "/shopping-lists/{list_id}/categories",
        response_model=list[CategoryBucket],
        summary="Shopping list items grouped by grocery category",
    )
    def shopping_list_categories(
        list_id: str,
        system: Optional[UnitSystem] = Query(default=None),
        practical: Optional[bool] = Query(default=None),
        service: ShoppingService = Depends(deps.get_shopping_service),
        settings: Settings = Depends(get_settings),
    ) -> list[CategoryBucket]:
        if practical is None:
            practical = settings.practical_rounding
        return service.get_items_by_category(list_id, target_system=system, practical=practical)

    @application.get(
        "/shopping-lists/{list_id}/export",
        response_class=PlainTextResponse,
        summary="Export a shopping list as plain text",
    )
    def shopping_list_export(
        list_id: str,
        service: ShoppingService = Depends(deps.get_shopping_service),
    ) -> str:
        return service.export_to_text(list_id)

    @application.post(
        "/shopping-lists/{list_id}/items",
        response_model=ShoppingItem,
        status_code=status.HTTP_201_CREATED,
        summary="Add a custom item",
    )
    def shopping_list_add_item(
        list_id: str,
        payload: CustomItemInput = Body(...),
        auth: None = Depends(deps.require_api_token),
        service: ShoppingService = Depends(deps.get_shopping_service),
    ) -> ShoppingItem:
        return service.add_custom_item(list_id, payload)

    @application.post(
        "/shopping-lists/{list_id}/items/{item_id}/check",
        response_model=ShoppingItem,
        summary="Mark an item as purchased",
    )
    def shopping_list_check(
        list_id: str,
        item_id: str,
        auth: None = Depends(deps.require_api_token),
        service: ShoppingService = Depends(deps.get_shopping_service),
    ) -> ShoppingItem:
        return service.check_item(list_id, item_id)

    @application.delete(
        "/shopping-lists/{list_id}/items/{item_id}/check",
        response_model=ShoppingItem,
        summary="Mark an item as not purchased",
    )
    def shopping_list_uncheck(
        list_id: str,
        item_id: str,
        auth: None = Depends(deps.require_api_token),
        service: ShoppingService = Depends(deps.get_shopping_service),
    ) -> ShoppingItem:
        return service.uncheck_item(list_id, item_id)

    @application.delete(
        "/shopping-lists/{list_id}/items/{item_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Remove an item",
    )
    def shopping_list_remove_item(
        list_id: str,
        item_id: str,
        auth: None = Depends(deps.require_api_token),
        service: ShoppingService = Depends(deps.get_shopping_service),
    ) -> None:
        service.remove_item(list_id, item_id)

    @application.delete(
        "/shopping-lists/{list_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete a shopping list",
    )
    def shopping_list_delete(
        list_id: str,
        auth: None = Depends(deps.require_api_token),
        service: ShoppingService = Depends(deps.get_shopping_service),
    ) -> None:
        service.delete_list(list_id)

    @application.get(
        "/units/convert",
        response_model=ConversionResult,
        summary="Convert a quantity between units",
    )
    def units_convert(
        quantity: float = Query(...),
        from_unit: Unit = Query(..., alias="from"),
        to_unit: Unit = Query(..., alias="to"),
        practical: bool = Query(default=False),
    ) -> ConversionResult:
        converted = convert(quantity, from_unit, to_unit)
        if converted is None:
            metrics.UNIT_CONVERSIONS.labels(result="incompatible").inc()
            return ConversionResult(quantity=None, unit=to_unit, compatible=False)
        metrics.UNIT_CONVERSIONS.labels(result="converted").inc()
        if practical:
            converted = round_to_practical(converted, to_unit)
        return ConversionResult(quantity=converted, unit=to_unit, compatible=True)

    @application.get(
        "/preferences",
        response_model=KitchenPreferences,
        summary="Current kitchen preferences",
    )
    def preferences_get(
        provider: deps.PreferencesProvider = Depends(deps.get_preferences_provider),
    ) -> KitchenPreferences:
        return provider()

    @application.put(
        "/preferences",
        response_model=KitchenPreferences,
        summary="Update kitchen preferences",
    )
    def preferences_update(
        payload: PreferencesUpdateRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
    ) -> KitchenPreferences:
        return preferences.update_preferences(
            unit_system=payload.unit_system,
            default_servings=payload.default_servings,
            default_leftover_days=payload.default_leftover_days,
        )

    return application


__all__ = ["create_app"]
