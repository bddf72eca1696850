"""Command-line interface for Sous Chef."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

import typer
import uvicorn

from souschef.catalog import Catalog
from souschef.config import get_settings
from souschef.errors import SousChefError
from souschef.logging_utils import configure_logging
from souschef.measurement.conversion import convert
from souschef.measurement.scaling import round_to_practical
from souschef.measurement.units import Unit, UnitSystem, parse_unit
from souschef.shopping.categories import format_category
from souschef.shopping.service import ShoppingService

app = typer.Typer(help="Sous Chef measurement and shopping list commands.")


def _unit_option(value: str) -> Unit:
    unit = parse_unit(value)
    if unit is None:
        raise typer.BadParameter(f"Unknown unit '{value}'")
    return unit


def _parse_servings(values: List[str]) -> Dict[str, float]:
    servings: Dict[str, float] = {}
    for value in values:
        recipe_id, sep, amount = value.partition("=")
        if not sep:
            raise typer.BadParameter(f"Expected RECIPE_ID=SERVINGS, got '{value}'")
        try:
            servings[recipe_id.strip()] = float(amount)
        except ValueError as exc:
            raise typer.BadParameter(f"Servings for '{recipe_id}' must be a number") from exc
    return servings


@app.callback()
def main_callback() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, [settings.api_token or ""])


@app.command("convert")
def convert_command(
    quantity: float,
    from_unit: str,
    to_unit: str,
    practical: bool = typer.Option(False, "--practical", help="Round to a practical measure."),
) -> None:
    """Convert QUANTITY from one unit to another of the same category."""
    source = _unit_option(from_unit)
    target = _unit_option(to_unit)
    converted = convert(quantity, source, target)
    if converted is None:
        typer.secho(
            f"Cannot convert {source.value} to {target.value}: incompatible units",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
    if practical:
        converted = round_to_practical(converted, target)
    typer.echo(f"{converted:g} {target.value}")


@app.command("round")
def round_command(quantity: float, unit: str) -> None:
    """Round QUANTITY to a practical cooking measurement for UNIT."""
    typer.echo(f"{round_to_practical(quantity, _unit_option(unit)):g}")


@app.command("shopping-list")
def shopping_list_command(
    recipe_ids: List[str] = typer.Argument(..., help="Recipe ids from the catalog."),
    servings: Optional[List[str]] = typer.Option(
        None, "--servings", "-s", help="Override servings as RECIPE_ID=N (repeatable)."
    ),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Catalog JSON file."),
    system: Optional[UnitSystem] = typer.Option(None, "--system", help="Display unit system."),
    practical: Optional[bool] = typer.Option(
        None, "--practical/--raw", help="Round quantities to practical measures."
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the stored list as JSON."),
) -> None:
    """Generate and store a consolidated shopping list for RECIPE_IDS."""
    settings = get_settings()
    catalog = Catalog.from_file(catalog_path or settings.catalog_path)
    service = ShoppingService(recipe_provider=catalog.get_recipe, menu_provider=catalog.get_menu)

    try:
        shopping_list = service.generate_from_recipes(
            recipe_ids, _parse_servings(servings or []) or None
        )
    except SousChefError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    if as_json:
        typer.echo(json.dumps(shopping_list.model_dump(mode="json"), indent=2, sort_keys=True))
        return

    buckets = service.get_items_by_category(
        shopping_list.id,
        target_system=system or settings.unit_system,
        practical=settings.practical_rounding if practical is None else practical,
    )
    typer.echo(f"Shopping list {shopping_list.id}")
    for bucket in buckets:
        typer.echo(f"\n{format_category(bucket.category)}")
        for item in bucket.items:
            typer.echo(f"  - {item.quantity:g} {item.unit.value} {item.name}")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
    reload: bool = typer.Option(False, "--reload"),
) -> None:
    """Run the HTTP API with uvicorn."""
    uvicorn.run("souschef.server.app:create_app", host=host, port=port, reload=reload, factory=True)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``souschef`` console script."""
    app(prog_name="souschef", args=argv)


if __name__ == "__main__":
    main()
