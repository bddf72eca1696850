"""Basic smoke tests for the catalog and application wiring."""

import json

from souschef import __version__
from souschef.catalog import Catalog
from souschef.server.app import create_app


def test_missing_catalog_is_empty(tmp_path) -> None:
    catalog = Catalog.from_file(tmp_path / "absent.json")

    assert catalog.recipes() == []
    assert catalog.get_menu("week-1") is None


def test_catalog_from_file(tmp_path, pancakes, week_menu) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "recipes": [pancakes.model_dump(mode="json")],
                "menus": [week_menu.model_dump(mode="json")],
            }
        ),
        encoding="utf-8",
    )
    catalog = Catalog.from_file(path)

    assert catalog.get_recipe("pancakes") == pancakes
    assert catalog.get_menu("week-1") == week_menu
    assert catalog.get_recipe("biscuits") is None


def test_create_app_reports_version() -> None:
    app = create_app()

    assert app.version == __version__
