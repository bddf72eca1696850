"""Plain-text rendering of shopping lists."""

from __future__ import annotations

from typing import List

from souschef.measurement.units import Unit
from souschef.models.shopping import ShoppingItem, ShoppingList

from .categories import format_category, group_by_category

RULE_WIDTH = 40


def _format_quantity(quantity: float) -> str:
    return f"{quantity:g}"


def _format_item(item: ShoppingItem) -> str:
    checkbox = "[x]" if item.checked else "[ ]"
    if item.quantity == 1 and item.unit == Unit.PIECE:
        return f"{checkbox} {item.name}"
    return f"{checkbox} {_format_quantity(item.quantity)} {item.unit.value} {item.name}"


def export_to_text(shopping_list: ShoppingList) -> str:
    """Render ``shopping_list`` as a checklist grouped by grocery category."""
    lines: List[str] = ["Shopping List", "=" * RULE_WIDTH, ""]
    for bucket in group_by_category(shopping_list.items):
        lines.append(f"## {format_category(bucket.category)}")
        lines.extend(_format_item(item) for item in bucket.items)
        lines.append("")
    return "\n".join(lines)


__all__ = ["export_to_text"]
