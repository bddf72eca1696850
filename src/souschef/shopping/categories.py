"""Grouping of shopping items into ordered grocery categories."""

from __future__ import annotations

from typing import Dict, Iterable, List

from souschef.models.recipe import GroceryCategory, coerce_category
from souschef.models.shopping import CategoryBucket, ShoppingItem

CATEGORY_ORDER = (
    GroceryCategory.PRODUCE,
    GroceryCategory.MEAT,
    GroceryCategory.SEAFOOD,
    GroceryCategory.DAIRY,
    GroceryCategory.BAKERY,
    GroceryCategory.FROZEN,
    GroceryCategory.PANTRY,
    GroceryCategory.SPICES,
    GroceryCategory.BEVERAGES,
    GroceryCategory.OTHER,
)

CATEGORY_LABELS: Dict[GroceryCategory, str] = {
    GroceryCategory.PRODUCE: "Produce",
    GroceryCategory.MEAT: "Meat",
    GroceryCategory.SEAFOOD: "Seafood",
    GroceryCategory.DAIRY: "Dairy",
    GroceryCategory.BAKERY: "Bakery",
    GroceryCategory.FROZEN: "Frozen",
    GroceryCategory.PANTRY: "Pantry",
    GroceryCategory.SPICES: "Spices",
    GroceryCategory.BEVERAGES: "Beverages",
    GroceryCategory.OTHER: "Other",
}


def group_by_category(items: Iterable[ShoppingItem]) -> List[CategoryBucket]:
    """Bucket items by grocery category in store order, dropping empty buckets.

    Items keep their source order inside a bucket.
    """
    groups: Dict[GroceryCategory, List[ShoppingItem]] = {cat: [] for cat in CATEGORY_ORDER}
    for item in items:
        groups[coerce_category(item.category)].append(item)

    return [
        CategoryBucket(category=cat, items=bucket)
        for cat, bucket in groups.items()
        if bucket
    ]


def format_category(value: GroceryCategory) -> str:
    return CATEGORY_LABELS.get(coerce_category(value), "Other")


__all__ = ["CATEGORY_ORDER", "CATEGORY_LABELS", "group_by_category", "format_category"]
