"""Pydantic models defining shared data contracts."""

from souschef.models.meal_prep import SharedIngredient
from souschef.models.menu import Menu, MenuAssignment
from souschef.models.preferences import KitchenPreferences
from souschef.models.recipe import GroceryCategory, Ingredient, Recipe
from souschef.models.shopping import (
    CategoryBucket,
    CustomItemInput,
    ShoppingItem,
    ShoppingList,
)

__all__ = [
    "SharedIngredient",
    "Menu",
    "MenuAssignment",
    "KitchenPreferences",
    "GroceryCategory",
    "Ingredient",
    "Recipe",
    "CategoryBucket",
    "CustomItemInput",
    "ShoppingItem",
    "ShoppingList",
]
