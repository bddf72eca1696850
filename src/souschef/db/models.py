"""SQLAlchemy models backing shopping lists and preferences."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Declarative base class for Sous Chef ORM models."""


class ShoppingListORM(Base):
    """Generated shopping list header."""

    __tablename__ = "shopping_lists"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    menu_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False,
    )

    items: Mapped[List["ShoppingItemORM"]] = relationship(
        back_populates="shopping_list",
        cascade="all, delete-orphan",
        order_by="ShoppingItemORM.position",
    )


class ShoppingItemORM(Base):
    """Item on a shopping list."""

    __tablename__ = "shopping_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    list_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("shopping_lists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)
    unit: Mapped[str] = mapped_column(String(16), nullable=False, default="piece")
    category: Mapped[str] = mapped_column(String(32), nullable=False, default="other")
    checked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    cook_by_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    shopping_list: Mapped[ShoppingListORM] = relationship(back_populates="items")
    recipes: Mapped[List["ShoppingItemRecipeORM"]] = relationship(
        cascade="all, delete-orphan",
        order_by="ShoppingItemRecipeORM.position",
    )


class ShoppingItemRecipeORM(Base):
    """Provenance link between a shopping item and a contributing recipe."""

    __tablename__ = "shopping_item_recipes"

    item_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("shopping_items.id", ondelete="CASCADE"), primary_key=True
    )
    recipe_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class PreferenceORM(Base):
    """Key/value storage for kitchen preferences."""

    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


__all__ = [
    "Base",
    "ShoppingListORM",
    "ShoppingItemORM",
    "ShoppingItemRecipeORM",
    "PreferenceORM",
]
