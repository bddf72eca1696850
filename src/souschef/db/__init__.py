"""Persistence layer for shopping lists and kitchen preferences."""
