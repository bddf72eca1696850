"""Exception hierarchy shared by the engine, storage and HTTP layers."""

from __future__ import annotations


class SousChefError(Exception):
    """Base class for all Sous Chef errors."""


class NotFoundError(SousChefError, LookupError):
    """A referenced recipe, menu, list or item does not exist."""

    def __init__(self, kind: str, identifier: str):
        super().__init__(f"{kind.capitalize()} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


class OwnershipMismatchError(SousChefError, ValueError):
    """An existing child record does not belong to the parent named in the call."""

    def __init__(self, kind: str, child_id: str, parent_kind: str, parent_id: str):
        super().__init__(f"{kind.capitalize()} {child_id} does not belong to {parent_kind} {parent_id}")
        self.kind = kind
        self.child_id = child_id
        self.parent_kind = parent_kind
        self.parent_id = parent_id


class ValidationError(SousChefError, ValueError):
    """A servings, scale factor or preference value is out of range."""


__all__ = ["SousChefError", "NotFoundError", "OwnershipMismatchError", "ValidationError"]
