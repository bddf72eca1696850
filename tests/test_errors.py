from __future__ import annotations

import pytest

from souschef.errors import NotFoundError, OwnershipMismatchError, SousChefError, ValidationError


@pytest.mark.parametrize(
    "error, builtin",
    [
        (NotFoundError("recipe", "soup"), LookupError),
        (OwnershipMismatchError("item", "i-1", "list", "l-2"), ValueError),
        (ValidationError("bad servings"), ValueError),
    ],
)
def test_errors_share_a_base(error, builtin):
    assert isinstance(error, SousChefError)
    assert isinstance(error, builtin)


def test_error_messages():
    assert str(NotFoundError("shopping list", "abc")) == "Shopping list not found: abc"
    mismatch = OwnershipMismatchError("item", "i-1", "list", "l-2")
    assert str(mismatch) == "Item i-1 does not belong to list l-2"
    assert mismatch.parent_id == "l-2"
