"""Data access helpers for kitchen preferences."""

from __future__ import annotations

import json
import logging
from typing import Dict

from sqlalchemy import select

from souschef.models.preferences import KitchenPreferences

from .models import PreferenceORM
from .repository import session_scope

logger = logging.getLogger(__name__)

PREFERENCE_KEYS = set(KitchenPreferences.model_fields)


def _decode_value(value: str):
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def load_preferences() -> KitchenPreferences:
    """Load stored preferences or return defaults if none set."""

    with session_scope() as session:
        rows = session.execute(select(PreferenceORM)).scalars().all()
        data: Dict[str, object] = {
            row.key: _decode_value(row.value) for row in rows if row.key in PREFERENCE_KEYS
        }

    logger.debug("Loaded preferences from DB payload=%s", data)
    return KitchenPreferences.model_validate(data)


def save_preferences(prefs: KitchenPreferences) -> KitchenPreferences:
    """Persist the provided preferences payload."""

    payload = prefs.model_dump(mode="json")
    logger.debug("Persisting preferences payload=%s", payload)

    with session_scope() as session:
        for key, value in payload.items():
            session.merge(PreferenceORM(key=key, value=json.dumps(value)))

    return load_preferences()


__all__ = ["load_preferences", "save_preferences"]
