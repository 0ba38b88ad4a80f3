from __future__ import annotations

import json
import logging
from typing import Any

from .base import KeyValueStore

logger = logging.getLogger(__name__)

_EMPTY_MARKERS = {"", "undefined", "null"}


def read_json(store: KeyValueStore, key: str, fallback: Any) -> Any:
    """Read a JSON value; missing or unreadable data yields ``fallback``.

    A value that fails to parse is removed so the next read starts clean.
    """
    raw = store.get_item(key)
    if raw is None or raw.strip() in _EMPTY_MARKERS:
        return fallback

    try:
        return json.loads(raw)
    except ValueError:
        logger.warning("Corrupted data for %s, resetting", key)
        store.remove_item(key)
        return fallback


def read_list(store: KeyValueStore, key: str) -> list:
    value = read_json(store, key, [])
    if not isinstance(value, list):
        logger.warning("Expected a list under %s, got %s; resetting", key, type(value).__name__)
        store.remove_item(key)
        return []
    return value


def write_json(store: KeyValueStore, key: str, value: Any) -> None:
    store.set_item(key, json.dumps(value, ensure_ascii=False))
