from __future__ import annotations

import logging
from typing import Callable, Iterable, TypeVar

from .base import KeyValueStore
from .json_store import read_list, write_json

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_records(store: KeyValueStore, key: str, factory: Callable[[dict], T]) -> list[T]:
    """Load an array of records; one malformed record resets the whole key."""
    raw = read_list(store, key)
    try:
        return [factory(item) for item in raw]
    except (KeyError, TypeError, ValueError, AttributeError):
        logger.warning("Malformed record under %s, resetting", key)
        store.remove_item(key)
        return []


def save_records(store: KeyValueStore, key: str, records: Iterable) -> None:
    write_json(store, key, [r.to_dict() for r in records])
