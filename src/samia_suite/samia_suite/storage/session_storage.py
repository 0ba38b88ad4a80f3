from __future__ import annotations

from typing import Optional

from flask import session

from .base import KeyValueStore


class FlaskSessionStorage(KeyValueStore):
    """KeyValueStore over the signed session cookie.

    ``permanent=True`` keeps the cookie across browser restarts (durable store),
    otherwise it dies with the browser session (tab-scoped store). Each instance
    keeps its items in its own bucket of the cookie.
    """

    def __init__(self, namespace: str, *, permanent: bool):
        self._namespace = namespace
        self._permanent = permanent

    def get_item(self, key: str) -> Optional[str]:
        bucket = session.get(self._namespace) or {}
        value = bucket.get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        bucket = dict(session.get(self._namespace) or {})
        bucket[key] = value
        session[self._namespace] = bucket
        if self._permanent:
            session.permanent = True

    def remove_item(self, key: str) -> None:
        bucket = dict(session.get(self._namespace) or {})
        bucket.pop(key, None)
        if bucket:
            session[self._namespace] = bucket
        else:
            session.pop(self._namespace, None)
            if self._permanent:
                session.permanent = False
