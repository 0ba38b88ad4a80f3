from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .base import KeyValueStore


class MySQLKeyValueStore(KeyValueStore):
    """Durable store: one row per key in ``kv_store``; writes replace the whole value."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_item(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT store_value FROM kv_store WHERE store_key=%s", (key,))
            row = fetchone(cur)
            return row["store_value"] if row else None

    def set_item(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(store_key, store_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                """,
                (key, value),
            )

    def remove_item(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kv_store WHERE store_key=%s", (key,))
