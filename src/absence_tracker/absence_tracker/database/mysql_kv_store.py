from __future__ import annotations

from typing import Optional

from ..storage.kv_store import KeyValueStore
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone


class MySQLKeyValueStore(KeyValueStore):
    """Key-value slots stored as rows of the ``kv_store`` table."""

    def __init__(self, conn_factory: DatabaseConnection, *, table: str = "kv_store"):
        self._conn_factory = conn_factory
        self._table = table

    def get_item(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT v FROM {self._table} WHERE k=%s", (key,))
            r = fetchone(cur)
            if not r:
                return None
            return r.get("v")

    def set_item(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {self._table}(k, v)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE v=VALUES(v)
                """,
                (key, str(value)),
            )

    def remove_item(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self._table} WHERE k=%s", (key,))
