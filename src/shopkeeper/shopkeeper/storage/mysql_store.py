from __future__ import annotations

import json
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .store import Store


class MySQLStore(Store):
    """Store backed by the `kv_store` table (see database/bootstrap.py)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[list[dict]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payload
                FROM kv_store
                WHERE collection_key=%s
                """,
                (key,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return json.loads(r["payload"])

    def put(self, key: str, value: list[dict]) -> None:
        payload = json.dumps(list(value), ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(collection_key, payload)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (key, payload),
            )

    def keys(self) -> list[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT collection_key FROM kv_store ORDER BY collection_key")
            return [r["collection_key"] for r in fetchall(cur)]
