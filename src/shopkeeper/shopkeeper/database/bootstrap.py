from __future__ import annotations

import logging

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

KV_STORE_DDL = """
CREATE TABLE IF NOT EXISTS kv_store (
    collection_key VARCHAR(100) NOT NULL PRIMARY KEY,
    payload LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci
"""


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict) -> None:
    """Create the database and the kv_store table (idempotent)."""
    target = DBConfig.from_dict(db_config)
    ensure_database_exists(db_config)

    conn = DatabaseConnection(target).connect()
    try:
        cur = conn.cursor()
        cur.execute(KV_STORE_DDL)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema ready on %s", target.describe())


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
