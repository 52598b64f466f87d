"""
store.py - Key-value string stores
Single responsibility: opaque get/set/remove of string values by key.
"""
import logging
import sqlite3
from typing import Protocol

from bugtracker.database.connection import get_connection
from bugtracker.database.schema import initialize_schema
from bugtracker.domain.errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store, used by tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class SqliteStore:
    """Store backed by the ``kv_store`` table of a SQLite file."""

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path
        try:
            initialize_schema(db_path)
        except sqlite3.Error as e:
            raise StorageError(key=None) from e

    def get(self, key: str) -> str | None:
        try:
            with get_connection(self.db_path) as conn:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                ).fetchone()
        except sqlite3.Error as e:
            logger.error("Failed to read %s: %s", key, e)
            raise StorageError(key=key) from e
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            with get_connection(self.db_path) as conn:
                conn.execute(
                    "INSERT INTO kv_store (key, value) VALUES (?, ?)"
                    " ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, value),
                )
        except sqlite3.Error as e:
            logger.error("Failed to write %s: %s", key, e)
            raise StorageError(key=key) from e

    def remove(self, key: str) -> None:
        try:
            with get_connection(self.db_path) as conn:
                conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        except sqlite3.Error as e:
            logger.error("Failed to remove %s: %s", key, e)
            raise StorageError(key=key) from e
