"""
Key-value stores standing in for browser persistent storage.

WebStorage only needs localStorage-style get/set/remove of strings.
MemoryKeyValueStore keeps items for the lifetime of the process;
SQLiteKeyValueStore persists them to a single SQLite file.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Protocol

from common_save.errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """localStorage-like string store."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryKeyValueStore:
    """In-process dictionary store."""

    def __init__(self):
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


class SQLiteKeyValueStore:
    """
    Durable store backed by one SQLite table.

    Each call opens a short-lived connection and commits before
    returning, so nothing is held open between operations. SQLite
    failures surface as StorageError.
    """

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._execute(
            "CREATE TABLE IF NOT EXISTS items ("
            " key TEXT PRIMARY KEY,"
            " value TEXT NOT NULL)"
        )
        logger.debug("Opened key-value store at %s", self.db_path)

    def _execute(self, sql: str, params: tuple = ()) -> Optional[tuple]:
        """Run one statement in its own transaction, returning the first row."""
        try:
            conn = sqlite3.connect(str(self.db_path))
            try:
                with conn:
                    return conn.execute(sql, params).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(str(self.db_path), str(e)) from e

    def get_item(self, key: str) -> Optional[str]:
        row = self._execute("SELECT value FROM items WHERE key = ?", (key,))
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        self._execute(
            "INSERT INTO items (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, str(value)),
        )

    def remove_item(self, key: str) -> None:
        self._execute("DELETE FROM items WHERE key = ?", (key,))
