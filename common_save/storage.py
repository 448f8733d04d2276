"""
Storage backends for the shared blob.

Both backends move one opaque string under one fixed name and never
look inside it:

- FileStorage: ``<save_dir>/common.rpgsave`` on disk
- WebStorage: the ``"RPG Common"`` entry of a key-value store

Absence is a normal state: load() returns None, exists() returns
False and remove() does nothing.
"""

from __future__ import annotations

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Optional

from common_save.errors import StorageError
from common_save.kvstore import KeyValueStore, MemoryKeyValueStore

logger = logging.getLogger(__name__)

COMMON_SAVE_FILENAME = "common.rpgsave"
COMMON_SAVE_KEY = "RPG Common"


class StorageMode(Enum):
    """Where the shared blob lives."""
    FILE = "file"
    WEB = "web"


class CommonSaveStorage(ABC):
    """Interface shared by both backends."""

    @abstractmethod
    def save(self, blob: str) -> None:
        """Store blob, replacing any previous one."""

    @abstractmethod
    def load(self) -> Optional[str]:
        """Return the stored blob, or None if there is none."""

    @abstractmethod
    def exists(self) -> bool:
        """Check whether a blob is stored."""

    @abstractmethod
    def remove(self) -> None:
        """Delete the stored blob (no-op when absent)."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location for log messages."""


class FileStorage(CommonSaveStorage):
    """Blob stored as a single file beneath the save directory."""

    def __init__(self, save_dir: Path | str, filename: str = COMMON_SAVE_FILENAME):
        self.save_dir = Path(save_dir)
        self.path = self.save_dir / filename

    @property
    def location(self) -> str:
        return str(self.path)

    def save(self, blob: str) -> None:
        try:
            self.save_dir.mkdir(parents=True, exist_ok=True)
            # Whole-file replace: write a sibling temp file, then swap it in
            fd, tmp_name = tempfile.mkstemp(
                dir=self.save_dir, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    f.write(blob)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(self.location, str(e)) from e

    def load(self) -> Optional[str]:
        if not self.path.is_file():
            return None
        try:
            return self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(self.location, str(e)) from e

    def exists(self) -> bool:
        return self.path.is_file()

    def remove(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(self.location, str(e)) from e


class WebStorage(CommonSaveStorage):
    """Blob stored under one fixed key of a localStorage-like store."""

    def __init__(self, store: KeyValueStore, key: str = COMMON_SAVE_KEY):
        self.store = store
        self.key = key

    @property
    def location(self) -> str:
        return f"key-value store [{self.key}]"

    def save(self, blob: str) -> None:
        self.store.set_item(self.key, blob)

    def load(self) -> Optional[str]:
        return self.store.get_item(self.key)

    def exists(self) -> bool:
        return bool(self.store.get_item(self.key))

    def remove(self) -> None:
        self.store.remove_item(self.key)


def create_storage(
    mode: StorageMode = StorageMode.FILE,
    save_dir: Path | str = "save",
    kv_store: Optional[KeyValueStore] = None,
) -> CommonSaveStorage:
    """
    Build the backend for a storage mode.

    Args:
        mode: FILE or WEB
        save_dir: Save directory (FILE mode)
        kv_store: Key-value store (WEB mode); in-memory when omitted

    Returns:
        The selected backend
    """
    if mode is StorageMode.WEB:
        if kv_store is None:
            logger.warning("No key-value store supplied, common save will not outlive the process")
            kv_store = MemoryKeyValueStore()
        return WebStorage(kv_store)
    return FileStorage(save_dir)
