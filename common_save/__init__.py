"""
Common save - switches and variables shared between save slots.

Provides:
- CommonSaveManager: save/load/exists/remove of the common save
- CommonSaveConfig: typed plugin parameters
- File and key-value storage backends
- AutoSync lifecycle hooks and the CommonSave plugin command
"""

from common_save.config import CommonSaveConfig, parse_target_indexes, PLUGIN_NAME
from common_save.errors import CommonSaveError, CodecError, StorageError
from common_save.kvstore import KeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore
from common_save.storage import (
    CommonSaveStorage,
    FileStorage,
    WebStorage,
    StorageMode,
    create_storage,
    COMMON_SAVE_FILENAME,
    COMMON_SAVE_KEY,
)
from common_save.snapshot import Snapshot
from common_save.manager import CommonSaveManager, CommonSaveEvent, SIZE_WARNING_THRESHOLD
from common_save.hooks import AutoSync
from common_save.commands import CommonSaveCommand
from common_save.plugin import CommonSavePlugin

__all__ = [
    # Config
    "CommonSaveConfig",
    "parse_target_indexes",
    "PLUGIN_NAME",
    # Errors
    "CommonSaveError",
    "CodecError",
    "StorageError",
    # Storage
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SQLiteKeyValueStore",
    "CommonSaveStorage",
    "FileStorage",
    "WebStorage",
    "StorageMode",
    "create_storage",
    "COMMON_SAVE_FILENAME",
    "COMMON_SAVE_KEY",
    # Manager
    "Snapshot",
    "CommonSaveManager",
    "CommonSaveEvent",
    "SIZE_WARNING_THRESHOLD",
    # Integration
    "AutoSync",
    "CommonSaveCommand",
    "CommonSavePlugin",
]
