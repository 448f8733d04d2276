"""
Common save manager - switches and variables shared across save slots.

Provides:
- Save tracked switches/variables to one common save, separate from slots
- Load the common save back into live game state
- Existence check and removal of the common save
- File or key-value storage, chosen at construction
- Auto-sync policy consumed by the lifecycle hooks
"""

from __future__ import annotations

import json
import logging
from enum import Enum, auto
from typing import Any, Mapping, Optional

import jsonschema

from engine.core.events import EventBus
from engine.core.state import IndexedStore
from common_save import codec
from common_save.config import CommonSaveConfig
from common_save.errors import CodecError, CommonSaveError
from common_save.kvstore import KeyValueStore
from common_save.snapshot import Snapshot
from common_save.storage import CommonSaveStorage, WebStorage, create_storage

logger = logging.getLogger(__name__)

# Serialized snapshots at or above this many characters log a warning
SIZE_WARNING_THRESHOLD = 200_000


_READ_ERRORS = (
    CommonSaveError,
    OSError,
    json.JSONDecodeError,
    jsonschema.ValidationError,
)


def _log_read_error(error: Exception) -> None:
    if isinstance(error, CodecError):
        logger.error("Common save data is corrupted: %s", error)
    elif isinstance(error, json.JSONDecodeError):
        logger.error("Common save is not valid JSON: %s", error)
    elif isinstance(error, jsonschema.ValidationError):
        logger.error("Common save has an unexpected shape: %s", error.message)
    else:
        logger.error("Failed to read common save: %s", error)


class CommonSaveEvent(Enum):
    """Common save events."""
    SAVED = auto()
    SAVE_FAILED = auto()
    LOADED = auto()
    LOAD_FAILED = auto()
    REMOVED = auto()


class CommonSaveManager:
    """
    Shares a configured subset of switches and variables between slots.

    The manager references the live stores but never owns them. Live
    state changes only in load(); the common save changes only in
    save() and remove(). No method raises into the host: failures are
    logged and reported through the return value.

    Usage:
        config = CommonSaveConfig.from_parameters(plugins.parameters("CommonSave"))
        common_save = CommonSaveManager(config, switches, variables)

        common_save.save()      # after the player unlocks something
        common_save.load()      # on another slot or a new game
    """

    def __init__(
        self,
        config: CommonSaveConfig,
        switches: IndexedStore,
        variables: IndexedStore,
        storage: Optional[CommonSaveStorage] = None,
        event_bus: Optional[EventBus] = None,
        kv_store: Optional[KeyValueStore] = None,
    ):
        self.config = config
        self.switches = switches
        self.variables = variables
        self._kv_store = kv_store
        if isinstance(storage, WebStorage) and kv_store is None:
            self._kv_store = storage.store
        self.storage = storage or self._create_storage()
        self.event_bus = event_bus

    @classmethod
    def from_parameters(
        cls,
        parameters: Mapping[str, Any] | None,
        switches: IndexedStore,
        variables: IndexedStore,
        kv_store: Optional[KeyValueStore] = None,
        event_bus: Optional[EventBus] = None,
    ) -> CommonSaveManager:
        """Build a manager and its storage from raw plugin parameters."""
        config = CommonSaveConfig.from_parameters(parameters)
        return cls(config, switches, variables, event_bus=event_bus, kv_store=kv_store)

    def initialize(self, parameters: Mapping[str, Any] | None) -> None:
        """
        Re-read the configuration from raw plugin parameters.

        The backend is rebuilt when the storage mode or save directory
        changes; the key-value store in use is kept for web storage.
        """
        previous = self.config
        self.config = CommonSaveConfig.from_parameters(parameters)

        if (self.config.storage_mode, self.config.save_dir) != (previous.storage_mode, previous.save_dir):
            self.storage = self._create_storage()
            logger.info("Common save storage moved to %s", self.storage.location)

        logger.info(
            "Common save tracks %d switches and %d variables (auto=%s)",
            len(self.config.target_switches),
            len(self.config.target_variables),
            self.config.is_auto,
        )

    @property
    def target_switches(self) -> list[int]:
        return list(self.config.target_switches)

    @property
    def target_variables(self) -> list[int]:
        return list(self.config.target_variables)

    def is_auto(self) -> bool:
        """Whether host save/load/new game should sync the common save."""
        return self.config.is_auto

    def exists(self) -> bool:
        """Check whether a common save is stored."""
        logger.debug("Checking common save at %s", self.storage.location)
        try:
            return self.storage.exists()
        except (CommonSaveError, OSError) as e:
            logger.error("Common save existence check failed: %s", e)
            return False

    def save(self) -> bool:
        """
        Write the tracked switches and variables to the common save.

        Overwrites any previous common save.

        Returns:
            True if the common save was written
        """
        logger.info("Saving common save data to %s", self.storage.location)

        snapshot = Snapshot.capture(
            self.switches,
            self.variables,
            self.config.target_switches,
            self.config.target_variables,
        )

        try:
            text = snapshot.to_json()
            if len(text) >= SIZE_WARNING_THRESHOLD:
                logger.warning(
                    "Common save too big: %d characters (threshold %d)",
                    len(text),
                    SIZE_WARNING_THRESHOLD,
                )
            self.storage.save(codec.compress(text))
        except (TypeError, ValueError, CommonSaveError, OSError) as e:
            logger.error("Common save failed: %s", e)
            self._publish(CommonSaveEvent.SAVE_FAILED, error=str(e))
            return False

        self._publish(CommonSaveEvent.SAVED, snapshot=snapshot)
        return True

    def read_snapshot(self) -> Optional[Snapshot]:
        """
        Decode the stored common save without applying it.

        Returns:
            The stored snapshot, an empty snapshot if the data is
            unreadable, or None if nothing is stored
        """
        try:
            return self._read()
        except _READ_ERRORS as e:
            _log_read_error(e)
            return Snapshot()

    def load(self) -> bool:
        """
        Apply the common save to the live switches and variables.

        Only indices present in the common save are written; everything
        else in the live stores is left alone.

        Returns:
            True if stored values were applied, False if there was no
            common save or it could not be read
        """
        logger.info("Loading common save data from %s", self.storage.location)

        if not self.exists():
            return False

        try:
            snapshot = self._read()
        except _READ_ERRORS as e:
            _log_read_error(e)
            self._publish(CommonSaveEvent.LOAD_FAILED, error=str(e))
            return False

        if snapshot is None:
            return False

        written = snapshot.apply(self.switches, self.variables)
        logger.debug("Restored %d values from common save", written)
        self._publish(CommonSaveEvent.LOADED, snapshot=snapshot)
        return True

    def remove(self) -> bool:
        """
        Delete the common save. Removing a missing save is not an error.

        Returns:
            True if no common save remains
        """
        logger.info("Removing common save data at %s", self.storage.location)
        try:
            self.storage.remove()
        except (CommonSaveError, OSError) as e:
            logger.error("Failed to remove common save: %s", e)
            return False

        self._publish(CommonSaveEvent.REMOVED)
        return True

    def _publish(self, event_type: CommonSaveEvent, **data: Any) -> None:
        if self.event_bus:
            self.event_bus.publish(event_type, **data)

    def _create_storage(self) -> CommonSaveStorage:
        storage = create_storage(self.config.storage_mode, self.config.save_dir, self._kv_store)
        if isinstance(storage, WebStorage):
            self._kv_store = storage.store
        return storage

    def _read(self) -> Optional[Snapshot]:
        text = codec.decompress(self.storage.load())
        if text is None:
            return None
        return Snapshot.from_json(text)
