"""
Common save plugin wiring.

CommonSavePlugin is the long-lived object built once at startup. It
owns the manager, the auto-sync hooks and the command handler, and is
passed by reference to whatever needs them.

Usage:
    plugins = PluginManager.from_file("data/plugins.json")
    common_save = CommonSavePlugin.setup(
        plugins.parameters(PLUGIN_NAME),
        switches=game_switches,
        variables=game_variables,
        event_bus=event_bus,
    )
    common_save.command("CommonSave", ["save"])
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from engine.core.events import EventBus
from engine.core.state import IndexedStore
from common_save.commands import CommonSaveCommand
from common_save.hooks import AutoSync
from common_save.kvstore import KeyValueStore
from common_save.manager import CommonSaveManager

logger = logging.getLogger(__name__)


class CommonSavePlugin:
    """Manager + hooks + command surface for one game process."""

    def __init__(self, manager: CommonSaveManager, event_bus: EventBus):
        self.manager = manager
        self.event_bus = event_bus
        self.command = CommonSaveCommand(manager)
        self.auto_sync = AutoSync(manager)
        self.auto_sync.attach(event_bus)

    @classmethod
    def setup(
        cls,
        parameters: Optional[Mapping[str, Any]],
        switches: IndexedStore,
        variables: IndexedStore,
        event_bus: EventBus,
        kv_store: Optional[KeyValueStore] = None,
    ) -> CommonSavePlugin:
        """Parse parameters, build storage and register the hooks."""
        manager = CommonSaveManager.from_parameters(
            parameters,
            switches,
            variables,
            kv_store=kv_store,
            event_bus=event_bus,
        )
        logger.info(
            "Common save ready: %d switches, %d variables, auto=%s, storage=%s",
            len(manager.target_switches),
            len(manager.target_variables),
            manager.is_auto(),
            manager.storage.location,
        )
        return cls(manager, event_bus)

    def shutdown(self) -> None:
        """Detach the lifecycle hooks."""
        self.auto_sync.detach()
