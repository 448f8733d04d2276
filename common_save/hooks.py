"""
Auto-sync: common save load/save around host lifecycle events.

    GAME_LOADED -> load()
    GAME_SAVED  -> save()
    NEW_GAME    -> load()

Each hook runs synchronously inside the host's publish call and only
when the manager's auto flag is on, checked at event time.
"""

from __future__ import annotations

import logging

from engine.core.events import DataEvent, Event, EventBus
from common_save.manager import CommonSaveManager

logger = logging.getLogger(__name__)


class AutoSync:
    """
    Registers the common save post-hooks on an event bus.

    Usage:
        auto_sync = AutoSync(common_save)
        auto_sync.attach(event_bus)
    """

    def __init__(self, manager: CommonSaveManager):
        self.manager = manager
        self._event_bus: EventBus | None = None

    @property
    def attached(self) -> bool:
        return self._event_bus is not None

    def attach(self, event_bus: EventBus) -> None:
        """Subscribe to the host lifecycle events."""
        if self._event_bus is event_bus:
            return
        self.detach()

        event_bus.subscribe(DataEvent.GAME_LOADED, self.on_game_loaded)
        event_bus.subscribe(DataEvent.GAME_SAVED, self.on_game_saved)
        event_bus.subscribe(DataEvent.NEW_GAME, self.on_new_game)
        self._event_bus = event_bus

    def detach(self) -> None:
        """Unsubscribe from the current event bus, if any."""
        if self._event_bus is None:
            return

        self._event_bus.unsubscribe(DataEvent.GAME_LOADED, self.on_game_loaded)
        self._event_bus.unsubscribe(DataEvent.GAME_SAVED, self.on_game_saved)
        self._event_bus.unsubscribe(DataEvent.NEW_GAME, self.on_new_game)
        self._event_bus = None

    def on_game_loaded(self, event: Event) -> None:
        if self.manager.is_auto():
            self.manager.load()

    def on_game_saved(self, event: Event) -> None:
        if self.manager.is_auto():
            self.manager.save()

    def on_new_game(self, event: Event) -> None:
        if self.manager.is_auto():
            self.manager.load()
