"""
Host save/load orchestration seam.

DataManager wraps the host's own slot operations and publishes a
DataEvent once each one has finished. Plugins hook those events rather
than replacing the operations, and the host's return value is passed
back to the caller untouched.

Usage:
    data_manager = DataManager(
        event_bus,
        save_game=slots.save,
        load_game=slots.load,
        setup_new_game=game.reset,
    )
    ok = data_manager.save_game(savefile_id=1)
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from engine.core.events import DataEvent, EventBus


def _noop(*args: Any) -> Any:
    return None


class DataManager:
    """Runs host slot operations and announces them on the event bus."""

    def __init__(
        self,
        event_bus: EventBus,
        save_game: Optional[Callable[[int], Any]] = None,
        load_game: Optional[Callable[[int], Any]] = None,
        setup_new_game: Optional[Callable[[], Any]] = None,
    ):
        self.event_bus = event_bus
        self._save_game = save_game or _noop
        self._load_game = load_game or _noop
        self._setup_new_game = setup_new_game or _noop

    def save_game(self, savefile_id: int) -> Any:
        """Save a slot, then publish GAME_SAVED. Returns the host result."""
        result = self._save_game(savefile_id)
        self.event_bus.publish(DataEvent.GAME_SAVED, savefile_id=savefile_id, result=result)
        return result

    def load_game(self, savefile_id: int) -> Any:
        """Load a slot, then publish GAME_LOADED. Returns the host result."""
        result = self._load_game(savefile_id)
        self.event_bus.publish(DataEvent.GAME_LOADED, savefile_id=savefile_id, result=result)
        return result

    def setup_new_game(self) -> Any:
        """Start a new game, then publish NEW_GAME."""
        result = self._setup_new_game()
        self.event_bus.publish(DataEvent.NEW_GAME, result=result)
        return result
