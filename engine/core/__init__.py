"""
Core engine module.

Exports:
- EventBus, Event, DataEvent: Event system and host lifecycle events
- DataManager: Host save/load orchestration seam
- GameSwitches, GameVariables, IndexedStore: Live game state stores
"""

from engine.core.events import EventBus, Event, EventHandler, DataEvent
from engine.core.data_manager import DataManager
from engine.core.state import GameSwitches, GameVariables, IndexedStore

__all__ = [
    # Events
    "EventBus",
    "Event",
    "EventHandler",
    "DataEvent",
    # Lifecycle
    "DataManager",
    # State
    "GameSwitches",
    "GameVariables",
    "IndexedStore",
]
