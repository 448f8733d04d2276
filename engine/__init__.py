"""
Host engine seams for the common save plugin.

The pieces of the game runtime the plugin talks to: the event bus that
announces save/load/new game, the live switch and variable stores, and
plugin parameter loading.

Quick Start:
    from engine.core import EventBus, DataManager, GameSwitches, GameVariables

    event_bus = EventBus()
    switches, variables = GameSwitches(), GameVariables()
    data_manager = DataManager(event_bus, save_game=write_slot)
"""

__version__ = "0.1.0"
__author__ = "Developer"

from engine.core import (
    EventBus,
    Event,
    DataEvent,
    DataManager,
    GameSwitches,
    GameVariables,
    IndexedStore,
)
from engine.resources import PluginManager

__all__ = [
    # Events
    "EventBus",
    "Event",
    "DataEvent",
    # Lifecycle
    "DataManager",
    # State
    "GameSwitches",
    "GameVariables",
    "IndexedStore",
    # Resources
    "PluginManager",
]
