"""
Typed event bus for host lifecycle hooks.

The host publishes named lifecycle events after its own save/load
operations finish; plugins register synchronous post-hooks instead of
patching host methods. Event types are Enums so hook registration never
depends on magic strings.

Usage:
    # Subscribe
    event_bus.subscribe(DataEvent.GAME_SAVED, on_game_saved)

    # Publish (after the host finished saving slot 3)
    event_bus.publish(DataEvent.GAME_SAVED, savefile_id=3, result=True)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class DataEvent(Enum):
    """Host save/load lifecycle events (published after the operation)."""
    GAME_SAVED = auto()
    GAME_LOADED = auto()
    NEW_GAME = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: The event type (Enum member)
        data: Dictionary of event-specific data
        consumed: Whether the event has been handled
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)
    consumed: bool = False

    def consume(self) -> None:
        """Mark event as consumed (stops propagation)."""
        self.consumed = True

    def get(self, key: str, default: Any = None) -> Any:
        """Get event data by key."""
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]


class EventBus:
    """
    Synchronous publish/subscribe bus.

    Features:
    - Typed events (Enum-based)
    - Priority ordering (higher first, FIFO among equals)
    - One-shot handlers
    - Event consumption (stops propagation)

    Handlers run inline inside publish(), so a hook has finished by the
    time the publisher continues. A failing handler is logged and does
    not stop the remaining handlers.
    """

    def __init__(self):
        # event type -> list of (priority, handler, one_shot)
        self._handlers: dict[Enum, list[tuple[int, EventHandler, bool]]] = {}

    def subscribe(
        self,
        event_type: Enum,
        handler: EventHandler,
        priority: int = 0,
        one_shot: bool = False,
    ) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to listen for
            handler: Callback function(event: Event)
            priority: Higher priority handlers are called first (default 0)
            one_shot: If True, handler is removed after first call
        """
        handlers = self._handlers.setdefault(event_type, [])

        insert_idx = len(handlers)
        for i, (p, _, _) in enumerate(handlers):
            if priority > p:
                insert_idx = i
                break

        handlers.insert(insert_idx, (priority, handler, one_shot))

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        """Remove every registration of handler for event_type."""
        if event_type not in self._handlers:
            return

        self._handlers[event_type] = [
            entry for entry in self._handlers[event_type]
            if entry[1] != handler
        ]

    def has_subscribers(self, event_type: Enum) -> bool:
        return bool(self._handlers.get(event_type))

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event and run its handlers synchronously.

        Args:
            event_type: The event type
            **data: Event data as keyword arguments

        Returns:
            The Event object (check .consumed to see if it was handled)
        """
        event = Event(type=event_type, data=data)
        self._dispatch(event)
        return event

    def clear(self, event_type: Enum | None = None) -> None:
        """
        Clear handlers.

        Args:
            event_type: If specified, only clear handlers for this type.
                       If None, clear all handlers.
        """
        if event_type is None:
            self._handlers.clear()
        else:
            self._handlers.pop(event_type, None)

    def _dispatch(self, event: Event) -> None:
        handlers = self._handlers.get(event.type)
        if not handlers:
            return

        # Snapshot so handlers may (un)subscribe while we iterate
        for entry in list(handlers):
            _, handler, one_shot = entry

            if one_shot and entry in handlers:
                handlers.remove(entry)

            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler for {event.type}")

            if event.consumed:
                break
