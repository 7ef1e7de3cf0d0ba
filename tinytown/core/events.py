"""Event system for simulation state changes.

Systems emit events when people are selected, ordered, arrive or get
blocked. Other code (logging, the visualizer's status line, tests) can
subscribe to them.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """Types of events that can occur during simulation."""

    # Selection
    PERSON_SELECTED = "person_selected"
    PERSON_DESELECTED = "person_deselected"

    # Movement
    MOVE_ORDERED = "move_ordered"
    PERSON_ARRIVED = "person_arrived"
    PERSON_BLOCKED = "person_blocked"


@dataclass
class Event:
    """An event that occurred during simulation.

    Attributes:
        type: The type of event
        frame: Frame number when the event occurred
        person_id: Person involved (if any)
        data: Additional event-specific data
        description: Human-readable description
    """
    type: EventType
    frame: int
    person_id: Optional[str] = None
    data: dict[str, Any] = field(default_factory=dict)
    description: str = ""

    def __str__(self) -> str:
        parts = [f"[frame {self.frame}]", self.type.value]
        if self.person_id:
            parts.append(f"by {self.person_id}")
        if self.description:
            parts.append(f"- {self.description}")
        return " ".join(parts)


EventHandler = Callable[[Event], None]


class EventBus:
    """Pub/sub event bus for simulation events.

    Usage:
        bus = EventBus()
        bus.subscribe(EventType.PERSON_ARRIVED, on_arrival)
        bus.subscribe_all(log_event)
        bus.emit_simple(EventType.PERSON_ARRIVED, frame=12, person_id="person_0")
    """

    def __init__(self, history_limit: int = 500) -> None:
        self._handlers: dict[EventType, list[EventHandler]] = defaultdict(list)
        self._global_handlers: list[EventHandler] = []
        self._history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Subscribe to a specific event type."""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Subscribe to all events."""
        self._global_handlers.append(handler)

    def emit(self, event: Event) -> None:
        """Emit an event to all subscribers."""
        self._history.append(event)
        if len(self._history) > self._history_limit:
            del self._history[0]

        for handler in self._handlers[event.type]:
            handler(event)

        for handler in self._global_handlers:
            handler(event)

    def emit_simple(
        self,
        event_type: EventType,
        frame: int,
        person_id: Optional[str] = None,
        description: str = "",
        **data: Any,
    ) -> Event:
        """Convenience method to emit an event with less boilerplate."""
        event = Event(
            type=event_type,
            frame=frame,
            person_id=person_id,
            description=description,
            data=data,
        )
        self.emit(event)
        return event

    @property
    def history(self) -> list[Event]:
        """Recent events, oldest first."""
        return self._history

    def get_events_by_type(self, event_type: EventType) -> list[Event]:
        """Get all events of a specific type from history."""
        return [e for e in self._history if e.type == event_type]

    def __len__(self) -> int:
        return len(self._history)

    def __bool__(self) -> bool:
        """EventBus is always truthy (even with empty history)."""
        return True


def log_event(event: Event) -> None:
    """Event handler that forwards events to the logging module."""
    if event.type == EventType.PERSON_BLOCKED:
        logger.debug(str(event))
    else:
        logger.info(str(event))
