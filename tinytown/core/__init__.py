"""Core layer - foundational types and utilities."""

from .vec2 import Vec2
from .grid import GRID_DIVISIONS, Grid, GridPoint
from .entities import (
    PERSON_SIZE,
    PERSON_SPEED,
    Building,
    Person,
    PersonState,
    Road,
)
from .clock import FrameClock
from .events import Event, EventBus, EventType, log_event

__all__ = [
    "Vec2",
    "GRID_DIVISIONS",
    "Grid",
    "GridPoint",
    "PERSON_SIZE",
    "PERSON_SPEED",
    "Building",
    "Person",
    "PersonState",
    "Road",
    "FrameClock",
    "Event",
    "EventBus",
    "EventType",
    "log_event",
]
