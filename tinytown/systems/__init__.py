"""Systems - behavior logic that operates on entities."""

from .selection import (
    deselect,
    find_person_at,
    handle_click,
    move_to,
    select,
    window_to_canvas,
)
from .steering import step_person, update, will_collide

__all__ = [
    "deselect",
    "find_person_at",
    "handle_click",
    "move_to",
    "select",
    "window_to_canvas",
    "step_person",
    "update",
    "will_collide",
]
