"""Selection and command input.

Turns clicks into selections and move orders. At most one person is
selected at a time; ordering a move releases the selection.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.entities import Person, PersonState
from ..core.events import EventType
from ..core.vec2 import Vec2
from ..game_state import GameState

logger = logging.getLogger(__name__)


def window_to_canvas(
    point: tuple[float, float],
    window_size: tuple[float, float],
    canvas_size: tuple[float, float],
    offset: tuple[float, float] = (0, 0),
) -> Vec2:
    """Scale a click from window pixels into canvas units.

    Args:
        point: Click position in window pixels
        window_size: Size the canvas is displayed at, in pixels
        canvas_size: Logical canvas size
        offset: Window position of the canvas's top-left corner
    """
    sx = canvas_size[0] / window_size[0]
    sy = canvas_size[1] / window_size[1]
    return Vec2(point[0] - offset[0], point[1] - offset[1]).scaled(sx, sy)


def find_person_at(state: GameState, point: Vec2) -> Optional[Person]:
    """First person (in list order) whose circle contains the point."""
    for person in state.iter_people():
        if person.contains(point):
            return person
    return None


def deselect(state: GameState) -> None:
    """Clear the selection, if there is one."""
    person = state.selected
    if person is None:
        return
    state.selected = None
    if person.is_selected:
        person.state = PersonState.DEFAULT
    state.event_bus.emit_simple(
        EventType.PERSON_DESELECTED,
        frame=state.frame,
        person_id=person.id,
    )


def select(state: GameState, person: Person) -> None:
    """Make `person` the only selected person.

    A person that is walking stops where it is when picked up.
    """
    if state.selected is person:
        return
    deselect(state)

    person.destination = None
    person.state = PersonState.SELECTED
    state.selected = person
    state.event_bus.emit_simple(
        EventType.PERSON_SELECTED,
        frame=state.frame,
        person_id=person.id,
        description=f"at {person.pos}",
    )


def move_to(state: GameState, person: Person, destination: Vec2) -> None:
    """Send `person` toward `destination`, releasing the selection."""
    if state.selected is person:
        deselect(state)

    person.destination = destination
    person.state = PersonState.MOVING
    state.event_bus.emit_simple(
        EventType.MOVE_ORDERED,
        frame=state.frame,
        person_id=person.id,
        description=f"{person.pos} -> {destination}",
        destination=destination,
    )


def handle_click(state: GameState, point: Vec2) -> Optional[Person]:
    """Apply a click at `point` (canvas units).

    Clicking a person selects them. Clicking anywhere else sends the
    selected person there. Clicking empty space with nobody selected
    does nothing.

    Returns:
        The person that was selected or ordered, or None
    """
    person = find_person_at(state, point)
    if person is not None:
        select(state, person)
        return person

    if state.selected is not None:
        person = state.selected
        move_to(state, person, point)
        return person

    logger.debug(f"Click at {point} hit nothing")
    return None
