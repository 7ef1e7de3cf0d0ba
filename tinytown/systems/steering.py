"""Steering system.

Moves each person with a destination straight toward it at constant
speed, and stops them when they arrive or when the next step would put
them on top of someone else.
"""

from __future__ import annotations

import logging

from ..core.entities import Person
from ..core.events import EventType
from ..core.vec2 import Vec2
from ..game_state import GameState

logger = logging.getLogger(__name__)


def will_collide(state: GameState, person: Person, new_pos: Vec2) -> bool:
    """Whether moving `person` to `new_pos` overlaps any other person.

    Two people overlap when their centers are closer than twice the
    moving person's size.
    """
    min_distance = person.size * 2
    for other in state.iter_people():
        if other is person:
            continue
        if new_pos.distance_to(other.pos) < min_distance:
            return True
    return False


def step_person(state: GameState, person: Person, dt: float) -> None:
    """Advance one person by `dt` time units.

    The person moves `speed * dt` toward the destination, except that the
    step is capped at the remaining distance: a step that would overshoot
    lands exactly on the destination, and the arrival check clears it on
    the next frame.
    """
    if person.destination is None:
        return

    offset = person.destination - person.pos
    distance = offset.length()

    # Arrival is checked first so a zero-length offset is never normalized
    if distance < state.arrival_threshold:
        logger.debug(f"{person.id} reached {person.destination}")
        destination = person.destination
        person.stop()
        state.event_bus.emit_simple(
            EventType.PERSON_ARRIVED,
            frame=state.frame,
            person_id=person.id,
            description=f"arrived at {destination}",
            destination=destination,
        )
        return

    # Never step past the destination
    step = min(person.speed * dt, distance)
    new_pos = person.pos + offset.normalized() * step

    if will_collide(state, person, new_pos):
        destination = person.destination
        person.stop()
        state.event_bus.emit_simple(
            EventType.PERSON_BLOCKED,
            frame=state.frame,
            person_id=person.id,
            description=f"stopped at {person.pos} short of {destination}",
            destination=destination,
        )
        return

    person.pos = new_pos


def update(state: GameState, dt: float) -> None:
    """Run one update step over every person in list order.

    Buildings and roads are static and have nothing to update.
    """
    state.frame += 1
    for person in state.iter_people():
        step_person(state, person, dt)
