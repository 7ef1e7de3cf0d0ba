"""Starting layouts.

Two scenarios are available:

- ``people``: people scattered at random over an empty canvas
- ``town``: the same, plus two buildings joined by a road
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from tinytown.config import SimConfig
from tinytown.core.entities import Building, Person, Road
from tinytown.core.grid import Grid, GridPoint
from tinytown.core.vec2 import Vec2
from tinytown.errors import ConfigError
from tinytown.game_state import GameState

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 200


def _new_state(config: SimConfig) -> GameState:
    grid = Grid(config.canvas_width, config.canvas_height, config.grid_divisions)
    return GameState(grid=grid, arrival_threshold=config.arrival_threshold)


def scatter_people(
    state: GameState,
    count: int,
    rng: random.Random,
    size: float,
    speed: float,
) -> list[Person]:
    """Add `count` people at random, non-overlapping positions.

    People are kept a full radius inside the canvas edges. A person that
    cannot be placed clear of the others is skipped.
    """
    placed = []
    for n in range(count):
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            pos = Vec2(
                rng.randint(int(size), int(state.width - size)),
                rng.randint(int(size), int(state.height - size)),
            )
            if all(pos.distance_to(p.pos) >= size * 2 for p in state.iter_people()):
                break
        else:
            logger.warning(f"Could not place person {n} clear of the others, skipping")
            continue

        person = Person(id=f"person_{n}", pos=pos, size=size, speed=speed)
        state.add(person)
        placed.append(person)
    return placed


def build_people(config: SimConfig, rng: Optional[random.Random] = None) -> GameState:
    """Empty canvas with randomly scattered people."""
    rng = rng or random.Random(config.seed)
    state = _new_state(config)
    scatter_people(state, config.people_count, rng, config.person_size, config.person_speed)
    return state


def build_town(config: SimConfig, rng: Optional[random.Random] = None) -> GameState:
    """Two buildings joined by a road, with people scattered around them.

    Roads go first in the object list so buildings and people are drawn
    on top of them. Each person is given one of the buildings as home.
    """
    rng = rng or random.Random(config.seed)
    state = _new_state(config)

    town_hall = Building("building_0", GridPoint(0, 0))
    house = Building("building_1", GridPoint(0, 1))
    off_grid = [b.id for b in (town_hall, house) if not state.grid.contains(b.corner)]
    if off_grid:
        raise ConfigError([
            f"{state.grid.divisions}x{state.grid.divisions} grid has no room for {', '.join(off_grid)}"
        ])
    road = Road.connect(town_hall, house)
    state.add(road, town_hall, house)

    people = scatter_people(state, config.people_count, rng, config.person_size, config.person_speed)
    for person in people:
        person.home = rng.choice([town_hall, house])
    return state


SCENARIO_BUILDERS: dict[str, Callable[..., GameState]] = {
    "people": build_people,
    "town": build_town,
}


def build_scenario(config: SimConfig, rng: Optional[random.Random] = None) -> GameState:
    """Build the starting state for `config.scenario`."""
    try:
        builder = SCENARIO_BUILDERS[config.scenario]
    except KeyError:
        raise ConfigError([f"unknown scenario {config.scenario!r}"]) from None
    state = builder(config, rng)
    logger.info(
        f"Built {config.scenario!r} scenario: {len(state.people)} people, "
        f"{len(state.buildings)} buildings, {len(state.roads)} roads"
    )
    return state
