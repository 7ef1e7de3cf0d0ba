"""Shared pytest fixtures for tinytown tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tinytown.config import SimConfig, set_config
from tinytown.core.entities import Person
from tinytown.core.events import EventBus
from tinytown.core.grid import Grid
from tinytown.core.vec2 import Vec2
from tinytown.game_state import GameState


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def config() -> SimConfig:
    """Config with fixed values (independent of the environment)."""
    return SimConfig(
        canvas_width=600,
        canvas_height=600,
        grid_divisions=6,
        show_grid=True,
        person_size=12.0,
        person_speed=25.0,
        arrival_threshold=5.0,
        people_count=8,
        scenario="people",
        seed=1234,
        time_unit_ms=60.0,
        fps=60,
        window_scale=1.0,
        log_level="INFO",
    )


@pytest.fixture(autouse=True)
def reset_global_config():
    """Make sure no test leaks a cached global config."""
    set_config(None)
    yield
    set_config(None)


# =============================================================================
# State Fixtures
# =============================================================================


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def state(event_bus) -> GameState:
    """Empty 600x600 state."""
    return GameState(grid=Grid(600, 600), event_bus=event_bus)


@pytest.fixture
def make_person(state):
    """Factory that adds a person to the state."""
    counter = {"n": 0}

    def _make(x: float, y: float, **kwargs) -> Person:
        person = Person(id=f"p{counter['n']}", pos=Vec2(x, y), **kwargs)
        counter["n"] += 1
        state.add(person)
        return person

    return _make
