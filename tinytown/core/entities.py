"""Core entities - Person, Building, Road.

Entities are pure data containers. Movement and selection are
implemented in systems; drawing is implemented in the visualizer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .grid import GridPoint
from .vec2 import Vec2


# =============================================================================
# Defaults
# =============================================================================

PERSON_SIZE = 12.0
PERSON_SPEED = 25.0


class PersonState(str, Enum):
    """State tag of a person. Drives the color it is drawn with."""
    DEFAULT = "default"
    SELECTED = "selected"
    MOVING = "moving"


# =============================================================================
# Person
# =============================================================================

@dataclass(eq=False)
class Person:
    """A movable circular agent.

    Attributes:
        id: Unique identifier
        pos: Center position in canvas units
        size: Radius in canvas units
        speed: Canvas units travelled per time unit
        state: Current state tag
        destination: Point the person is steering toward, if any
        home: Building this person belongs to, if any
    """
    id: str
    pos: Vec2 = field(default_factory=Vec2.zero)
    size: float = PERSON_SIZE
    speed: float = PERSON_SPEED
    state: PersonState = PersonState.DEFAULT
    destination: Optional[Vec2] = None
    home: Optional[Building] = None

    @property
    def is_selected(self) -> bool:
        return self.state == PersonState.SELECTED

    @property
    def is_moving(self) -> bool:
        return self.destination is not None

    def contains(self, point: Vec2) -> bool:
        """Whether a point falls inside this person's circle."""
        return self.pos.distance_to(point) < self.size

    def stop(self) -> None:
        """Drop the destination and go back to the default state."""
        self.destination = None
        self.state = PersonState.DEFAULT

    def __repr__(self) -> str:
        return f"Person({self.id}, pos={self.pos}, {self.state.value})"


# =============================================================================
# Town
# =============================================================================

@dataclass(eq=False)
class Building:
    """A static building anchored at a grid point.

    Attributes:
        id: Unique identifier
        corner: Grid point the building is drawn at
        width: Width in grid units
        height: Height in grid units
        color: RGB fill color
        roads: Roads attached to this building
    """
    id: str
    corner: GridPoint
    width: int = 1
    height: int = 1
    color: tuple[int, int, int] = (255, 255, 255)
    roads: list[Road] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Building({self.id}, at={self.corner}, {self.width}x{self.height})"


@dataclass(eq=False)
class Road:
    """A static road between two grid points.

    Attributes:
        start: Grid point where the road begins
        end: Grid point where the road ends
        start_building: Building at the start of the road
        end_building: Building at the end of the road
    """
    start: GridPoint
    end: GridPoint
    start_building: Optional[Building] = None
    end_building: Optional[Building] = None

    @classmethod
    def connect(
        cls,
        start_building: Building,
        end_building: Building,
        start: Optional[GridPoint] = None,
        end: Optional[GridPoint] = None,
    ) -> Road:
        """Create a road between two buildings and register it with both.

        The road runs between the buildings' grid points unless explicit
        endpoints are given.
        """
        road = cls(
            start=start or start_building.corner,
            end=end or end_building.corner,
            start_building=start_building,
            end_building=end_building,
        )
        start_building.roads.append(road)
        end_building.roads.append(road)
        return road

    def __repr__(self) -> str:
        return f"Road({self.start} -> {self.end})"
