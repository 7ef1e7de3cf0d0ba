"""Game state - everything the frame loop reads and mutates.

A single GameState is created per session and passed explicitly to the
update, draw and input functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from tinytown.core.entities import Building, Person, Road
from tinytown.core.events import EventBus
from tinytown.core.grid import Grid


Entity = Union[Person, Building, Road]


@dataclass
class GameState:
    """In-memory state of a session.

    Attributes:
        grid: Canvas and grid geometry
        objects: Ordered entity list (also the draw order)
        selected: The single selected person, if any
        event_bus: Where systems report what happened
        arrival_threshold: Distance at which a destination counts as reached
        frame: Number of update steps run so far
    """
    grid: Grid
    objects: list[Entity] = field(default_factory=list)
    selected: Optional[Person] = None
    event_bus: EventBus = field(default_factory=EventBus)
    arrival_threshold: float = 5.0
    frame: int = 0

    def add(self, *entities: Entity) -> None:
        """Append entities to the end of the object list."""
        self.objects.extend(entities)

    @property
    def people(self) -> list[Person]:
        return [o for o in self.objects if isinstance(o, Person)]

    @property
    def buildings(self) -> list[Building]:
        return [o for o in self.objects if isinstance(o, Building)]

    @property
    def roads(self) -> list[Road]:
        return [o for o in self.objects if isinstance(o, Road)]

    def iter_people(self) -> Iterator[Person]:
        """Iterate people in list order without building a new list."""
        for obj in self.objects:
            if isinstance(obj, Person):
                yield obj

    @property
    def width(self) -> float:
        return self.grid.width

    @property
    def height(self) -> float:
        return self.grid.height
