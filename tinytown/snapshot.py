"""Text snapshots of the game state.

Used by headless runs to log where everybody is, frame by frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.entities import Person
from .game_state import GameState


@dataclass
class PersonSnapshot:
    """Snapshot of a person at a single frame."""
    id: str
    pos: tuple[float, float]
    state: str
    destination: Optional[tuple[float, float]]

    @classmethod
    def from_person(cls, person: Person) -> PersonSnapshot:
        dest = person.destination
        return cls(
            id=person.id,
            pos=(round(person.pos.x, 1), round(person.pos.y, 1)),
            state=person.state.value,
            destination=(round(dest.x, 1), round(dest.y, 1)) if dest else None,
        )

    def format(self) -> str:
        """Single-line format for logs."""
        line = f"  {self.id:10} pos=({self.pos[0]:6.1f}, {self.pos[1]:6.1f}) {self.state:8}"
        if self.destination:
            line += f" -> ({self.destination[0]:6.1f}, {self.destination[1]:6.1f})"
        return line


def format_state(state: GameState) -> str:
    """Multi-line summary of every person in the state."""
    selected = state.selected.id if state.selected else "none"
    lines = [f"Frame {state.frame} (selected: {selected})"]
    lines.extend(PersonSnapshot.from_person(p).format() for p in state.iter_people())
    return "\n".join(lines)
