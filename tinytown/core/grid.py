"""Reference grid geometry.

The canvas is divided into a fixed number of equal columns and rows
(6 by default). Buildings and roads are placed on the interior
intersections of that grid.
"""

from __future__ import annotations

from dataclasses import dataclass

from .vec2 import Vec2


GRID_DIVISIONS = 6


@dataclass(frozen=True, slots=True)
class GridPoint:
    """An intersection on the reference grid.

    (0, 0) is the top-left interior intersection, one cell in from each
    canvas edge.
    """
    i: int
    j: int

    def __str__(self) -> str:
        return f"[{self.i}, {self.j}]"


@dataclass(frozen=True)
class Grid:
    """Maps grid points to canvas coordinates.

    Attributes:
        width: Canvas width in canvas units
        height: Canvas height in canvas units
        divisions: Number of cells along each axis
    """
    width: float
    height: float
    divisions: int = GRID_DIVISIONS

    @property
    def cell_width(self) -> float:
        return self.width / self.divisions

    @property
    def cell_height(self) -> float:
        return self.height / self.divisions

    def to_canvas(self, point: GridPoint) -> Vec2:
        """Canvas position of a grid point."""
        return Vec2(
            (point.i + 1) * self.cell_width,
            (point.j + 1) * self.cell_height,
        )

    def vertical_lines(self) -> list[float]:
        """X positions of the interior vertical grid lines."""
        return [self.cell_width * (k + 1) for k in range(self.divisions - 1)]

    def horizontal_lines(self) -> list[float]:
        """Y positions of the interior horizontal grid lines."""
        return [self.cell_height * (k + 1) for k in range(self.divisions - 1)]

    def contains(self, point: GridPoint) -> bool:
        """Whether a grid point lies on an interior intersection."""
        last = self.divisions - 2
        return 0 <= point.i <= last and 0 <= point.j <= last
