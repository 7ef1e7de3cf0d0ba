"""2D vector type for positions and destinations.

Units are canvas units unless otherwise specified.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D vector.

    Coordinate system (canvas space):
        Origin (0, 0) = Top-left corner of the canvas
        +X = Right
        +Y = Down
    """
    x: float = 0.0
    y: float = 0.0

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    # =========================================================================
    # Vector Operations
    # =========================================================================

    def length(self) -> float:
        """Magnitude of vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vec2:
        """Unit vector in same direction (zero vector if too short)."""
        length = self.length()
        if length < 0.0001:
            return Vec2(0, 0)
        return Vec2(self.x / length, self.y / length)

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (other - self).length()

    def scaled(self, sx: float, sy: float) -> Vec2:
        """Component-wise scale, used for window/canvas conversion."""
        return Vec2(self.x * sx, self.y * sy)

    # =========================================================================
    # Utility
    # =========================================================================

    def as_int_tuple(self) -> tuple[int, int]:
        """Pixel tuple for drawing calls."""
        return int(round(self.x)), int(round(self.y))

    def __repr__(self) -> str:
        return f"Vec2({self.x:.2f}, {self.y:.2f})"

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f})"

    @classmethod
    def zero(cls) -> Vec2:
        """Zero vector."""
        return cls(0, 0)
