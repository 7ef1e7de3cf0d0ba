"""Frame clock and time management.

Converts wall-clock time between frames into simulation time units.
One time unit is `time_unit_ms` milliseconds (60ms by default), so a
person with speed 25 covers 25 canvas units every 60ms.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional


def _now_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass
class FrameClock:
    """Measures elapsed time between frames.

    Attributes:
        time_unit_ms: Milliseconds per simulation time unit
        elapsed: Total simulation time units elapsed
        frame_count: Number of frames ticked
        time_source: Callable returning the current time in milliseconds
    """
    time_unit_ms: float = 60.0
    elapsed: float = 0.0
    frame_count: int = 0
    time_source: Callable[[], float] = field(default=_now_ms, repr=False)

    _last_update_ms: Optional[float] = field(default=None, repr=False)

    def start(self) -> None:
        """Mark the current time as the last update time."""
        self._last_update_ms = self.time_source()

    def tick(self) -> float:
        """Advance to the current wall time.

        Returns:
            Time units elapsed since the previous tick (0 on the first tick
            if the clock was never started)
        """
        now = self.time_source()
        if self._last_update_ms is None:
            self._last_update_ms = now
        dt = max(0.0, self.ms_to_units(now - self._last_update_ms))
        self._last_update_ms = now
        self.elapsed += dt
        self.frame_count += 1
        return dt

    def reset(self) -> None:
        """Reset clock to initial state."""
        self.elapsed = 0.0
        self.frame_count = 0
        self._last_update_ms = None

    def ms_to_units(self, ms: float) -> float:
        """Convert milliseconds to time units."""
        return ms / self.time_unit_ms

    def format_time(self) -> str:
        """Format current time as readable string."""
        return f"{self.elapsed:.1f}u (frame {self.frame_count})"

    def __repr__(self) -> str:
        return f"FrameClock(elapsed={self.elapsed:.2f}, frame={self.frame_count})"
