"""
Simulation configuration.

Canvas size, agent defaults and loop pacing. All settings can be
overridden via TINYTOWN_* environment variables, and the command line
overrides those.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from tinytown.errors import ConfigError


SCENARIOS = ("people", "town")


def _env_number(name: str, default, cast):
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return cast(value)
    except ValueError:
        raise ConfigError([f"{name} must be a number, got {value!r}"]) from None


def _env_int(name: str, default: int) -> int:
    return _env_number(name, default, int)


def _env_float(name: str, default: float) -> float:
    return _env_number(name, default, float)


def _env_seed() -> Optional[int]:
    return _env_number("TINYTOWN_SEED", None, int)


@dataclass
class SimConfig:
    """Configuration for a tinytown session."""

    # Canvas (logical drawing space)
    canvas_width: int = field(default_factory=lambda: _env_int("TINYTOWN_CANVAS_WIDTH", 600))
    canvas_height: int = field(default_factory=lambda: _env_int("TINYTOWN_CANVAS_HEIGHT", 600))
    grid_divisions: int = 6
    show_grid: bool = field(
        default_factory=lambda: os.getenv("TINYTOWN_SHOW_GRID", "true").lower() == "true"
    )

    # People
    person_size: float = field(default_factory=lambda: _env_float("TINYTOWN_PERSON_SIZE", 12.0))
    person_speed: float = field(default_factory=lambda: _env_float("TINYTOWN_PERSON_SPEED", 25.0))
    arrival_threshold: float = 5.0  # Destination clears inside this distance
    people_count: int = field(default_factory=lambda: _env_int("TINYTOWN_PEOPLE", 8))

    # Scenario
    scenario: str = field(default_factory=lambda: os.getenv("TINYTOWN_SCENARIO", "people"))
    seed: Optional[int] = field(default_factory=_env_seed)

    # Loop pacing
    time_unit_ms: float = 60.0  # One unit of elapsed time
    fps: int = field(default_factory=lambda: _env_int("TINYTOWN_FPS", 60))
    window_scale: float = field(default_factory=lambda: _env_float("TINYTOWN_WINDOW_SCALE", 1.0))

    log_level: str = field(default_factory=lambda: os.getenv("TINYTOWN_LOG_LEVEL", "INFO"))

    @classmethod
    def from_env(cls) -> "SimConfig":
        """Create config from environment variables."""
        return cls()

    @property
    def window_size(self) -> tuple[int, int]:
        """Window size in screen pixels."""
        return (
            round(self.canvas_width * self.window_scale),
            round(self.canvas_height * self.window_scale),
        )

    def with_overrides(self, **overrides: Any) -> "SimConfig":
        """Copy of this config with non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        canvas_ok = self.canvas_width > 0 and self.canvas_height > 0
        if not canvas_ok:
            errors.append("canvas size must be positive")
        elif self.person_size > 0 and min(self.canvas_width, self.canvas_height) < 2 * self.person_size:
            canvas_ok = False
            errors.append(f"canvas must be at least {2 * self.person_size:g} units across to hold a person")
        if self.grid_divisions < 2:
            errors.append("grid_divisions must be at least 2")
        elif self.scenario == "town" and self.grid_divisions < 3:
            errors.append("town scenario needs grid_divisions of at least 3")
        if self.person_size <= 0:
            errors.append("person_size must be positive")
        if self.person_speed < 0:
            errors.append("person_speed must not be negative")
        if self.people_count < 0:
            errors.append("people_count must not be negative")
        if self.scenario not in SCENARIOS:
            errors.append(f"unknown scenario {self.scenario!r} (expected one of {', '.join(SCENARIOS)})")
        if self.time_unit_ms <= 0:
            errors.append("time_unit_ms must be positive")
        if self.fps <= 0:
            errors.append("fps must be positive")
        if self.window_scale <= 0:
            errors.append("window_scale must be positive")
        elif canvas_ok and min(self.window_size) < 1:
            errors.append(f"window_scale {self.window_scale:g} gives an empty window")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"unknown log level {self.log_level!r}")
        return errors

    def ensure_valid(self) -> "SimConfig":
        """Raise ConfigError if the configuration is invalid."""
        errors = self.validate()
        if errors:
            raise ConfigError(errors)
        return self


# Singleton config instance
_config: Optional[SimConfig] = None


def get_config() -> SimConfig:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = SimConfig.from_env()
    return _config


def set_config(config: Optional[SimConfig]) -> None:
    """Replace the global configuration (None resets to environment defaults)."""
    global _config
    _config = config
