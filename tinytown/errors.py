"""Exceptions raised by tinytown."""


class TinyTownError(Exception):
    """Base exception for tinytown errors."""
    pass


class ConfigError(TinyTownError):
    """Configuration is invalid."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))
