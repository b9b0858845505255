"""Configuration error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values are absent or blank."""


class UnknownEntityKindError(ConfigurationError):
    """Raised when a kind selection names something other than an entity kind."""

    def __init__(self, names: Sequence[str]) -> None:
        super().__init__(f"Unknown entity kinds: {', '.join(names)}")
        self.names = tuple(names)
