"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError, MissingConfigurationError, UnknownEntityKindError
from .logging import configure_logging
from .reconcile import DEFAULT_KINDS, ReconcileConfig, get_reconcile_config, parse_kinds
from .storage import StorageConfig, get_storage_config

__all__ = [
    "DEFAULT_KINDS",
    "ConfigurationError",
    "MissingConfigurationError",
    "ReconcileConfig",
    "StorageConfig",
    "UnknownEntityKindError",
    "configure_logging",
    "get_reconcile_config",
    "get_storage_config",
    "parse_kinds",
]
