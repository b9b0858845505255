"""Reconciliation pass defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass

from codexsync.domain.model import EntityKind

from .errors import MissingConfigurationError, UnknownEntityKindError

DEFAULT_KINDS: tuple[EntityKind, ...] = (
    EntityKind.ITEM,
    EntityKind.MONSTER,
    EntityKind.SKILL,
    EntityKind.FOLLOWER,
)


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    kinds: tuple[EntityKind, ...] = DEFAULT_KINDS
    fix: bool = False


def parse_kinds(raw: str) -> tuple[EntityKind, ...]:
    """Parse a comma-separated list of entity kinds, keeping the canonical order."""

    names = [part.strip().lower() for part in raw.split(",") if part.strip()]
    if not names:
        raise MissingConfigurationError("No entity kinds given")
    known = {kind.value: kind for kind in EntityKind}
    unknown = sorted(name for name in names if name not in known)
    if unknown:
        raise UnknownEntityKindError(unknown)
    selected = {known[name] for name in names}
    return tuple(kind for kind in DEFAULT_KINDS if kind in selected)


def get_reconcile_config(*, fix: bool = False) -> ReconcileConfig:
    raw = os.getenv("CODEXSYNC_KINDS")
    if raw is None:
        return ReconcileConfig(fix=fix)
    return ReconcileConfig(kinds=parse_kinds(raw), fix=fix)
