"""Reconciliation error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codexsync.domain.model import EntityKind


class ReconciliationError(RuntimeError):
    """Base class for reconciliation failures."""


class EntityNotFoundError(ReconciliationError):
    """No counterpart exists on the other side."""

    def __init__(self, kind: EntityKind, key: str) -> None:
        super().__init__(f"No {kind} matches {key!r}")
        self.kind = kind
        self.key = key


class DuplicateMatchError(ReconciliationError):
    """More than one authoritative entity claims the same reference slug."""

    def __init__(self, kind: EntityKind, slug: str, ids: Sequence[int]) -> None:
        joined = ", ".join(str(entity_id) for entity_id in ids)
        super().__init__(f"Several {kind} match {slug!r}: ids {joined}")
        self.kind = kind
        self.slug = slug
        self.ids = tuple(ids)


class UnresolvedReferenceError(ReconciliationError):
    """A fixer could not map an expected name to an authoritative id."""

    def __init__(self, field_name: str, name: str) -> None:
        super().__init__(f"Cannot resolve {name!r} for field {field_name}")
        self.field_name = field_name
        self.name = name


class FixAbortedError(ReconciliationError):
    """A store round trip failed twice while fixing an entity."""

    def __init__(
        self,
        kind: EntityKind,
        entity_id: int,
        entity_name: str,
        field_name: str,
    ) -> None:
        super().__init__(f"Fixing {field_name} of {kind} #{entity_id} ({entity_name}) failed")
        self.kind = kind
        self.entity_id = entity_id
        self.entity_name = entity_name
        self.field_name = field_name
