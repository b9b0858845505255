"""Outcome of a reconciliation pass."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from codexsync.domain.model import EntityKind

type Side = Literal["authoritative", "reference"]


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldDiscrepancy:
    kind: EntityKind
    entity_id: int
    entity_name: str
    field_name: str
    authoritative_value: str
    reference_value: str
    fixed: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingEntity:
    """An entity present on one side only. ``missing_from`` names the side lacking it."""

    kind: EntityKind
    missing_from: Side
    key: str
    name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class UnresolvedReference:
    kind: EntityKind
    entity_name: str
    field_name: str
    labels: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityFailure:
    """An entity whose processing stopped early (duplicate match, store failure)."""

    kind: EntityKind
    key: str
    reason: str


@dataclass(slots=True)
class ReconciliationReport:
    discrepancies: list[FieldDiscrepancy] = field(default_factory=list)
    missing: list[MissingEntity] = field(default_factory=list)
    unresolved: list[UnresolvedReference] = field(default_factory=list)
    failures: list[EntityFailure] = field(default_factory=list)
    missing_status_effects: list[str] = field(default_factory=list)
    unused_status_effects: list[str] = field(default_factory=list)
    created: int = 0

    @property
    def mismatched(self) -> int:
        return len(self.discrepancies)

    @property
    def fixed(self) -> int:
        return sum(1 for discrepancy in self.discrepancies if discrepancy.fixed)

    @property
    def unfixed(self) -> int:
        return self.mismatched - self.fixed

    def missing_from(self, side: Side, kind: EntityKind | None = None) -> list[MissingEntity]:
        return [
            entry
            for entry in self.missing
            if entry.missing_from == side and (kind is None or entry.kind is kind)
        ]

    def mismatches_by_kind(self) -> Counter[EntityKind]:
        return Counter(discrepancy.kind for discrepancy in self.discrepancies)

    def summary(self) -> dict[str, int]:
        return {
            "missing_on_authoritative": len(self.missing_from("authoritative")),
            "missing_on_reference": len(self.missing_from("reference")),
            "mismatched": self.mismatched,
            "fixed": self.fixed,
            "unfixed": self.unfixed,
            "created": self.created,
            "unresolved": len(self.unresolved),
            "failures": len(self.failures),
        }
