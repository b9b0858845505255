"""Port for the mutable, admin-managed authoritative store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from codexsync.domain.model import AuthoritativeEntity, EntityKind


class StoreError(RuntimeError):
    """Raised by store adapters when a request fails (transport, parsing, rejection)."""


@dataclass(frozen=True, slots=True)
class EntityRow:
    """One line of the store's listing of a kind."""

    id: int
    name: str


@runtime_checkable
class AuthoritativeStore(Protocol):
    """Admin interface of the authoritative store.

    Every call is a full round trip. ``create`` does not return the new id;
    callers re-``list`` the kind to discover it.
    """

    def retrieve_by_id(self, kind: EntityKind, entity_id: int) -> AuthoritativeEntity: ...

    def save(self, entity: AuthoritativeEntity) -> None: ...

    def list(self, kind: EntityKind) -> list[EntityRow]: ...

    def create(self, kind: EntityKind, entity: AuthoritativeEntity) -> None: ...
