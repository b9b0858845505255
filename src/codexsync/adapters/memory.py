"""In-memory implementation of the authoritative store port.

Seeded from a snapshot, it lets a fix pass run offline: every call hands out
or stores copies so nothing the caller holds aliases the stored state.
"""

from __future__ import annotations

import copy
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from codexsync.domain.model import AuthoritativeCollection, AuthoritativeData, EntityKind
from codexsync.domain.ports import EntityRow, StoreError

if TYPE_CHECKING:
    from codexsync.domain.model import AuthoritativeEntity

log = getLogger(__name__)


class InMemoryAuthoritativeStore:
    def __init__(self, data: AuthoritativeData | None = None) -> None:
        data = data or AuthoritativeData()
        self._static = copy.deepcopy(data.static)
        self._entities: dict[EntityKind, dict[int, AuthoritativeEntity]] = {
            kind: {entity.id: copy.deepcopy(entity) for entity in data.collection(kind)}
            for kind in EntityKind
        }
        self.saved: list[AuthoritativeEntity] = []
        self.created: list[AuthoritativeEntity] = []

    def retrieve_by_id(self, kind: EntityKind, entity_id: int) -> AuthoritativeEntity:
        try:
            entity = self._entities[kind][entity_id]
        except KeyError as exc:
            raise StoreError(f"No {kind} with id {entity_id}") from exc
        return copy.deepcopy(entity)

    def save(self, entity: AuthoritativeEntity) -> None:
        table = self._entities[entity.KIND]
        if entity.id not in table:
            raise StoreError(f"Cannot save unknown {entity.KIND} #{entity.id}")
        stored = copy.deepcopy(entity)
        table[entity.id] = stored
        self.saved.append(copy.deepcopy(stored))
        log.debug("Saved %s #%d (%s)", entity.KIND, entity.id, entity.name)

    def list(self, kind: EntityKind) -> list[EntityRow]:
        entities = self._entities[kind].values()
        return [EntityRow(id=entity.id, name=entity.name) for entity in entities]

    def create(self, kind: EntityKind, entity: AuthoritativeEntity) -> None:
        if entity.KIND is not kind:
            raise StoreError(f"Cannot create a {entity.KIND} record as {kind}")
        table = self._entities[kind]
        new_id = max(table, default=0) + 1
        stored = replace(copy.deepcopy(entity), id=new_id)
        table[new_id] = stored
        self.created.append(copy.deepcopy(stored))
        log.debug("Created %s #%d (%s)", kind, new_id, entity.name)

    def export(self) -> AuthoritativeData:
        """Copy of the current store contents, in id order."""

        def collection(kind: EntityKind) -> AuthoritativeCollection[AuthoritativeEntity]:
            table = self._entities[kind]
            return AuthoritativeCollection(copy.deepcopy(table[key]) for key in sorted(table))

        return AuthoritativeData(
            items=collection(EntityKind.ITEM),  # type: ignore[arg-type]
            monsters=collection(EntityKind.MONSTER),  # type: ignore[arg-type]
            skills=collection(EntityKind.SKILL),  # type: ignore[arg-type]
            followers=collection(EntityKind.FOLLOWER),  # type: ignore[arg-type]
            static=copy.deepcopy(self._static),
        )
