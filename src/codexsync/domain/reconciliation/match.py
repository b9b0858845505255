"""Pair codex records with their authoritative counterparts.

Authoritative entities point at the codex through ``cross_reference_uri``;
codex records are identified by slug. Matching therefore reduces to parsing
the URI into ``(namespace, slug)``. Monsters need one extra step because the
codex splits them into monsters, bosses and raids while the store keeps a
single kind; :func:`classify_monster` recovers the namespace from the store
side.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from codexsync.domain.model import (
    NAMESPACE_BY_KIND,
    EntityKind,
    MonsterKind,
    ReferenceNamespace,
)

from .errors import DuplicateMatchError, EntityNotFoundError
from .tables import RAID_SPAWNS

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from codexsync.domain.model import (
        AuthoritativeEntity,
        AuthoritativeMonster,
        AuthoritativeStatic,
        IdentifiedRecord,
        ReferenceCollection,
        ReferenceData,
        ReferenceEntity,
    )

_CODEX_ROOT = "codex"


def parse_reference_uri(uri: str) -> tuple[ReferenceNamespace, str] | None:
    """Split ``/codex/<namespace>/<slug>/`` into its namespace and slug.

    The ``/codex`` root is optional. Returns ``None`` for empty or foreign URIs.
    """

    parts = [part for part in uri.split("/") if part]
    if len(parts) < 2 or parts[:-2] not in ([], [_CODEX_ROOT]):
        return None
    try:
        namespace = ReferenceNamespace(parts[-2])
    except ValueError:
        return None
    return namespace, parts[-1]


def slug_from_uri(uri: str, namespace: ReferenceNamespace) -> str | None:
    parsed = parse_reference_uri(uri)
    if parsed is None or parsed[0] is not namespace:
        return None
    return parsed[1]


def classify_monster(monster: AuthoritativeMonster, static: AuthoritativeStatic) -> MonsterKind:
    if not monster.boss:
        return MonsterKind.MONSTER
    raid_spawn_ids = {spawn.id for spawn in static.spawns if spawn.name in RAID_SPAWNS}
    if raid_spawn_ids.intersection(monster.spawns):
        return MonsterKind.RAID
    return MonsterKind.BOSS


class SlugIndex[T: IdentifiedRecord]:
    """Authoritative entities of one kind grouped by the codex entry they point at.

    Built once per pass; entities with an empty or unparsable
    ``cross_reference_uri`` are left out.
    """

    def __init__(
        self,
        kind: EntityKind,
        entities: Iterable[T],
        *,
        predicate: Callable[[T], bool] | None = None,
    ) -> None:
        self.kind = kind
        self._by_key: defaultdict[tuple[ReferenceNamespace, str], list[T]] = defaultdict(list)
        for entity in entities:
            if predicate is not None and not predicate(entity):
                continue
            key = parse_reference_uri(entity.cross_reference_uri)
            if key is not None:
                self._by_key[key].append(entity)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def match(self, namespace: ReferenceNamespace, slug: str) -> T:
        candidates = self._by_key.get((namespace, slug), [])
        if not candidates:
            raise EntityNotFoundError(self.kind, slug)
        if len(candidates) > 1:
            raise DuplicateMatchError(self.kind, slug, [entity.id for entity in candidates])
        return candidates[0]

    def match_uri(self, uri: str) -> T:
        parsed = parse_reference_uri(uri)
        if parsed is None:
            raise EntityNotFoundError(self.kind, uri)
        return self.match(*parsed)


def match_authoritative_for_reference[T: IdentifiedRecord](
    reference: ReferenceEntity,
    kind: EntityKind,
    entities: Iterable[T],
) -> T:
    """One-off lookup; build a :class:`SlugIndex` when matching many records."""

    return SlugIndex(kind, entities).match_uri(reference.uri)


def match_reference_for_authoritative(
    entity: AuthoritativeEntity,
    reference: ReferenceData,
    static: AuthoritativeStatic,
) -> ReferenceEntity:
    kind = entity.KIND
    collection: ReferenceCollection[ReferenceEntity]
    if kind is EntityKind.MONSTER:
        monster_kind = classify_monster(entity, static)  # type: ignore[arg-type]
        namespace = monster_kind.namespace
        collection = reference.monsters_of(monster_kind)  # type: ignore[assignment]
    else:
        namespace = NAMESPACE_BY_KIND[kind]
        collection = {  # type: ignore[assignment]
            EntityKind.ITEM: reference.items,
            EntityKind.SKILL: reference.skills,
            EntityKind.FOLLOWER: reference.followers,
        }[kind]

    slug = slug_from_uri(entity.cross_reference_uri, namespace)
    found = collection.get_by_slug(slug) if slug is not None else None
    if found is None:
        raise EntityNotFoundError(kind, entity.cross_reference_uri or entity.name)
    return found
