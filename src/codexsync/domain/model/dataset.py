"""In-memory aggregates holding both sides of a reconciliation pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .authoritative import (
    AuthoritativeFollower,
    AuthoritativeItem,
    AuthoritativeMonster,
    AuthoritativeSkill,
    AuthoritativeStatic,
)
from .enums import EntityKind, MonsterKind
from .reference import ReferenceFollower, ReferenceItem, ReferenceMonster, ReferenceSkill

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .authoritative import AuthoritativeEntity


class SluggedRecord(Protocol):
    @property
    def slug(self) -> str: ...

    @property
    def uri(self) -> str: ...


class IdentifiedRecord(Protocol):
    id: int
    name: str
    cross_reference_uri: str


class ReferenceCollection[T: SluggedRecord]:
    """Reference records of one codex namespace, indexed by slug."""

    def __init__(self, records: Iterable[T] = ()) -> None:
        self._by_slug: dict[str, T] = {}
        for record in records:
            self._by_slug[record.slug] = record

    def __iter__(self) -> Iterator[T]:
        return iter(self._by_slug.values())

    def __len__(self) -> int:
        return len(self._by_slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def get_by_slug(self, slug: str) -> T | None:
        return self._by_slug.get(slug)

    def find_by_uri(self, uri: str) -> T | None:
        return next((record for record in self._by_slug.values() if record.uri == uri), None)


class AuthoritativeCollection[T: IdentifiedRecord]:
    """Authoritative records of one kind, in store order."""

    def __init__(self, records: Iterable[T] = ()) -> None:
        self._records: list[T] = list(records)

    def __iter__(self) -> Iterator[T]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def ids(self) -> set[int]:
        return {record.id for record in self._records}

    def find_by_id(self, entity_id: int) -> T | None:
        return next((record for record in self._records if record.id == entity_id), None)

    def find_by_uri(self, uri: str) -> list[T]:
        return [record for record in self._records if record.cross_reference_uri == uri]

    def append(self, record: T) -> None:
        self._records.append(record)

    def replace(self, record: T) -> None:
        """Swap the cached record having the same id, or append it."""

        for index, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[index] = record
                return
        self._records.append(record)


@dataclass(slots=True)
class ReferenceData:
    items: ReferenceCollection[ReferenceItem] = field(default_factory=ReferenceCollection)
    monsters: ReferenceCollection[ReferenceMonster] = field(default_factory=ReferenceCollection)
    bosses: ReferenceCollection[ReferenceMonster] = field(default_factory=ReferenceCollection)
    raids: ReferenceCollection[ReferenceMonster] = field(default_factory=ReferenceCollection)
    skills: ReferenceCollection[ReferenceSkill] = field(default_factory=ReferenceCollection)
    followers: ReferenceCollection[ReferenceFollower] = field(default_factory=ReferenceCollection)

    def monsters_of(self, kind: MonsterKind) -> ReferenceCollection[ReferenceMonster]:
        match kind:
            case MonsterKind.MONSTER:
                return self.monsters
            case MonsterKind.BOSS:
                return self.bosses
            case MonsterKind.RAID:
                return self.raids

    def all_monsters(self) -> Iterator[ReferenceMonster]:
        yield from self.monsters
        yield from self.bosses
        yield from self.raids


@dataclass(slots=True)
class AuthoritativeData:
    items: AuthoritativeCollection[AuthoritativeItem] = field(
        default_factory=AuthoritativeCollection
    )
    monsters: AuthoritativeCollection[AuthoritativeMonster] = field(
        default_factory=AuthoritativeCollection
    )
    skills: AuthoritativeCollection[AuthoritativeSkill] = field(
        default_factory=AuthoritativeCollection
    )
    followers: AuthoritativeCollection[AuthoritativeFollower] = field(
        default_factory=AuthoritativeCollection
    )
    static: AuthoritativeStatic = field(default_factory=AuthoritativeStatic)

    def collection(self, kind: EntityKind) -> AuthoritativeCollection[AuthoritativeEntity]:
        collections: dict[EntityKind, AuthoritativeCollection[AuthoritativeEntity]] = {
            EntityKind.ITEM: self.items,  # type: ignore[dict-item]
            EntityKind.MONSTER: self.monsters,  # type: ignore[dict-item]
            EntityKind.SKILL: self.skills,  # type: ignore[dict-item]
            EntityKind.FOLLOWER: self.followers,  # type: ignore[dict-item]
        }
        return collections[kind]


@dataclass(slots=True)
class Dataset:
    """Both sides of one snapshot."""

    reference: ReferenceData = field(default_factory=ReferenceData)
    authoritative: AuthoritativeData = field(default_factory=AuthoritativeData)
