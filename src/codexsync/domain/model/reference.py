"""Read-only records scraped from the reference codex.

Reference records are identified by their slug and never mutated. Relations to
other records are denormalised: status effects are carried by name, links to
other codex entries carry both the display name and the codex URI.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import MonsterKind, ReferenceNamespace, ReferenceTag
from .quality import QualityTier


def reference_uri(namespace: ReferenceNamespace, slug: str) -> str:
    return f"{namespace.prefix}{slug}/"


@dataclass(frozen=True, slots=True)
class ReferenceLink:
    """Pointer from one codex entry to another."""

    name: str
    uri: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemStats:
    attack: int | None = None
    magic: int | None = None
    hp: int | None = None
    mana: int | None = None
    defense: int | None = None
    resistance: int | None = None
    ward: int | None = None
    dexterity: int | None = None
    crit: int | None = None
    foresight: int | None = None
    adornment_slots: int | None = None
    element: str | None = None
    exp_bonus: float | None = None
    gold_bonus: float | None = None
    orn_bonus: float | None = None
    drop_bonus: float | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferenceItem:
    slug: str
    name: str
    icon: str = ""
    description: str = ""
    tier: int = 0
    quality: QualityTier = QualityTier.COMMON
    stats: ItemStats | None = None
    ability: str | None = None
    causes: tuple[str, ...] = ()
    cures: tuple[str, ...] = ()
    gives: tuple[str, ...] = ()
    immunities: tuple[str, ...] = ()
    dropped_by: tuple[ReferenceLink, ...] = ()
    upgrade_materials: tuple[ReferenceLink, ...] = ()

    @property
    def uri(self) -> str:
        return reference_uri(ReferenceNamespace.ITEMS, self.slug)


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferenceMonster:
    slug: str
    kind: MonsterKind
    name: str
    icon: str = ""
    tier: int = 0
    family: str | None = None
    events: tuple[str, ...] = ()
    tags: tuple[ReferenceTag, ...] = ()
    abilities: tuple[ReferenceLink, ...] = ()
    drops: tuple[ReferenceLink, ...] = ()

    @property
    def uri(self) -> str:
        return reference_uri(self.kind.namespace, self.slug)


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferenceSkill:
    slug: str
    name: str
    icon: str = ""
    description: str = ""
    tier: int = 0
    tags: tuple[ReferenceTag, ...] = ()
    cost: int | None = None
    causes: tuple[str, ...] = ()
    gives: tuple[str, ...] = ()

    @property
    def uri(self) -> str:
        return reference_uri(ReferenceNamespace.SPELLS, self.slug)

    @property
    def is_offhand(self) -> bool:
        return ReferenceTag.OFF_HAND_ABILITY in self.tags

    @property
    def bought_at_arcanist(self) -> bool:
        return ReferenceTag.FOUND_IN_ARCANISTS in self.tags


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferenceFollower:
    slug: str
    name: str
    icon: str = ""
    description: str = ""
    tier: int = 0
    cost: int | None = None
    abilities: tuple[ReferenceLink, ...] = ()

    @property
    def uri(self) -> str:
        return reference_uri(ReferenceNamespace.FOLLOWERS, self.slug)


type ReferenceEntity = ReferenceItem | ReferenceMonster | ReferenceSkill | ReferenceFollower
