"""Mutable records of the authoritative store.

Every record is identified by the numeric id the store assigned and points
back at its codex counterpart through ``cross_reference_uri`` (empty when the
entity was never matched). Relations are lists of numeric ids.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .enums import EntityKind


@dataclass(slots=True, kw_only=True)
class AuthoritativeItem:
    KIND: ClassVar[EntityKind] = EntityKind.ITEM

    id: int
    name: str
    cross_reference_uri: str = ""
    tier: int = 0
    type_id: int | None = None
    image_name: str = ""
    description: str = ""
    attack: int = 0
    magic: int = 0
    hp: int = 0
    mana: int = 0
    defense: int = 0
    resistance: int = 0
    ward: int = 0
    dexterity: int = 0
    crit: int = 0
    foresight: int = 0
    base_adornment_slots: int = 0
    has_slots: bool = False
    element: int | None = None
    ability: int | None = None
    exp_bonus: float = 0.0
    gold_bonus: float = 0.0
    orn_bonus: float = 0.0
    drop_bonus: float = 0.0
    causes: list[int] = field(default_factory=list)
    cures: list[int] = field(default_factory=list)
    gives: list[int] = field(default_factory=list)
    prevents: list[int] = field(default_factory=list)
    materials: list[int] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class AuthoritativeMonster:
    KIND: ClassVar[EntityKind] = EntityKind.MONSTER

    id: int
    name: str
    cross_reference_uri: str = ""
    tier: int = 0
    family: int | None = None
    image_name: str = ""
    boss: bool = False
    spawns: list[int] = field(default_factory=list)
    drops: list[int] = field(default_factory=list)
    skills: list[int] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class AuthoritativeSkill:
    KIND: ClassVar[EntityKind] = EntityKind.SKILL

    id: int
    name: str
    cross_reference_uri: str = ""
    tier: int = 0
    type_id: int | None = None
    description: str = ""
    offhand: bool = False
    bought: bool = False
    cost: int = 0
    causes: list[int] = field(default_factory=list)
    gives: list[int] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class AuthoritativeFollower:
    KIND: ClassVar[EntityKind] = EntityKind.FOLLOWER

    id: int
    name: str
    cross_reference_uri: str = ""
    tier: int = 0
    image_name: str = ""
    description: str = ""
    cost: int = 0
    skills: list[int] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class StaticEntry:
    """Row of one of the store's static lookup tables (spawns, elements, ...)."""

    id: int
    name: str


@dataclass(slots=True, kw_only=True)
class AuthoritativeStatic:
    spawns: list[StaticEntry] = field(default_factory=list)
    status_effects: list[StaticEntry] = field(default_factory=list)
    elements: list[StaticEntry] = field(default_factory=list)
    monster_families: list[StaticEntry] = field(default_factory=list)
    item_types: list[StaticEntry] = field(default_factory=list)
    skill_types: list[StaticEntry] = field(default_factory=list)

    def name_of(self, table: list[StaticEntry], entry_id: int | None) -> str | None:
        if entry_id is None:
            return None
        return next((entry.name for entry in table if entry.id == entry_id), None)


type AuthoritativeEntity = (
    AuthoritativeItem | AuthoritativeMonster | AuthoritativeSkill | AuthoritativeFollower
)
