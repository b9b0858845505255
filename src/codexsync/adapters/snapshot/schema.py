"""Pydantic models describing the on-disk snapshot files."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_to_empty(value: object) -> object:
    return "" if value is None else value


def _none_to_list(value: object) -> object:
    return [] if value is None else value


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LinkPayload(SnapshotBaseModel):
    name: str
    uri: str


class ItemStatsPayload(SnapshotBaseModel):
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


class ReferenceItemPayload(SnapshotBaseModel):
    slug: str
    name: str
    icon: str = ""
    description: str = ""
    tier: int = 0
    quality: str = "common"
    stats: ItemStatsPayload | None = None
    ability: str | None = None
    causes: list[str] = Field(default_factory=list)
    cures: list[str] = Field(default_factory=list)
    gives: list[str] = Field(default_factory=list)
    immunities: list[str] = Field(default_factory=list)
    dropped_by: list[LinkPayload] = Field(default_factory=list)
    upgrade_materials: list[LinkPayload] = Field(default_factory=list)

    _normalize_text = field_validator("icon", "description", mode="before")(_none_to_empty)


class ReferenceMonsterPayload(SnapshotBaseModel):
    slug: str
    name: str
    icon: str = ""
    tier: int = 0
    family: str | None = None
    events: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    abilities: list[LinkPayload] = Field(default_factory=list)
    drops: list[LinkPayload] = Field(default_factory=list)

    _normalize_icon = field_validator("icon", mode="before")(_none_to_empty)

    @field_validator("events", mode="before")
    @classmethod
    def _single_event(cls, value: object) -> object:
        if isinstance(value, str):
            return [value]
        return _none_to_list(value)


class ReferenceSkillPayload(SnapshotBaseModel):
    slug: str
    name: str
    icon: str = ""
    description: str = ""
    tier: int = 0
    tags: list[str] = Field(default_factory=list)
    cost: int | None = Field(default=None, alias="mana_cost")
    causes: list[str] = Field(default_factory=list)
    gives: list[str] = Field(default_factory=list)

    _normalize_text = field_validator("icon", "description", mode="before")(_none_to_empty)


class ReferenceFollowerPayload(SnapshotBaseModel):
    slug: str
    name: str
    icon: str = ""
    description: str = ""
    tier: int = 0
    cost: int | None = None
    abilities: list[LinkPayload] = Field(default_factory=list)

    _normalize_text = field_validator("icon", "description", mode="before")(_none_to_empty)


class StaticEntryPayload(SnapshotBaseModel):
    id: int
    name: str


class AuthoritativeItemPayload(SnapshotBaseModel):
    id: int
    name: str
    cross_reference_uri: str = Field(default="", alias="codex_uri")
    tier: int = 0
    type_id: int | None = Field(default=None, alias="type")
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
    causes: list[int] = Field(default_factory=list)
    cures: list[int] = Field(default_factory=list)
    gives: list[int] = Field(default_factory=list)
    prevents: list[int] = Field(default_factory=list)
    materials: list[int] = Field(default_factory=list)

    _normalize_uri = field_validator("cross_reference_uri", mode="before")(_none_to_empty)


class AuthoritativeMonsterPayload(SnapshotBaseModel):
    id: int
    name: str
    cross_reference_uri: str = Field(default="", alias="codex_uri")
    tier: int = 0
    family: int | None = None
    image_name: str = ""
    boss: bool = False
    spawns: list[int] = Field(default_factory=list)
    drops: list[int] = Field(default_factory=list)
    skills: list[int] = Field(default_factory=list)

    _normalize_uri = field_validator("cross_reference_uri", mode="before")(_none_to_empty)


class AuthoritativeSkillPayload(SnapshotBaseModel):
    id: int
    name: str
    cross_reference_uri: str = Field(default="", alias="codex_uri")
    tier: int = 0
    type_id: int | None = Field(default=None, alias="type")
    description: str = ""
    offhand: bool = False
    bought: bool = False
    cost: int = 0
    causes: list[int] = Field(default_factory=list)
    gives: list[int] = Field(default_factory=list)

    _normalize_uri = field_validator("cross_reference_uri", mode="before")(_none_to_empty)


class AuthoritativeFollowerPayload(SnapshotBaseModel):
    id: int
    name: str
    cross_reference_uri: str = Field(default="", alias="codex_uri")
    tier: int = 0
    image_name: str = ""
    description: str = ""
    cost: int = 0
    skills: list[int] = Field(default_factory=list)

    _normalize_uri = field_validator("cross_reference_uri", mode="before")(_none_to_empty)
