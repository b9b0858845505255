"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """Entity kinds as the authoritative store partitions them."""

    ITEM = "items"
    MONSTER = "monsters"
    SKILL = "skills"
    FOLLOWER = "followers"


class ReferenceNamespace(StrEnum):
    """URI namespaces of the reference codex."""

    ITEMS = "items"
    MONSTERS = "monsters"
    BOSSES = "bosses"
    RAIDS = "raids"
    SPELLS = "spells"
    FOLLOWERS = "followers"

    @property
    def prefix(self) -> str:
        return f"/codex/{self.value}/"


class MonsterKind(StrEnum):
    """The reference codex splits what the store calls a monster in three."""

    MONSTER = "monsters"
    BOSS = "bosses"
    RAID = "raids"

    @property
    def namespace(self) -> ReferenceNamespace:
        return ReferenceNamespace(self.value)


class ReferenceTag(StrEnum):
    WORLD_RAID = "world_raid"
    KINGDOM_RAID = "kingdom_raid"
    OTHER_REALMS_RAID = "other_realms_raid"
    OFF_HAND_ABILITY = "off_hand_ability"
    FOUND_IN_ARCANISTS = "found_in_arcanists"
    FOUND_IN_SHOPS = "found_in_shops"


NAMESPACE_BY_KIND: dict[EntityKind, ReferenceNamespace] = {
    EntityKind.ITEM: ReferenceNamespace.ITEMS,
    EntityKind.SKILL: ReferenceNamespace.SPELLS,
    EntityKind.FOLLOWER: ReferenceNamespace.FOLLOWERS,
}
