"""Build authoritative records for codex entries the store lacks.

Conversions are best effort: sub-fields whose names cannot be resolved are
left out instead of failing the whole record, the next pass reports them.
The ``id`` of a converted record is a placeholder; the store assigns the real
one on creation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codexsync.domain.model import (
    AuthoritativeFollower,
    AuthoritativeItem,
    AuthoritativeMonster,
    AuthoritativeSkill,
    MonsterKind,
    common_bonus,
)

from .context import find_offhand_skill
from .resolve import (
    event_table,
    name_table,
    raid_tag_names,
    resolve_ids,
    resolve_status_effects,
    uri_table,
)
from .tables import EMPTY_DESCRIPTION, OFFHAND_SUFFIX, ZWEI_SUFFIX

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codexsync.domain.model import (
        AuthoritativeData,
        IdentifiedRecord,
        ReferenceFollower,
        ReferenceItem,
        ReferenceLink,
        ReferenceMonster,
        ReferenceSkill,
    )

UNASSIGNED_ID = 0


def _description(text: str) -> str:
    return text or EMPTY_DESCRIPTION


def _link_ids(links: Iterable[ReferenceLink], entities: Iterable[IdentifiedRecord]) -> list[int]:
    return list(resolve_ids((link.uri for link in links), uri_table(entities)).successes)


def skill_display_name(skill: ReferenceSkill) -> str:
    if skill.is_offhand:
        return f"{skill.name}{OFFHAND_SUFFIX}"
    if skill.slug.startswith("Zwei"):
        return f"{skill.name}{ZWEI_SUFFIX}"
    return skill.name


def item_from_reference(item: ReferenceItem, data: AuthoritativeData) -> AuthoritativeItem:
    static = data.static
    stats = item.stats
    element: int | None = None
    ability: int | None = None
    if stats is not None and stats.element is not None:
        element = name_table(static.elements).get(stats.element)
    if item.ability is not None:
        skill = find_offhand_skill(data.skills, item.ability)
        ability = skill.id if skill is not None else None

    converted = AuthoritativeItem(
        id=UNASSIGNED_ID,
        name=item.name,
        cross_reference_uri=item.uri,
        tier=item.tier,
        image_name=item.icon,
        description=item.description,
        element=element,
        ability=ability,
        causes=list(resolve_status_effects(item.causes, static).successes),
        cures=list(resolve_status_effects(item.cures, static).successes),
        gives=list(resolve_status_effects(item.gives, static).successes),
        prevents=list(resolve_status_effects(item.immunities, static).successes),
        materials=_link_ids(item.upgrade_materials, data.items),
    )
    if stats is not None:
        converted.attack = stats.attack or 0
        converted.magic = stats.magic or 0
        converted.hp = stats.hp or 0
        converted.mana = stats.mana or 0
        converted.defense = stats.defense or 0
        converted.resistance = stats.resistance or 0
        converted.ward = stats.ward or 0
        converted.dexterity = stats.dexterity or 0
        converted.crit = stats.crit or 0
        converted.foresight = stats.foresight or 0
        converted.base_adornment_slots = stats.adornment_slots or 0
        converted.has_slots = converted.base_adornment_slots > 0
        converted.exp_bonus = common_bonus(stats.exp_bonus or 0, item.quality)
        converted.gold_bonus = common_bonus(stats.gold_bonus or 0, item.quality)
        converted.orn_bonus = common_bonus(stats.orn_bonus or 0, item.quality)
        converted.drop_bonus = common_bonus(stats.drop_bonus or 0, item.quality)
    return converted


def monster_from_reference(
    monster: ReferenceMonster,
    data: AuthoritativeData,
) -> AuthoritativeMonster:
    static = data.static
    spawns = [
        *resolve_ids(monster.events, event_table(static.spawns)).successes,
        *resolve_ids(raid_tag_names(monster.tags), name_table(static.spawns)).successes,
    ]
    family: int | None = None
    if monster.family is not None:
        family = name_table(static.monster_families).get(monster.family)
    return AuthoritativeMonster(
        id=UNASSIGNED_ID,
        name=monster.name,
        cross_reference_uri=monster.uri,
        tier=monster.tier,
        family=family,
        image_name=monster.icon,
        boss=monster.kind is not MonsterKind.MONSTER,
        spawns=spawns,
        drops=_link_ids(monster.drops, data.items),
        skills=_link_ids(monster.abilities, data.skills),
    )


def skill_from_reference(skill: ReferenceSkill, data: AuthoritativeData) -> AuthoritativeSkill:
    static = data.static
    return AuthoritativeSkill(
        id=UNASSIGNED_ID,
        name=skill_display_name(skill),
        cross_reference_uri=skill.uri,
        tier=skill.tier,
        description=_description(skill.description),
        offhand=skill.is_offhand,
        bought=skill.bought_at_arcanist,
        cost=skill.cost or 0,
        causes=list(resolve_status_effects(skill.causes, static).successes),
        gives=list(resolve_status_effects(skill.gives, static).successes),
    )


def follower_from_reference(
    follower: ReferenceFollower,
    data: AuthoritativeData,
) -> AuthoritativeFollower:
    return AuthoritativeFollower(
        id=UNASSIGNED_ID,
        name=follower.name,
        cross_reference_uri=follower.uri,
        tier=follower.tier,
        image_name=follower.icon,
        description=_description(follower.description),
        cost=follower.cost or 0,
        skills=_link_ids(follower.abilities, data.skills),
    )
