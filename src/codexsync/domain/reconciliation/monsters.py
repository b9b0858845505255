"""Reconcile codex monsters, bosses and raids with store monsters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from codexsync.domain.model import AuthoritativeMonster, EntityKind, MonsterKind

from .checker import DEBUG, FieldAccessor, attribute_field, id_collection_field
from .context import id_label
from .convert import monster_from_reference
from .errors import FixAbortedError, UnresolvedReferenceError
from .exclusions import Scope, supplements_for
from .match import SlugIndex
from .resolve import event_table, name_table, raid_tag_names, resolve_ids, uri_table
from .tables import RAID_TAG_SPAWNS, event_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from codexsync.domain.model import ReferenceMonster

    from .context import PassContext


def reconcile_monsters(context: PassContext) -> None:
    monsters = context.authoritative.monsters
    index = SlugIndex(EntityKind.MONSTER, monsters)
    codex_only = context.report_missing(
        EntityKind.MONSTER,
        context.reference.all_monsters(),
        index,
    )
    if context.fix and codex_only:
        context.create_missing(
            EntityKind.MONSTER,
            [monster_from_reference(monster, context.authoritative) for monster in codex_only],
        )
        index = SlugIndex(EntityKind.MONSTER, monsters)

    lookups = _MonsterLookups.build(context)
    pairs = context.matched_pairs(EntityKind.MONSTER, context.reference.all_monsters(), index)
    for reference, entity in pairs:
        try:
            _check_monster(context, lookups, reference, entity)
        except FixAbortedError as exc:
            context.failed(EntityKind.MONSTER, reference.uri, exc)


@dataclass(frozen=True, slots=True, kw_only=True)
class _MonsterLookups:
    events: dict[str, int]
    event_ids: frozenset[int]
    spawns: dict[str, int]
    raid_tag_ids: frozenset[int]
    families: dict[str, int]
    skill_uris: dict[str, int]
    linked_skill_ids: frozenset[int]
    spawn_label: Callable[[int], str]
    skill_label: Callable[[int], str]

    @classmethod
    def build(cls, context: PassContext) -> _MonsterLookups:
        data = context.authoritative
        spawns = data.static.spawns
        tag_spawn_names = set(RAID_TAG_SPAWNS.values())
        return cls(
            events=event_table(spawns),
            event_ids=frozenset(spawn.id for spawn in spawns if event_name(spawn.name) is not None),
            spawns=name_table(spawns),
            raid_tag_ids=frozenset(spawn.id for spawn in spawns if spawn.name in tag_spawn_names),
            families=name_table(data.static.monster_families),
            skill_uris=uri_table(data.skills),
            linked_skill_ids=frozenset(
                skill.id for skill in data.skills if skill.cross_reference_uri
            ),
            spawn_label=id_label(spawns),
            skill_label=id_label(data.skills),
        )


def _check_monster(
    context: PassContext,
    lookups: _MonsterLookups,
    reference: ReferenceMonster,
    entity: AuthoritativeMonster,
) -> None:
    kind = EntityKind.MONSTER
    check = context.checker(entity, context.authoritative.monsters)

    check.check(attribute_field("icon", "image_name"), reference.icon)

    event_names = [*reference.events, *_supplements(reference, "events")]
    events = context.accept(
        kind, reference.name, "events", resolve_ids(event_names, lookups.events)
    )
    check.check(
        id_collection_field(
            "events",
            "spawns",
            label=lookups.spawn_label,
            subset=lookups.event_ids.__contains__,
        ),
        events,
    )

    # Raids have no family in the codex.
    if reference.kind is not MonsterKind.RAID:
        check.check(_family_field(context, lookups), reference.family)

    tag_names = [*raid_tag_names(reference.tags), *_supplements(reference, "tags")]
    tags = context.accept(kind, reference.name, "tags", resolve_ids(tag_names, lookups.spawns))
    check.check(
        id_collection_field(
            "tags",
            "spawns",
            label=lookups.spawn_label,
            subset=lookups.raid_tag_ids.__contains__,
        ),
        tags,
    )

    abilities = context.accept(
        kind,
        reference.name,
        "abilities",
        resolve_ids((link.uri for link in reference.abilities), lookups.skill_uris),
    )
    check.check(
        id_collection_field(
            "abilities",
            "skills",
            label=lookups.skill_label,
            subset=lookups.linked_skill_ids.__contains__,
        ),
        abilities,
    )


def _supplements(reference: ReferenceMonster, field_name: str) -> tuple[str, ...]:
    return supplements_for(
        Scope.REFERENCE_MONSTER, field_name, slug=reference.slug, name=reference.name
    )


def _family_field(
    context: PassContext,
    lookups: _MonsterLookups,
) -> FieldAccessor[AuthoritativeMonster, str | None]:
    static = context.static

    def _set(monster: AuthoritativeMonster, family: str | None) -> None:
        if family is None:
            monster.family = None
            return
        family_id = lookups.families.get(family)
        if family_id is None:
            raise UnresolvedReferenceError("family", family)
        monster.family = family_id

    return FieldAccessor(
        name="family",
        get=lambda monster: static.name_of(static.monster_families, monster.family),
        set=_set,
        comparison=DEBUG,
    )
