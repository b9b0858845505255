"""Reconcile codex items with store items."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from codexsync.domain.model import AuthoritativeItem, EntityKind, common_bonus
from codexsync.domain.model.quality import BONUS_PRECISION

from .checker import DEBUG, FieldAccessor, attribute_field, id_collection_field
from .context import find_offhand_skill, id_label
from .convert import item_from_reference
from .errors import FixAbortedError, UnresolvedReferenceError
from .exclusions import Scope, is_excluded, supplements_for
from .match import SlugIndex
from .resolve import name_table, resolve_ids, resolve_status_effects, uri_table
from .tables import WEAPON_ELEMENT_STATUSES, WEAPON_ITEM_TYPE, sanitize_store_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from codexsync.domain.model import ReferenceItem

    from .context import PassContext

STAT_FIELDS: Final[tuple[str, ...]] = (
    "attack",
    "magic",
    "hp",
    "mana",
    "defense",
    "resistance",
    "ward",
    "dexterity",
    "crit",
    "foresight",
)
BONUS_FIELDS: Final[tuple[str, ...]] = ("exp_bonus", "gold_bonus", "orn_bonus", "drop_bonus")


def reconcile_items(context: PassContext) -> None:
    items = context.authoritative.items
    index = SlugIndex(EntityKind.ITEM, items)
    codex_only = context.report_missing(
        EntityKind.ITEM,
        context.reference.items,
        index,
        skip_reference=lambda item: is_excluded(
            Scope.REFERENCE_ITEM, slug=item.slug, name=item.name
        ),
        skip_authoritative=lambda item: is_excluded(Scope.AUTHORITATIVE_ITEM, name=item.name),
    )
    if context.fix and codex_only:
        context.create_missing(
            EntityKind.ITEM,
            [item_from_reference(item, context.authoritative) for item in codex_only],
        )
        index = SlugIndex(EntityKind.ITEM, items)

    lookups = _ItemLookups.build(context)
    for reference, entity in context.matched_pairs(EntityKind.ITEM, context.reference.items, index):
        try:
            _check_item(context, lookups, reference, entity)
        except FixAbortedError as exc:
            context.failed(EntityKind.ITEM, reference.slug, exc)


@dataclass(frozen=True, slots=True, kw_only=True)
class _ItemLookups:
    """Tables built once per pass."""

    elements: dict[str, int]
    item_uris: dict[str, int]
    monster_uris: dict[str, int]
    dropped_by: dict[int, list[int]]
    weapon_type_id: int | None
    item_label: Callable[[int], str]
    monster_label: Callable[[int], str]
    status_label: Callable[[int], str]

    @classmethod
    def build(cls, context: PassContext) -> _ItemLookups:
        data = context.authoritative
        dropped_by: defaultdict[int, list[int]] = defaultdict(list)
        for monster in data.monsters:
            # Monsters without a codex page never show up as droppers in the codex.
            if not monster.cross_reference_uri:
                continue
            for item_id in set(monster.drops):
                dropped_by[item_id].append(monster.id)
        return cls(
            elements=name_table(data.static.elements),
            item_uris=uri_table(data.items),
            monster_uris=uri_table(data.monsters),
            dropped_by=dropped_by,
            weapon_type_id=name_table(data.static.item_types).get(WEAPON_ITEM_TYPE),
            item_label=id_label(data.items),
            monster_label=id_label(data.monsters),
            status_label=id_label(data.static.status_effects),
        )


def _check_item(
    context: PassContext,
    lookups: _ItemLookups,
    reference: ReferenceItem,
    entity: AuthoritativeItem,
) -> None:
    kind = EntityKind.ITEM
    check = context.checker(entity, context.authoritative.items)
    stats = reference.stats

    check.check(attribute_field("icon", "image_name"), reference.icon)
    check.check(attribute_field("description"), reference.description)

    for stat in STAT_FIELDS:
        expected = getattr(stats, stat) if stats is not None else None
        check.check(attribute_field(stat), expected or 0)

    slots = stats.adornment_slots if stats is not None else None
    check.check(_adornment_slots_field(), slots or 0)

    for bonus in BONUS_FIELDS:
        observed = getattr(stats, bonus) if stats is not None else None
        check.check(_bonus_field(bonus), common_bonus(observed or 0, reference.quality))

    element = stats.element if stats is not None else None
    check.check(_element_field(context, lookups), element)
    check.check(_ability_field(context), reference.ability)

    cause_names = list(reference.causes)
    if element is not None and check.entity.type_id == lookups.weapon_type_id:
        cause_names.extend(WEAPON_ELEMENT_STATUSES.get(element, ()))
    cause_names.extend(supplements_for(Scope.REFERENCE_ITEM, "causes", slug=reference.slug))

    for field_name, attr, names in (
        ("causes", "causes", cause_names),
        ("cures", "cures", reference.cures),
        ("gives", "gives", reference.gives),
        ("immunities", "prevents", reference.immunities),
    ):
        expected_ids = context.accept(
            kind, reference.name, field_name, resolve_status_effects(names, context.static)
        )
        check.check(
            id_collection_field(field_name, attr, label=lookups.status_label), expected_ids
        )

    dropped_by = context.accept(
        kind,
        reference.name,
        "dropped_by",
        resolve_ids((link.uri for link in reference.dropped_by), lookups.monster_uris),
    )
    check.check_links(
        "dropped_by",
        actual=sorted(lookups.dropped_by.get(entity.id, [])),
        expected=dropped_by,
        counterpart_kind=EntityKind.MONSTER,
        counterpart_attr="drops",
        label=lookups.monster_label,
        on_counterpart_refresh=context.authoritative.monsters.replace,
    )

    materials = context.accept(
        kind,
        reference.name,
        "upgrade_materials",
        resolve_ids((link.uri for link in reference.upgrade_materials), lookups.item_uris),
    )
    check.check(
        id_collection_field("upgrade_materials", "materials", label=lookups.item_label), materials
    )


def _adornment_slots_field() -> FieldAccessor[AuthoritativeItem, int]:
    def _set(item: AuthoritativeItem, slots: int) -> None:
        item.base_adornment_slots = slots
        item.has_slots = slots > 0

    return FieldAccessor(
        name="adornment_slots",
        get=lambda item: item.base_adornment_slots,
        set=_set,
    )


def _bonus_field(name: str) -> FieldAccessor[AuthoritativeItem, float]:
    def _get(item: AuthoritativeItem) -> float:
        return round(float(getattr(item, name)), BONUS_PRECISION)

    def _set(item: AuthoritativeItem, value: float) -> None:
        setattr(item, name, value)

    return FieldAccessor(name=name, get=_get, set=_set)


def _element_field(
    context: PassContext,
    lookups: _ItemLookups,
) -> FieldAccessor[AuthoritativeItem, str | None]:
    static = context.static

    def _set(item: AuthoritativeItem, element: str | None) -> None:
        if element is None:
            item.element = None
            return
        element_id = lookups.elements.get(element)
        if element_id is None:
            raise UnresolvedReferenceError("element", element)
        item.element = element_id

    return FieldAccessor(
        name="element",
        get=lambda item: static.name_of(static.elements, item.element),
        set=_set,
        comparison=DEBUG,
    )


def _ability_field(context: PassContext) -> FieldAccessor[AuthoritativeItem, str | None]:
    skills = context.authoritative.skills

    def _get(item: AuthoritativeItem) -> str | None:
        if item.ability is None:
            return None
        skill = skills.find_by_id(item.ability)
        return sanitize_store_name(skill.name) if skill is not None else f"#{item.ability}"

    def _set(item: AuthoritativeItem, ability: str | None) -> None:
        if ability is None:
            item.ability = None
            return
        skill = find_offhand_skill(skills, ability)
        if skill is None:
            raise UnresolvedReferenceError("ability", ability)
        item.ability = skill.id

    return FieldAccessor(name="ability", get=_get, set=_set, comparison=DEBUG)
