"""Translate snapshot payloads into domain records and back."""

from __future__ import annotations

import json
from dataclasses import asdict
from logging import getLogger
from typing import TYPE_CHECKING

from codexsync.domain.model import (
    AuthoritativeFollower,
    AuthoritativeItem,
    AuthoritativeMonster,
    AuthoritativeSkill,
    ItemStats,
    QualityTier,
    ReferenceFollower,
    ReferenceItem,
    ReferenceLink,
    ReferenceMonster,
    ReferenceSkill,
    ReferenceTag,
    StaticEntry,
)

from .schema import (
    AuthoritativeFollowerPayload,
    AuthoritativeItemPayload,
    AuthoritativeMonsterPayload,
    AuthoritativeSkillPayload,
    ReferenceFollowerPayload,
    ReferenceItemPayload,
    ReferenceMonsterPayload,
    ReferenceSkillPayload,
    StaticEntryPayload,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pydantic import BaseModel

    from codexsync.domain.model import MonsterKind

    from .schema import LinkPayload

log = getLogger(__name__)


def _links(payloads: Iterable[LinkPayload]) -> tuple[ReferenceLink, ...]:
    return tuple(ReferenceLink(name=link.name, uri=link.uri) for link in payloads)


def _tags(slug: str, raw: Iterable[str]) -> tuple[ReferenceTag, ...]:
    known = {tag.value for tag in ReferenceTag}
    tags: list[ReferenceTag] = []
    for value in raw:
        if value in known:
            tags.append(ReferenceTag(value))
        else:
            log.debug("Ignoring tag %r of %s", value, slug)
    return tuple(tags)


def _quality(slug: str, raw: str) -> QualityTier:
    try:
        return QualityTier(raw.lower())
    except ValueError:
        log.warning("Unknown quality %r for %s, assuming common", raw, slug)
        return QualityTier.COMMON


def reference_item(payload: ReferenceItemPayload) -> ReferenceItem:
    stats = None
    if payload.stats is not None:
        stats = ItemStats(**payload.stats.model_dump())
    return ReferenceItem(
        slug=payload.slug,
        name=payload.name,
        icon=payload.icon,
        description=payload.description,
        tier=payload.tier,
        quality=_quality(payload.slug, payload.quality),
        stats=stats,
        ability=payload.ability,
        causes=tuple(payload.causes),
        cures=tuple(payload.cures),
        gives=tuple(payload.gives),
        immunities=tuple(payload.immunities),
        dropped_by=_links(payload.dropped_by),
        upgrade_materials=_links(payload.upgrade_materials),
    )


def reference_monster(payload: ReferenceMonsterPayload, kind: MonsterKind) -> ReferenceMonster:
    return ReferenceMonster(
        slug=payload.slug,
        kind=kind,
        name=payload.name,
        icon=payload.icon,
        tier=payload.tier,
        family=payload.family,
        events=tuple(payload.events),
        tags=_tags(payload.slug, payload.tags),
        abilities=_links(payload.abilities),
        drops=_links(payload.drops),
    )


def reference_skill(payload: ReferenceSkillPayload) -> ReferenceSkill:
    return ReferenceSkill(
        slug=payload.slug,
        name=payload.name,
        icon=payload.icon,
        description=payload.description,
        tier=payload.tier,
        tags=_tags(payload.slug, payload.tags),
        cost=payload.cost,
        causes=tuple(payload.causes),
        gives=tuple(payload.gives),
    )


def reference_follower(payload: ReferenceFollowerPayload) -> ReferenceFollower:
    return ReferenceFollower(
        slug=payload.slug,
        name=payload.name,
        icon=payload.icon,
        description=payload.description,
        tier=payload.tier,
        cost=payload.cost,
        abilities=_links(payload.abilities),
    )


def authoritative_item(payload: AuthoritativeItemPayload) -> AuthoritativeItem:
    return AuthoritativeItem(**payload.model_dump())


def authoritative_monster(payload: AuthoritativeMonsterPayload) -> AuthoritativeMonster:
    return AuthoritativeMonster(**payload.model_dump())


def authoritative_skill(payload: AuthoritativeSkillPayload) -> AuthoritativeSkill:
    return AuthoritativeSkill(**payload.model_dump())


def authoritative_follower(payload: AuthoritativeFollowerPayload) -> AuthoritativeFollower:
    return AuthoritativeFollower(**payload.model_dump())


def static_entry(payload: StaticEntryPayload) -> StaticEntry:
    return StaticEntry(id=payload.id, name=payload.name)


_PAYLOADS: dict[type, type[BaseModel]] = {
    ReferenceItem: ReferenceItemPayload,
    ReferenceMonster: ReferenceMonsterPayload,
    ReferenceSkill: ReferenceSkillPayload,
    ReferenceFollower: ReferenceFollowerPayload,
    AuthoritativeItem: AuthoritativeItemPayload,
    AuthoritativeMonster: AuthoritativeMonsterPayload,
    AuthoritativeSkill: AuthoritativeSkillPayload,
    AuthoritativeFollower: AuthoritativeFollowerPayload,
    StaticEntry: StaticEntryPayload,
}


def to_payload(record: object) -> dict[str, object]:
    """Serialise a domain record to the JSON shape of its snapshot file."""

    payload_type = _PAYLOADS[type(record)]
    fields = asdict(record)  # type: ignore[call-overload]
    payload = payload_type.model_validate_json(json.dumps(fields))
    return payload.model_dump(mode="json", by_alias=True)
