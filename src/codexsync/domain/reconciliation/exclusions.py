"""Known data quirks on either side, kept in one place.

Two kinds of entries live here:

- ``Exclusion``: an entity, or one field of an entity, that must not be
  reported (developer items, renamed entries, entries the codex cannot show);
- ``Supplement``: values the codex omits through a known upstream bug and that
  must be added to the expected side before comparing.

Drivers consult these tables instead of hard-coding names.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class Scope(StrEnum):
    REFERENCE_ITEM = "reference_item"
    REFERENCE_MONSTER = "reference_monster"
    REFERENCE_SKILL = "reference_skill"
    AUTHORITATIVE_ITEM = "authoritative_item"
    SNAPSHOT_BOSS = "snapshot_boss"


class MatchOn(StrEnum):
    SLUG = "slug"
    NAME = "name"
    NAME_CONTAINS = "name_contains"


def _matches(match_on: MatchOn, key: str, *, slug: str, name: str) -> bool:
    match match_on:
        case MatchOn.SLUG:
            return slug == key
        case MatchOn.NAME:
            return name == key
        case MatchOn.NAME_CONTAINS:
            return key in name


@dataclass(frozen=True, slots=True, kw_only=True)
class Exclusion:
    scope: Scope
    key: str
    match_on: MatchOn = MatchOn.SLUG
    field_name: str | None = None
    reason: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class Supplement:
    scope: Scope
    key: str
    field_name: str
    values: tuple[str, ...]
    match_on: MatchOn = MatchOn.SLUG
    reason: str = ""


_MISSING_ITEM_SLUGS: Final[tuple[str, ...]] = (
    "balins-left-b2db2fdb",
    "blinders",
    "naggeneens-song",
    "ravens-feathers",
    "soul-blade",
    "steadfast-charm",
    "super-exp-potion",
)

EXCLUSIONS: Final[tuple[Exclusion, ...]] = (
    Exclusion(
        scope=Scope.REFERENCE_ITEM,
        key="Orna",
        match_on=MatchOn.NAME,
        reason="developer item",
    ),
    *(
        Exclusion(
            scope=Scope.REFERENCE_ITEM,
            key=slug,
            reason="codex entry the store does not carry",
        )
        for slug in _MISSING_ITEM_SLUGS
    ),
    Exclusion(
        scope=Scope.AUTHORITATIVE_ITEM,
        key="Mage's Ring",
        match_on=MatchOn.NAME,
        reason="not listed in the codex",
    ),
    Exclusion(
        scope=Scope.REFERENCE_SKILL,
        key="CerusDefendPhys",
        field_name="gives",
        reason="codex buff names cannot be mapped",
    ),
    Exclusion(
        scope=Scope.REFERENCE_SKILL,
        key="CerusDefendMag",
        field_name="gives",
        reason="codex buff names cannot be mapped",
    ),
    Exclusion(
        scope=Scope.SNAPSHOT_BOSS,
        key="immortal-lord",
        reason="renamed to immortal-lord-418e5cff",
    ),
)

SUPPLEMENTS: Final[tuple[Supplement, ...]] = (
    Supplement(
        scope=Scope.REFERENCE_ITEM,
        key="swansong",
        field_name="causes",
        values=("Blind",),
        reason="codex omits the Blind cause",
    ),
    Supplement(
        scope=Scope.REFERENCE_MONSTER,
        key="Kerberos",
        match_on=MatchOn.NAME_CONTAINS,
        field_name="events",
        values=("Rise of Kerberos",),
        reason="codex omits the event",
    ),
    Supplement(
        scope=Scope.REFERENCE_MONSTER,
        key="yggdrasil",
        field_name="tags",
        values=("World Raid",),
        reason="codex omits the raid tag",
    ),
    Supplement(
        scope=Scope.REFERENCE_MONSTER,
        key="arisen-yggdrasil",
        field_name="tags",
        values=("World Raid",),
        reason="codex omits the raid tag",
    ),
)


def is_excluded(
    scope: Scope,
    *,
    slug: str = "",
    name: str = "",
    field_name: str | None = None,
) -> bool:
    """Whether an entity (``field_name=None``) or one of its fields is excluded."""

    return any(
        exclusion.scope is scope
        and exclusion.field_name == field_name
        and _matches(exclusion.match_on, exclusion.key, slug=slug, name=name)
        for exclusion in EXCLUSIONS
    )


def supplements_for(
    scope: Scope,
    field_name: str,
    *,
    slug: str = "",
    name: str = "",
) -> tuple[str, ...]:
    """Values to add to the expected side of ``field_name`` for the given entity."""

    return tuple(
        value
        for supplement in SUPPLEMENTS
        if supplement.scope is scope
        and supplement.field_name == field_name
        and _matches(supplement.match_on, supplement.key, slug=slug, name=name)
        for value in supplement.values
    )
