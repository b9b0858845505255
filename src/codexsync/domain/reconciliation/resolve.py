"""Translate codex labels into authoritative ids.

Lookups never raise: every label ends up either resolved or listed as a
failure, and the caller decides whether partial results are good enough.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .tables import RAID_TAG_SPAWNS, event_name, translate_status_effect

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from codexsync.domain.model import (
        AuthoritativeStatic,
        IdentifiedRecord,
        ReferenceTag,
        StaticEntry,
    )


@dataclass(frozen=True, slots=True)
class IdConversionResult:
    successes: tuple[int, ...] = ()
    failures: tuple[str, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.failures

    def sorted_ids(self) -> list[int]:
        """Resolved ids, sorted and de-duplicated for :func:`diff_sorted`."""

        return sorted(set(self.successes))


def resolve_ids(labels: Iterable[str], table: Mapping[str, int]) -> IdConversionResult:
    successes: list[int] = []
    failures: list[str] = []
    for label in labels:
        entity_id = table.get(label)
        if entity_id is None:
            failures.append(label)
        else:
            successes.append(entity_id)
    return IdConversionResult(successes=tuple(successes), failures=tuple(failures))


def name_table(entries: Iterable[StaticEntry]) -> dict[str, int]:
    """Map names of a static table to ids. On duplicate names the first row wins."""

    table: dict[str, int] = {}
    for entry in entries:
        table.setdefault(entry.name, entry.id)
    return table


def uri_table(entities: Iterable[IdentifiedRecord]) -> dict[str, int]:
    """Map codex URIs to the ids of the authoritative entities pointing at them."""

    table: dict[str, int] = {}
    for entity in entities:
        if entity.cross_reference_uri:
            table.setdefault(entity.cross_reference_uri, entity.id)
    return table


def event_table(spawns: Iterable[StaticEntry]) -> dict[str, int]:
    table: dict[str, int] = {}
    for spawn in spawns:
        name = event_name(spawn.name)
        if name is not None:
            table.setdefault(name, spawn.id)
    return table


def resolve_status_effects(
    names: Iterable[str],
    static: AuthoritativeStatic,
) -> IdConversionResult:
    """Resolve codex status effect names, applying the codex -> store renames."""

    table = name_table(static.status_effects)
    return resolve_ids((translate_status_effect(name) for name in names), table)


def raid_tag_names(tags: Iterable[ReferenceTag]) -> list[str]:
    return [RAID_TAG_SPAWNS[tag] for tag in tags if tag in RAID_TAG_SPAWNS]
