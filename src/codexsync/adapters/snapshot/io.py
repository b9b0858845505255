"""Load and save snapshots as a directory of JSON files, one per collection."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from codexsync.domain.model import (
    AuthoritativeCollection,
    AuthoritativeData,
    AuthoritativeStatic,
    Dataset,
    MonsterKind,
    ReferenceCollection,
    ReferenceData,
)

from . import translator
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
    from pathlib import Path

log = getLogger(__name__)

STATIC_TABLES = (
    "spawns",
    "status_effects",
    "elements",
    "monster_families",
    "item_types",
    "skill_types",
)

SNAPSHOT_FILES = (
    "reference_items.json",
    "reference_monsters.json",
    "reference_bosses.json",
    "reference_raids.json",
    "reference_skills.json",
    "reference_followers.json",
    "authoritative_items.json",
    "authoritative_monsters.json",
    "authoritative_skills.json",
    "authoritative_followers.json",
    *(f"authoritative_{table}.json" for table in STATIC_TABLES),
)


class SnapshotFormatError(RuntimeError):
    """Raised when a snapshot file cannot be parsed."""


def _read[P](directory: Path, filename: str, payload_type: type[P]) -> list[P]:
    path = directory / filename
    if not path.exists():
        log.debug("%s not found, loading as empty", path)
        return []
    try:
        return TypeAdapter(list[payload_type]).validate_json(path.read_bytes())
    except ValidationError as exc:
        raise SnapshotFormatError(f"Invalid snapshot file {path}: {exc}") from exc


def _write(directory: Path, filename: str, records: Iterable[object]) -> None:
    payload = [translator.to_payload(record) for record in records]
    path = directory / filename
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    log.debug("Wrote %d records to %s", len(payload), path)


def load_snapshot(directory: Path) -> Dataset:
    """Load the snapshot stored in ``directory``."""

    if not directory.is_dir():
        raise SnapshotFormatError(f"Snapshot directory {directory} does not exist")

    reference = ReferenceData(
        items=ReferenceCollection(
            translator.reference_item(payload)
            for payload in _read(directory, "reference_items.json", ReferenceItemPayload)
        ),
        followers=ReferenceCollection(
            translator.reference_follower(payload)
            for payload in _read(directory, "reference_followers.json", ReferenceFollowerPayload)
        ),
        skills=ReferenceCollection(
            translator.reference_skill(payload)
            for payload in _read(directory, "reference_skills.json", ReferenceSkillPayload)
        ),
    )
    for kind in MonsterKind:
        payloads = _read(directory, f"reference_{kind}.json", ReferenceMonsterPayload)
        setattr(
            reference,
            kind.value,
            ReferenceCollection(
                translator.reference_monster(payload, kind) for payload in payloads
            ),
        )

    static = AuthoritativeStatic(
        **{
            table: [
                translator.static_entry(payload)
                for payload in _read(directory, f"authoritative_{table}.json", StaticEntryPayload)
            ]
            for table in STATIC_TABLES
        }
    )
    authoritative = AuthoritativeData(
        items=AuthoritativeCollection(
            translator.authoritative_item(payload)
            for payload in _read(directory, "authoritative_items.json", AuthoritativeItemPayload)
        ),
        monsters=AuthoritativeCollection(
            translator.authoritative_monster(payload)
            for payload in _read(
                directory, "authoritative_monsters.json", AuthoritativeMonsterPayload
            )
        ),
        skills=AuthoritativeCollection(
            translator.authoritative_skill(payload)
            for payload in _read(directory, "authoritative_skills.json", AuthoritativeSkillPayload)
        ),
        followers=AuthoritativeCollection(
            translator.authoritative_follower(payload)
            for payload in _read(
                directory, "authoritative_followers.json", AuthoritativeFollowerPayload
            )
        ),
        static=static,
    )
    log.info(
        "Loaded snapshot %s: %d codex items, %d store items",
        directory,
        len(reference.items),
        len(authoritative.items),
    )
    return Dataset(reference=reference, authoritative=authoritative)


def save_snapshot(dataset: Dataset, directory: Path) -> None:
    """Write ``dataset`` to ``directory``, creating it if needed."""

    directory.mkdir(parents=True, exist_ok=True)
    reference = dataset.reference
    _write(directory, "reference_items.json", reference.items)
    for kind in MonsterKind:
        _write(directory, f"reference_{kind}.json", reference.monsters_of(kind))
    _write(directory, "reference_skills.json", reference.skills)
    _write(directory, "reference_followers.json", reference.followers)

    authoritative = dataset.authoritative
    _write(directory, "authoritative_items.json", authoritative.items)
    _write(directory, "authoritative_monsters.json", authoritative.monsters)
    _write(directory, "authoritative_skills.json", authoritative.skills)
    _write(directory, "authoritative_followers.json", authoritative.followers)
    for table in STATIC_TABLES:
        _write(directory, f"authoritative_{table}.json", getattr(authoritative.static, table))
    log.info("Saved snapshot to %s", directory)
