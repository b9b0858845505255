"""Merge snapshots taken at different times into one dataset.

Snapshots are fed oldest first. Records are keyed by id on the authoritative
side and by slug on the codex side; a later snapshot replaces a record
wholesale, there is no field-level merge.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from codexsync.domain.model import (
    AuthoritativeCollection,
    AuthoritativeData,
    AuthoritativeStatic,
    Dataset,
    ReferenceCollection,
    ReferenceData,
)

from .exclusions import Scope, is_excluded

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codexsync.domain.model import (
        AuthoritativeFollower,
        AuthoritativeItem,
        AuthoritativeMonster,
        AuthoritativeSkill,
        ReferenceFollower,
        ReferenceItem,
        ReferenceMonster,
        ReferenceSkill,
        StaticEntry,
    )

log = getLogger(__name__)

_STATIC_TABLES = (
    "spawns",
    "status_effects",
    "elements",
    "monster_families",
    "item_types",
    "skill_types",
)


@dataclass(slots=True)
class SnapshotMerger:
    items: dict[int, AuthoritativeItem] = field(default_factory=dict)
    monsters: dict[int, AuthoritativeMonster] = field(default_factory=dict)
    skills: dict[int, AuthoritativeSkill] = field(default_factory=dict)
    followers: dict[int, AuthoritativeFollower] = field(default_factory=dict)
    static: dict[str, dict[int, StaticEntry]] = field(
        default_factory=lambda: {name: {} for name in _STATIC_TABLES}
    )
    reference_items: dict[str, ReferenceItem] = field(default_factory=dict)
    reference_monsters: dict[str, ReferenceMonster] = field(default_factory=dict)
    reference_bosses: dict[str, ReferenceMonster] = field(default_factory=dict)
    reference_raids: dict[str, ReferenceMonster] = field(default_factory=dict)
    reference_skills: dict[str, ReferenceSkill] = field(default_factory=dict)
    reference_followers: dict[str, ReferenceFollower] = field(default_factory=dict)

    def merge_with(self, dataset: Dataset) -> None:
        authoritative = dataset.authoritative
        self.items.update((item.id, item) for item in authoritative.items)
        self.monsters.update((monster.id, monster) for monster in authoritative.monsters)
        self.skills.update((skill.id, skill) for skill in authoritative.skills)
        self.followers.update((follower.id, follower) for follower in authoritative.followers)
        for name in _STATIC_TABLES:
            entries: list[StaticEntry] = getattr(authoritative.static, name)
            self.static[name].update((entry.id, entry) for entry in entries)

        reference = dataset.reference
        self.reference_items.update((item.slug, item) for item in reference.items)
        self.reference_monsters.update((monster.slug, monster) for monster in reference.monsters)
        for boss in reference.bosses:
            if is_excluded(Scope.SNAPSHOT_BOSS, slug=boss.slug):
                log.debug("Skipping boss %s", boss.slug)
                continue
            self.reference_bosses[boss.slug] = boss
        self.reference_raids.update((raid.slug, raid) for raid in reference.raids)
        self.reference_skills.update((skill.slug, skill) for skill in reference.skills)
        self.reference_followers.update(
            (follower.slug, follower) for follower in reference.followers
        )

    def into_dataset(self) -> Dataset:
        return Dataset(
            reference=ReferenceData(
                items=ReferenceCollection(self.reference_items.values()),
                monsters=ReferenceCollection(self.reference_monsters.values()),
                bosses=ReferenceCollection(self.reference_bosses.values()),
                raids=ReferenceCollection(self.reference_raids.values()),
                skills=ReferenceCollection(self.reference_skills.values()),
                followers=ReferenceCollection(self.reference_followers.values()),
            ),
            authoritative=AuthoritativeData(
                items=AuthoritativeCollection(self.items.values()),
                monsters=AuthoritativeCollection(self.monsters.values()),
                skills=AuthoritativeCollection(self.skills.values()),
                followers=AuthoritativeCollection(self.followers.values()),
                static=AuthoritativeStatic(
                    **{name: list(entries.values()) for name, entries in self.static.items()}
                ),
            ),
        )


def merge_snapshots(snapshots: Iterable[Dataset]) -> Dataset:
    """Fold ``snapshots`` (oldest first) into a single dataset, last write wins."""

    merger = SnapshotMerger()
    for count, snapshot in enumerate(snapshots, start=1):
        log.debug("Merging snapshot %d", count)
        merger.merge_with(snapshot)
    return merger.into_dataset()
