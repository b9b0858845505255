from __future__ import annotations

from typing import TYPE_CHECKING

from codexsync.domain.model import (
    AuthoritativeMonster,
    AuthoritativeSkill,
    EntityKind,
    MonsterKind,
    ReferenceLink,
    ReferenceMonster,
    ReferenceSkill,
)
from codexsync.domain.reconciliation import reconcile_all
from tests.helpers.catalog import make_dataset, store_for

if TYPE_CHECKING:
    from codexsync.domain.reconciliation import ReconciliationReport


def _fields(report: ReconciliationReport) -> list[str]:
    return [discrepancy.field_name for discrepancy in report.discrepancies]


def test_boss_events_and_family_fixed() -> None:
    dataset = make_dataset(
        reference_bosses=[
            ReferenceMonster(
                slug="pumpkin-king",
                kind=MonsterKind.BOSS,
                name="Pumpkin King",
                family="Undead",
                events=("Halloween",),
            )
        ],
        monsters=[
            AuthoritativeMonster(
                id=1,
                name="Pumpkin King",
                cross_reference_uri="/codex/bosses/pumpkin-king/",
                boss=True,
                spawns=[5],
            )
        ],
    )
    store = store_for(dataset)

    report = reconcile_all(dataset, store, fix=True, kinds=[EntityKind.MONSTER])

    assert _fields(report) == ["events", "family"]
    fixed = store.retrieve_by_id(EntityKind.MONSTER, 1)
    assert isinstance(fixed, AuthoritativeMonster)
    assert fixed.spawns == [5, 1]
    assert fixed.family == 1
    assert report.missing == []


def test_raid_tags_include_known_codex_omissions() -> None:
    dataset = make_dataset(
        reference_raids=[
            ReferenceMonster(slug="yggdrasil", kind=MonsterKind.RAID, name="Yggdrasil")
        ],
        monsters=[
            AuthoritativeMonster(
                id=1,
                name="Yggdrasil",
                cross_reference_uri="/codex/raids/yggdrasil/",
                boss=True,
                family=2,
                spawns=[4],
            )
        ],
    )
    store = store_for(dataset)

    report = reconcile_all(dataset, store, fix=True, kinds=[EntityKind.MONSTER])

    # family is not compared for raids
    assert _fields(report) == ["tags"]
    assert report.discrepancies[0].reference_value == "['World Raid']"
    fixed = store.retrieve_by_id(EntityKind.MONSTER, 1)
    assert isinstance(fixed, AuthoritativeMonster)
    assert fixed.spawns == [3]


def test_abilities_ignore_skills_without_codex_page() -> None:
    dataset = make_dataset(
        reference_monsters=[
            ReferenceMonster(
                slug="goblin",
                kind=MonsterKind.MONSTER,
                name="Goblin",
                abilities=(ReferenceLink(name="Stab", uri="/codex/spells/stab/"),),
            )
        ],
        reference_skills=[ReferenceSkill(slug="stab", name="Stab")],
        monsters=[
            AuthoritativeMonster(
                id=1, name="Goblin", cross_reference_uri="/codex/monsters/goblin/", skills=[8]
            )
        ],
        skills=[
            AuthoritativeSkill(id=3, name="Stab", cross_reference_uri="/codex/spells/stab/"),
            AuthoritativeSkill(id=8, name="Goblin Rage"),
        ],
    )
    store = store_for(dataset)

    report = reconcile_all(dataset, store, fix=True, kinds=[EntityKind.MONSTER])

    assert _fields(report) == ["abilities"]
    assert report.discrepancies[0].authoritative_value == "[]"
    fixed = store.retrieve_by_id(EntityKind.MONSTER, 1)
    assert isinstance(fixed, AuthoritativeMonster)
    assert fixed.skills == [8, 3]


def test_unresolved_event_is_reported_not_fatal() -> None:
    dataset = make_dataset(
        reference_monsters=[
            ReferenceMonster(
                slug="yeti",
                kind=MonsterKind.MONSTER,
                name="Yeti",
                events=("Winter Festival",),
            )
        ],
        monsters=[
            AuthoritativeMonster(id=1, name="Yeti", cross_reference_uri="/codex/monsters/yeti/")
        ],
    )

    report = reconcile_all(dataset, store_for(dataset), kinds=[EntityKind.MONSTER])

    [unresolved] = report.unresolved
    assert unresolved.field_name == "events"
    assert unresolved.labels == ("Winter Festival",)
    assert report.discrepancies == []


def test_monster_on_wrong_codex_page_reported_missing() -> None:
    dataset = make_dataset(
        reference_bosses=[ReferenceMonster(slug="hydra", kind=MonsterKind.BOSS, name="Hydra")],
        monsters=[
            AuthoritativeMonster(id=1, name="Hydra", cross_reference_uri="/codex/bosses/hydra/")
        ],
    )

    report = reconcile_all(dataset, store_for(dataset), kinds=[EntityKind.MONSTER])

    assert [entry.name for entry in report.missing_from("reference")] == ["Hydra"]
    assert report.missing_from("authoritative") == []
