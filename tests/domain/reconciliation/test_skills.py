from __future__ import annotations

from codexsync.domain.model import AuthoritativeSkill, EntityKind, ReferenceSkill, ReferenceTag
from codexsync.domain.reconciliation import reconcile_all
from tests.helpers.catalog import make_dataset, store_for


def test_skill_fields_fixed() -> None:
    dataset = make_dataset(
        reference_skills=[
            ReferenceSkill(
                slug="fireball",
                name="Fireball",
                tier=2,
                tags=(ReferenceTag.FOUND_IN_ARCANISTS,),
                cost=12,
                causes=("Burning",),
            )
        ],
        skills=[
            AuthoritativeSkill(
                id=1,
                name="Fireball",
                cross_reference_uri="/codex/spells/fireball/",
                tier=2,
                description=".",
                cost=10,
            )
        ],
    )
    store = store_for(dataset)

    report = reconcile_all(dataset, store, fix=True, kinds=[EntityKind.SKILL])

    assert [discrepancy.field_name for discrepancy in report.discrepancies] == [
        "bought",
        "cost",
        "causes",
    ]
    fixed = store.retrieve_by_id(EntityKind.SKILL, 1)
    assert isinstance(fixed, AuthoritativeSkill)
    assert fixed.bought is True
    assert fixed.cost == 12
    assert fixed.causes == [1]
    assert report.unfixed == 0


def test_unknown_cost_and_empty_description_are_not_mismatches() -> None:
    dataset = make_dataset(
        reference_skills=[ReferenceSkill(slug="bash", name="Bash")],
        skills=[
            AuthoritativeSkill(
                id=1,
                name="Bash",
                cross_reference_uri="/codex/spells/bash/",
                description=".",
                cost=4,
            )
        ],
    )

    report = reconcile_all(dataset, store_for(dataset), kinds=[EntityKind.SKILL])

    assert report.discrepancies == []


def test_passive_skills_are_not_expected_in_codex() -> None:
    dataset = make_dataset(
        skills=[
            AuthoritativeSkill(id=1, name="Thick Skin", type_id=2),
            AuthoritativeSkill(id=2, name="Old Attack", type_id=1),
        ],
    )

    report = reconcile_all(dataset, store_for(dataset), kinds=[EntityKind.SKILL])

    assert [entry.name for entry in report.missing_from("reference")] == ["Old Attack"]


def test_excluded_gives_field_is_not_checked() -> None:
    dataset = make_dataset(
        reference_skills=[
            ReferenceSkill(slug="CerusDefendPhys", name="Defend", gives=("Unmappable Buff",))
        ],
        skills=[
            AuthoritativeSkill(
                id=1,
                name="Defend",
                cross_reference_uri="/codex/spells/CerusDefendPhys/",
                description=".",
                gives=[6],
            )
        ],
    )

    report = reconcile_all(dataset, store_for(dataset), kinds=[EntityKind.SKILL])

    assert report.discrepancies == []
    assert report.unresolved == []


def test_fix_creates_offhand_skill_with_suffix() -> None:
    dataset = make_dataset(
        reference_skills=[
            ReferenceSkill(
                slug="shield-bash",
                name="Shield Bash",
                tags=(ReferenceTag.OFF_HAND_ABILITY,),
                description="Bash with a shield.",
            )
        ],
    )
    store = store_for(dataset)

    report = reconcile_all(dataset, store, fix=True, kinds=[EntityKind.SKILL])

    assert report.created == 1
    [created] = store.created
    assert isinstance(created, AuthoritativeSkill)
    assert created.name == "Shield Bash [off-hand]"
    assert created.offhand is True
    assert report.discrepancies == []
