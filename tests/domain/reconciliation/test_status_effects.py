from __future__ import annotations

from codexsync.domain.model import ReferenceItem, ReferenceSkill
from codexsync.domain.reconciliation import reconcile_all
from tests.helpers.catalog import make_dataset, store_for


def test_status_effect_coverage_reported() -> None:
    dataset = make_dataset(
        reference_items=[ReferenceItem(slug="antidote", name="Antidote", cures=("Poisoned",))],
        reference_skills=[
            ReferenceSkill(slug="bless", name="Bless", gives=("Idun", "Regen")),
        ],
    )

    report = reconcile_all(dataset, store_for(dataset), kinds=[])

    # weapon elements alone reference Frozen, Rot, Paralyzed and Blight
    assert report.missing_status_effects == ["Blight", "Frozen", "Paralyzed", "Regen", "Rot"]
    assert report.unused_status_effects == ["Fire Immune [temp]"]


def test_status_effect_coverage_can_be_skipped() -> None:
    dataset = make_dataset()

    report = reconcile_all(dataset, store_for(dataset), status_effects=False)

    assert report.missing_status_effects == []
    assert report.unused_status_effects == []
