from __future__ import annotations

from codexsync.domain.model import (
    AuthoritativeFollower,
    AuthoritativeSkill,
    EntityKind,
    ReferenceFollower,
    ReferenceLink,
)
from codexsync.domain.reconciliation import reconcile_all
from tests.helpers.catalog import make_dataset, store_for


def test_follower_fields_and_abilities_fixed() -> None:
    dataset = make_dataset(
        reference_followers=[
            ReferenceFollower(
                slug="owl",
                name="Owl",
                icon="owl.png",
                tier=3,
                cost=500,
                abilities=(ReferenceLink(name="Peck", uri="/codex/spells/peck/"),),
            )
        ],
        followers=[
            AuthoritativeFollower(
                id=1,
                name="Owlet",
                cross_reference_uri="/codex/followers/owl/",
                image_name="owl.png",
                description=".",
                tier=3,
                cost=500,
                skills=[9],
            )
        ],
        skills=[
            AuthoritativeSkill(id=4, name="Peck", cross_reference_uri="/codex/spells/peck/"),
            AuthoritativeSkill(id=9, name="Follower Passive"),
        ],
    )
    store = store_for(dataset)

    report = reconcile_all(dataset, store, fix=True, kinds=[EntityKind.FOLLOWER])

    assert [discrepancy.field_name for discrepancy in report.discrepancies] == [
        "name",
        "abilities",
    ]
    fixed = store.retrieve_by_id(EntityKind.FOLLOWER, 1)
    assert isinstance(fixed, AuthoritativeFollower)
    assert fixed.name == "Owl"
    assert fixed.skills == [9, 4]


def test_missing_follower_created() -> None:
    dataset = make_dataset(
        reference_followers=[ReferenceFollower(slug="cat", name="Cat", tier=1, cost=100)],
    )
    store = store_for(dataset)

    report = reconcile_all(dataset, store, fix=True, kinds=[EntityKind.FOLLOWER])

    assert [entry.key for entry in report.missing_from("authoritative")] == ["cat"]
    assert report.created == 1
    created = dataset.authoritative.followers.find_by_id(1)
    assert created is not None
    assert created.cross_reference_uri == "/codex/followers/cat/"
    assert created.description == "."
    assert report.discrepancies == []
