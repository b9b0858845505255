from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from codexsync.domain.model import (
    AuthoritativeItem,
    AuthoritativeMonster,
    EntityKind,
    MonsterKind,
    ReferenceCollection,
    ReferenceData,
    ReferenceItem,
    ReferenceMonster,
    ReferenceNamespace,
)
from codexsync.domain.reconciliation import (
    DuplicateMatchError,
    EntityNotFoundError,
    SlugIndex,
    classify_monster,
    match_authoritative_for_reference,
    match_reference_for_authoritative,
    parse_reference_uri,
    slug_from_uri,
)

if TYPE_CHECKING:
    from codexsync.domain.model import AuthoritativeStatic


def test_match_pairs_uri_with_slug() -> None:
    sword = AuthoritativeItem(id=1, name="Sword", cross_reference_uri="/items/sword/")

    found = match_authoritative_for_reference(
        ReferenceItem(slug="sword", name="Sword"), EntityKind.ITEM, [sword]
    )

    assert found is sword


def test_match_fails_when_reference_slug_changes() -> None:
    sword = AuthoritativeItem(id=1, name="Sword", cross_reference_uri="/items/sword/")

    with pytest.raises(EntityNotFoundError):
        match_authoritative_for_reference(
            ReferenceItem(slug="sabre", name="Sword"), EntityKind.ITEM, [sword]
        )


def test_match_fails_when_authoritative_slug_changes() -> None:
    sabre = AuthoritativeItem(id=1, name="Sword", cross_reference_uri="/items/sabre/")

    with pytest.raises(EntityNotFoundError):
        match_authoritative_for_reference(
            ReferenceItem(slug="sword", name="Sword"), EntityKind.ITEM, [sabre]
        )


def test_parse_reference_uri_accepts_optional_codex_root() -> None:
    assert parse_reference_uri("/codex/items/sword/") == (ReferenceNamespace.ITEMS, "sword")
    assert parse_reference_uri("/spells/fireball") == (ReferenceNamespace.SPELLS, "fireball")
    assert parse_reference_uri("") is None
    assert parse_reference_uri("/wiki/items/sword/") is None
    assert parse_reference_uri("/codex/classes/mage/") is None


def test_slug_from_uri_checks_namespace() -> None:
    assert slug_from_uri("/codex/bosses/dragon/", ReferenceNamespace.BOSSES) == "dragon"
    assert slug_from_uri("/codex/bosses/dragon/", ReferenceNamespace.RAIDS) is None


def test_slug_index_reports_duplicates() -> None:
    items = [
        AuthoritativeItem(id=3, name="Sword", cross_reference_uri="/codex/items/sword/"),
        AuthoritativeItem(id=9, name="Sword (copy)", cross_reference_uri="/codex/items/sword/"),
        AuthoritativeItem(id=4, name="Unlinked"),
    ]
    index = SlugIndex(EntityKind.ITEM, items)

    assert (ReferenceNamespace.ITEMS, "sword") in index
    with pytest.raises(DuplicateMatchError) as excinfo:
        index.match(ReferenceNamespace.ITEMS, "sword")
    assert excinfo.value.ids == (3, 9)


def test_slug_index_honours_predicate() -> None:
    items = [AuthoritativeItem(id=3, name="Sword", cross_reference_uri="/codex/items/sword/")]
    index = SlugIndex(EntityKind.ITEM, items, predicate=lambda item: item.id != 3)

    with pytest.raises(EntityNotFoundError):
        index.match_uri("/codex/items/sword/")


def test_classify_monster(static: AuthoritativeStatic) -> None:
    regular = AuthoritativeMonster(id=1, name="Slime", spawns=[3])
    boss = AuthoritativeMonster(id=2, name="Dragon", boss=True, spawns=[1, 5])
    raid = AuthoritativeMonster(id=3, name="Yggdrasil", boss=True, spawns=[3])

    assert classify_monster(regular, static) is MonsterKind.MONSTER
    assert classify_monster(boss, static) is MonsterKind.BOSS
    assert classify_monster(raid, static) is MonsterKind.RAID


def test_match_reference_for_authoritative_uses_monster_class(
    static: AuthoritativeStatic,
) -> None:
    dragon = ReferenceMonster(slug="dragon", kind=MonsterKind.BOSS, name="Dragon")
    reference = ReferenceData(bosses=ReferenceCollection([dragon]))
    boss = AuthoritativeMonster(
        id=2, name="Dragon", boss=True, cross_reference_uri="/codex/bosses/dragon/"
    )
    misfiled = AuthoritativeMonster(
        id=3, name="Dragon", boss=False, cross_reference_uri="/codex/bosses/dragon/"
    )

    assert match_reference_for_authoritative(boss, reference, static) is dragon
    with pytest.raises(EntityNotFoundError):
        match_reference_for_authoritative(misfiled, reference, static)
