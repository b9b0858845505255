from __future__ import annotations

from codexsync.domain.reconciliation.exclusions import Scope, is_excluded, supplements_for


def test_entity_exclusions() -> None:
    assert is_excluded(Scope.REFERENCE_ITEM, slug="orna-1", name="Orna")
    assert is_excluded(Scope.REFERENCE_ITEM, slug="soul-blade", name="Soul Blade")
    assert is_excluded(Scope.AUTHORITATIVE_ITEM, name="Mage's Ring")
    assert is_excluded(Scope.SNAPSHOT_BOSS, slug="immortal-lord")
    assert not is_excluded(Scope.REFERENCE_ITEM, slug="sword", name="Sword")
    assert not is_excluded(Scope.REFERENCE_MONSTER, slug="soul-blade", name="Soul Blade")


def test_field_exclusion_does_not_exclude_entity() -> None:
    assert is_excluded(Scope.REFERENCE_SKILL, slug="CerusDefendMag", field_name="gives")
    assert not is_excluded(Scope.REFERENCE_SKILL, slug="CerusDefendMag")
    assert not is_excluded(Scope.REFERENCE_SKILL, slug="CerusDefendMag", field_name="causes")


def test_supplements() -> None:
    assert supplements_for(Scope.REFERENCE_ITEM, "causes", slug="swansong") == ("Blind",)
    assert supplements_for(
        Scope.REFERENCE_MONSTER, "events", slug="kerberos-3", name="Kerberos the Third"
    ) == ("Rise of Kerberos",)
    assert supplements_for(Scope.REFERENCE_MONSTER, "tags", slug="arisen-yggdrasil") == (
        "World Raid",
    )
    assert supplements_for(Scope.REFERENCE_MONSTER, "tags", slug="dragon") == ()
