from __future__ import annotations

from typing import TYPE_CHECKING

from codexsync.domain.model import AuthoritativeItem, ReferenceTag
from codexsync.domain.reconciliation import resolve_ids
from codexsync.domain.reconciliation.resolve import (
    event_table,
    raid_tag_names,
    resolve_status_effects,
    uri_table,
)

if TYPE_CHECKING:
    from codexsync.domain.model import AuthoritativeStatic


def test_resolve_ids_accounts_for_every_label() -> None:
    table = {"Iron Ingot": 7, "Steel Ingot": 8}
    labels = ["Iron Ingot", "Mithril", "Steel Ingot", "Iron Ingot"]

    result = resolve_ids(labels, table)

    assert len(result.successes) + len(result.failures) == len(labels)
    assert result.successes == (7, 8, 7)
    assert result.failures == ("Mithril",)
    assert all(label not in table for label in result.failures)
    assert not result.complete
    assert result.sorted_ids() == [7, 8]


def test_resolve_ids_empty_input_is_complete() -> None:
    result = resolve_ids([], {"a": 1})

    assert result.complete
    assert result.sorted_ids() == []


def test_resolve_status_effects_applies_renames(static: AuthoritativeStatic) -> None:
    result = resolve_status_effects(["Fire Immune", "Idun", "Burning", "Frozen"], static)

    assert result.successes == (4, 5, 1)
    assert result.failures == ("Frozen",)


def test_event_table_strips_event_prefixes(static: AuthoritativeStatic) -> None:
    assert event_table(static.spawns) == {"Halloween": 1, "Rise of Kerberos": 2}


def test_uri_table_skips_unlinked_entities() -> None:
    items = [
        AuthoritativeItem(id=1, name="Sword", cross_reference_uri="/codex/items/sword/"),
        AuthoritativeItem(id=2, name="Developer Sword"),
    ]

    assert uri_table(items) == {"/codex/items/sword/": 1}


def test_raid_tag_names_ignore_tags_without_spawn() -> None:
    tags = [ReferenceTag.WORLD_RAID, ReferenceTag.OTHER_REALMS_RAID, ReferenceTag.KINGDOM_RAID]

    assert raid_tag_names(tags) == ["World Raid", "Kingdom Raid"]
