from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from codexsync.adapters.snapshot import load_snapshot, save_snapshot
from codexsync.app import check_snapshot, merge_snapshot_directories, resolve_snapshot_dir
from codexsync.config import ConfigurationError, get_storage_config
from codexsync.domain.model import (
    AuthoritativeItem,
    ReferenceItem,
    ReferenceLink,
)
from tests.helpers.catalog import make_dataset

if TYPE_CHECKING:
    from pathlib import Path

    from codexsync.domain.model import Dataset


def _iron_sword_snapshot() -> Dataset:
    return make_dataset(
        reference_items=[
            ReferenceItem(
                slug="iron-sword",
                name="Iron Sword",
                upgrade_materials=(
                    ReferenceLink(name="Iron Ingot", uri="/codex/items/iron-ingot/"),
                ),
            ),
            ReferenceItem(slug="iron-ingot", name="Iron Ingot"),
        ],
        items=[
            AuthoritativeItem(id=42, name="Iron Sword", cross_reference_uri="/items/iron-sword/"),
            AuthoritativeItem(
                id=7, name="Iron Ingot", cross_reference_uri="/codex/items/iron-ingot/"
            ),
        ],
    )


def test_check_snapshot_writes_fixed_store(tmp_path: Path) -> None:
    source = tmp_path / "source"
    output = tmp_path / "fixed"
    save_snapshot(_iron_sword_snapshot(), source)

    report = check_snapshot(source, fix=True, output=output)

    assert report.fixed == 1
    fixed = load_snapshot(output).authoritative.items.find_by_id(42)
    assert fixed is not None
    assert fixed.materials == [7]
    unchanged = load_snapshot(source).authoritative.items.find_by_id(42)
    assert unchanged is not None
    assert unchanged.materials == []


def test_check_snapshot_honours_kinds_from_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    save_snapshot(_iron_sword_snapshot(), tmp_path)
    monkeypatch.setenv("CODEXSYNC_KINDS", "followers")

    report = check_snapshot(tmp_path)

    assert report.discrepancies == []


def test_check_snapshot_rejects_bad_kinds(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    save_snapshot(_iron_sword_snapshot(), tmp_path)
    monkeypatch.setenv("CODEXSYNC_KINDS", "pets")

    with pytest.raises(ConfigurationError):
        check_snapshot(tmp_path)


def test_bare_snapshot_names_live_in_data_dir() -> None:
    path = resolve_snapshot_dir("2024-06-01", ensure=True)

    assert path == get_storage_config().snapshot_path("2024-06-01")
    assert path.is_dir()


def test_merge_snapshot_directories(tmp_path: Path) -> None:
    older = _iron_sword_snapshot()
    newer = make_dataset(items=[AuthoritativeItem(id=42, name="Iron Blade")])
    save_snapshot(older, tmp_path / "older")
    save_snapshot(newer, tmp_path / "newer")

    merge_snapshot_directories([tmp_path / "older", tmp_path / "newer"], tmp_path / "merged")

    merged = load_snapshot(tmp_path / "merged")
    assert {item.id: item.name for item in merged.authoritative.items} == {
        42: "Iron Blade",
        7: "Iron Ingot",
    }
    assert len(merged.reference.items) == 2
