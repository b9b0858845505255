from __future__ import annotations

import os
from pathlib import Path  # noqa: TC003

import pytest

from codexsync.config import (
    DEFAULT_KINDS,
    ConfigurationError,
    MissingConfigurationError,
    UnknownEntityKindError,
    get_reconcile_config,
    get_storage_config,
    parse_kinds,
)
from codexsync.domain.model import EntityKind


def test_parse_kinds_keeps_canonical_order() -> None:
    assert parse_kinds("followers, Items") == (EntityKind.ITEM, EntityKind.FOLLOWER)


def test_parse_kinds_rejects_unknown_names() -> None:
    with pytest.raises(ConfigurationError, match="pets") as excinfo:
        parse_kinds("items,pets,bosses")

    assert isinstance(excinfo.value, UnknownEntityKindError)
    assert excinfo.value.names == ("bosses", "pets")


def test_parse_kinds_requires_a_value() -> None:
    with pytest.raises(MissingConfigurationError):
        parse_kinds(" , ")


def test_reconcile_config_defaults() -> None:
    config = get_reconcile_config()

    assert config.kinds == DEFAULT_KINDS
    assert config.fix is False


def test_reconcile_config_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODEXSYNC_KINDS", "skills")

    config = get_reconcile_config(fix=True)

    assert config.kinds == (EntityKind.SKILL,)
    assert config.fix is True


def test_storage_config_prefers_explicit_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    custom = tmp_path / "custom-data"
    monkeypatch.setenv("CODEXSYNC_DATA_DIR", str(custom))

    config = get_storage_config()

    assert config.resolve_data_dir() == custom.resolve()
    assert not custom.exists()


def test_storage_config_creates_snapshot_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("CODEXSYNC_DATA_DIR", str(tmp_path / "data-dir"))

    path = get_storage_config().snapshot_path("2024-06-01")

    assert path == (tmp_path / "data-dir" / "snapshots" / "2024-06-01").resolve()
    assert path.parent.is_dir()


@pytest.mark.skipif(os.name == "nt", reason="uses LOCALAPPDATA on Windows")
def test_storage_config_defaults_to_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("CODEXSYNC_DATA_DIR", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    config = get_storage_config()

    assert config.resolve_data_dir() == (tmp_path / "codexsync").resolve()
