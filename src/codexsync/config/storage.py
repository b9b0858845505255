"""Where snapshots live on disk.

Snapshot directories given by bare name (``2024-06-01``) are placed under
``<data_dir>/snapshots``. The data directory comes from ``CODEXSYNC_DATA_DIR``
or the platform's per-user data location.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DATA_DIR_ENV: Final[str] = "CODEXSYNC_DATA_DIR"
SNAPSHOTS_SUBDIR: Final[str] = "snapshots"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def snapshot_path(self, name: str, *, ensure: bool = True) -> Path:
        """Directory of the snapshot called ``name``; created when ``ensure``."""

        path = self.resolve_data_dir() / SNAPSHOTS_SUBDIR / name
        if ensure:
            path.mkdir(parents=True, exist_ok=True)
        return path


def _platform_data_home() -> Path:
    if os.name == "nt":
        local = os.getenv("LOCALAPPDATA")
        return Path(local) if local else Path.home() / "AppData" / "Local"
    xdg = os.getenv("XDG_DATA_HOME")
    return Path(xdg) if xdg else Path.home() / ".local" / "share"


def get_storage_config() -> StorageConfig:
    override = os.getenv(DATA_DIR_ENV)
    if override:
        return StorageConfig(data_dir=Path(override))
    return StorageConfig(data_dir=_platform_data_home() / "codexsync")
