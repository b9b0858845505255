"""Directory-of-JSON snapshot format."""

from __future__ import annotations

from .io import SNAPSHOT_FILES, SnapshotFormatError, load_snapshot, save_snapshot

__all__ = [
    "SNAPSHOT_FILES",
    "SnapshotFormatError",
    "load_snapshot",
    "save_snapshot",
]
