"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from codexsync.adapters.memory import InMemoryAuthoritativeStore
from codexsync.adapters.snapshot import load_snapshot, save_snapshot
from codexsync.config import get_reconcile_config, get_storage_config
from codexsync.domain.reconciliation import merge_snapshots, reconcile_all

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from codexsync.config import StorageConfig
    from codexsync.domain.model import AuthoritativeData, Dataset, EntityKind
    from codexsync.domain.ports import AuthoritativeStore
    from codexsync.domain.reconciliation import ReconciliationReport

StoreFactory = Callable[["AuthoritativeData"], "AuthoritativeStore"]


log = getLogger(__name__)


def resolve_snapshot_dir(
    value: str | Path,
    *,
    storage: StorageConfig | None = None,
    ensure: bool = False,
) -> Path:
    """Use ``value`` as given when it names a directory, else look it up in the data dir."""

    path = Path(value).expanduser()
    if not (path.is_dir() or path.is_absolute() or len(path.parts) > 1):
        effective_storage = storage or get_storage_config()
        path = effective_storage.snapshot_path(path.name, ensure=ensure)
    if ensure:
        path.mkdir(parents=True, exist_ok=True)
    return path


def merge_snapshot_directories(
    sources: Sequence[str | Path],
    output: str | Path,
    *,
    storage: StorageConfig | None = None,
) -> Dataset:
    """Merge the snapshots in ``sources`` (oldest first) and write the result to ``output``."""

    if not sources:
        raise ValueError("At least one snapshot is required")
    directories = [resolve_snapshot_dir(source, storage=storage) for source in sources]
    log.info("Merging %d snapshots: %s", len(directories), ", ".join(map(str, directories)))
    merged = merge_snapshots(load_snapshot(directory) for directory in directories)
    output_dir = resolve_snapshot_dir(output, storage=storage, ensure=True)
    save_snapshot(merged, output_dir)
    return merged


def check_snapshot(
    snapshot: str | Path,
    *,
    fix: bool = False,
    kinds: Iterable[EntityKind] | None = None,
    output: str | Path | None = None,
    storage: StorageConfig | None = None,
    store_factory: StoreFactory = InMemoryAuthoritativeStore,
) -> ReconciliationReport:
    """Reconcile a snapshot against a store seeded with its authoritative side.

    With ``output``, the store contents after the pass are written out along
    with the unchanged codex side.
    """

    config = get_reconcile_config(fix=fix)
    effective_kinds = tuple(kinds) if kinds is not None else config.kinds
    dataset = load_snapshot(resolve_snapshot_dir(snapshot, storage=storage))
    store = store_factory(dataset.authoritative)
    log.info(
        "Starting reconciliation: kinds=%s, fix=%s",
        ",".join(effective_kinds),
        config.fix,
    )
    report = reconcile_all(dataset, store, fix=config.fix, kinds=effective_kinds)

    if output is not None:
        if isinstance(store, InMemoryAuthoritativeStore):
            dataset.authoritative = store.export()
        save_snapshot(dataset, resolve_snapshot_dir(output, storage=storage, ensure=True))
    return report
