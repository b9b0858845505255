"""Reconciliation of the reference codex with the authoritative store."""

from __future__ import annotations

from .checker import (
    DEBUG,
    SCALAR,
    Checker,
    Comparison,
    DebugComparison,
    FieldAccessor,
    ScalarComparison,
    SortedIdsComparison,
    attribute_field,
    id_collection_field,
)
from .diff import diff_sorted
from .engine import reconcile_all
from .errors import (
    DuplicateMatchError,
    EntityNotFoundError,
    FixAbortedError,
    ReconciliationError,
    UnresolvedReferenceError,
)
from .match import (
    SlugIndex,
    classify_monster,
    match_authoritative_for_reference,
    match_reference_for_authoritative,
    parse_reference_uri,
    slug_from_uri,
)
from .merge import SnapshotMerger, merge_snapshots
from .report import (
    EntityFailure,
    FieldDiscrepancy,
    MissingEntity,
    ReconciliationReport,
    UnresolvedReference,
)
from .resolve import IdConversionResult, resolve_ids
from .retry import retry_once

__all__ = [
    "DEBUG",
    "SCALAR",
    "Checker",
    "Comparison",
    "DebugComparison",
    "DuplicateMatchError",
    "EntityFailure",
    "EntityNotFoundError",
    "FieldAccessor",
    "FieldDiscrepancy",
    "FixAbortedError",
    "IdConversionResult",
    "MissingEntity",
    "ReconciliationError",
    "ReconciliationReport",
    "ScalarComparison",
    "SlugIndex",
    "SnapshotMerger",
    "SortedIdsComparison",
    "UnresolvedReference",
    "UnresolvedReferenceError",
    "attribute_field",
    "classify_monster",
    "diff_sorted",
    "id_collection_field",
    "match_authoritative_for_reference",
    "match_reference_for_authoritative",
    "merge_snapshots",
    "parse_reference_uri",
    "reconcile_all",
    "resolve_ids",
    "retry_once",
    "slug_from_uri",
]
