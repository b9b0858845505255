"""State shared by the per-kind drivers during one pass."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from codexsync.domain.ports import StoreError

from .checker import Checker
from .errors import DuplicateMatchError, EntityNotFoundError
from .match import match_reference_for_authoritative
from .report import EntityFailure, MissingEntity, UnresolvedReference
from .retry import retry_once
from .tables import sanitize_store_name

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Sequence

    from codexsync.domain.model import (
        AuthoritativeCollection,
        AuthoritativeData,
        AuthoritativeEntity,
        AuthoritativeSkill,
        AuthoritativeStatic,
        Dataset,
        EntityKind,
        IdentifiedRecord,
        ReferenceData,
        ReferenceEntity,
        StaticEntry,
    )
    from codexsync.domain.ports import AuthoritativeStore

    from .match import SlugIndex
    from .report import ReconciliationReport, Side
    from .resolve import IdConversionResult

log = getLogger(__name__)


def id_label(records: Iterable[IdentifiedRecord | StaticEntry]) -> Callable[[int], str]:
    """Display helper turning ids into names; unknown ids show as ``#<id>``."""

    names = {record.id: record.name for record in records}
    return lambda entity_id: names.get(entity_id, f"#{entity_id}")


def find_offhand_skill(
    skills: Iterable[AuthoritativeSkill],
    name: str,
) -> AuthoritativeSkill | None:
    return next(
        (skill for skill in skills if skill.offhand and sanitize_store_name(skill.name) == name),
        None,
    )


@dataclass(slots=True, kw_only=True)
class PassContext:
    dataset: Dataset
    store: AuthoritativeStore
    report: ReconciliationReport
    fix: bool = False

    @property
    def reference(self) -> ReferenceData:
        return self.dataset.reference

    @property
    def authoritative(self) -> AuthoritativeData:
        return self.dataset.authoritative

    @property
    def static(self) -> AuthoritativeStatic:
        return self.dataset.authoritative.static

    def checker[E: AuthoritativeEntity](
        self,
        entity: E,
        collection: AuthoritativeCollection[E],
    ) -> Checker[E]:
        return Checker(
            entity=entity,
            store=self.store,
            report=self.report,
            fix=self.fix,
            on_refresh=collection.replace,
        )

    def accept(
        self,
        kind: EntityKind,
        entity_name: str,
        field_name: str,
        result: IdConversionResult,
    ) -> list[int]:
        """Keep the resolved ids of ``result``; log and record the labels that failed."""

        if result.failures:
            log.warning(
                "%s %s: cannot resolve %s %s", kind, entity_name, field_name, list(result.failures)
            )
            self.report.unresolved.append(
                UnresolvedReference(
                    kind=kind,
                    entity_name=entity_name,
                    field_name=field_name,
                    labels=result.failures,
                )
            )
        return result.sorted_ids()

    def missing(self, kind: EntityKind, missing_from: Side, key: str, name: str) -> None:
        side = "store" if missing_from == "authoritative" else "codex"
        log.info("%s not on the %s: %s (%s)", kind, side, name, key)
        self.report.missing.append(
            MissingEntity(kind=kind, missing_from=missing_from, key=key, name=name)
        )

    def failed(self, kind: EntityKind, key: str, exc: Exception) -> None:
        log.error("%s %s: %s", kind, key, exc)
        self.report.failures.append(EntityFailure(kind=kind, key=key, reason=str(exc)))

    def create_missing(
        self,
        kind: EntityKind,
        candidates: Sequence[AuthoritativeEntity],
    ) -> list[AuthoritativeEntity]:
        """Create ``candidates`` in the store and pull the new records into the dataset.

        The store does not report new ids, so the kind is listed again and every
        id unknown to the dataset is retrieved. Failures are logged and skipped.
        """

        if not candidates:
            return []
        collection = self.authoritative.collection(kind)
        known_ids = collection.ids()

        for candidate in candidates:
            try:
                retry_once(partial(self.store.create, kind, candidate))
            except StoreError as exc:
                self.failed(kind, candidate.cross_reference_uri or candidate.name, exc)

        try:
            rows = retry_once(partial(self.store.list, kind))
        except StoreError as exc:
            self.failed(kind, "listing", exc)
            return []

        added: list[AuthoritativeEntity] = []
        for row in rows:
            if row.id in known_ids:
                continue
            try:
                entity = retry_once(partial(self.store.retrieve_by_id, kind, row.id))
            except StoreError as exc:
                log.warning("Failed to retrieve new %s #%d (%s): %s", kind, row.id, row.name, exc)
                continue
            collection.append(entity)
            added.append(entity)

        log.info("Added %d/%d %s", len(added), len(candidates), kind)
        self.report.created += len(added)
        return added

    def report_missing[R: ReferenceEntity, E: AuthoritativeEntity](
        self,
        kind: EntityKind,
        references: Iterable[R],
        index: SlugIndex[E],
        *,
        skip_reference: Callable[[R], bool] | None = None,
        skip_authoritative: Callable[[E], bool] | None = None,
    ) -> list[R]:
        """Report entities present on one side only; return the codex-only ones."""

        codex_only: list[R] = []
        for reference in references:
            if skip_reference is not None and skip_reference(reference):
                continue
            try:
                index.match_uri(reference.uri)
            except EntityNotFoundError:
                self.missing(kind, "authoritative", reference.slug, reference.name)
                codex_only.append(reference)
            except DuplicateMatchError:
                continue

        for entity in self.authoritative.collection(kind):
            if skip_authoritative is not None and skip_authoritative(entity):
                continue
            try:
                match_reference_for_authoritative(entity, self.reference, self.static)
            except EntityNotFoundError:
                key = entity.cross_reference_uri or f"#{entity.id}"
                self.missing(kind, "reference", key, entity.name)
        return codex_only

    def matched_pairs[R: ReferenceEntity, E: AuthoritativeEntity](
        self,
        kind: EntityKind,
        references: Iterable[R],
        index: SlugIndex[E],
    ) -> Iterator[tuple[R, E]]:
        """Yield every codex record with its single store counterpart.

        Unmatched records were reported by :meth:`report_missing`; duplicate
        matches are recorded as failures and skipped.
        """

        for reference in references:
            try:
                entity = index.match_uri(reference.uri)
            except EntityNotFoundError:
                continue
            except DuplicateMatchError as exc:
                self.failed(kind, reference.slug, exc)
                continue
            yield reference, entity
