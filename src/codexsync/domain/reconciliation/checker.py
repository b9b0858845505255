"""Compare one field of a matched pair and optionally repair the store.

Responsibilities of this stage:
- compare the cached authoritative value against the expected codex value
- record every mismatch in the report, fixed or not
- when fixing, run a full retrieve -> mutate -> save -> retrieve round trip so
  no stale cached copy is ever written back

Each field is described once by a :class:`FieldAccessor` holding its getter,
its setter and the comparison used to display it.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from operator import attrgetter
from typing import TYPE_CHECKING, Any, Literal, cast

from codexsync.domain.ports import StoreError

from .diff import diff_sorted
from .errors import FixAbortedError, UnresolvedReferenceError
from .report import FieldDiscrepancy
from .retry import retry_once

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from codexsync.domain.model import AuthoritativeEntity, EntityKind
    from codexsync.domain.ports import AuthoritativeStore

    from .report import ReconciliationReport

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScalarComparison:
    """Plain equality, displayed with ``str``."""

    kind: Literal["scalar"] = "scalar"

    def render(self, value: object) -> str:
        return str(value)


@dataclass(frozen=True, slots=True)
class DebugComparison:
    """Plain equality, displayed with ``repr`` (optionals, name lists)."""

    kind: Literal["debug"] = "debug"

    def render(self, value: object) -> str:
        return repr(value)


@dataclass(frozen=True, slots=True)
class SortedIdsComparison:
    """Sorted id lists, displayed through an id -> name label."""

    label: Callable[[int], str]
    kind: Literal["sorted_ids"] = "sorted_ids"

    def render(self, value: object) -> str:
        return repr([self.label(entity_id) for entity_id in value])  # type: ignore[attr-defined]


type Comparison = ScalarComparison | DebugComparison | SortedIdsComparison


SCALAR = ScalarComparison()
DEBUG = DebugComparison()


@dataclass(frozen=True, slots=True)
class FieldAccessor[E, V]:
    name: str
    get: Callable[[E], V]
    set: Callable[[E, V], None]
    comparison: Comparison = SCALAR


def attribute_field(
    name: str,
    attr: str | None = None,
    *,
    comparison: Comparison = SCALAR,
) -> FieldAccessor[Any, Any]:
    """Accessor reading and writing one attribute as is."""

    target = attr or name

    def _set(entity: object, value: object) -> None:
        setattr(entity, target, value)

    return FieldAccessor(name=name, get=attrgetter(target), set=_set, comparison=comparison)


def id_collection_field(
    name: str,
    attr: str,
    *,
    label: Callable[[int], str],
    subset: Callable[[int], bool] | None = None,
) -> FieldAccessor[Any, list[int]]:
    """Accessor for a list of ids, optionally restricted to the ids ``subset`` accepts.

    The getter returns the sorted, de-duplicated relevant ids. The setter diffs
    the expected ids against the relevant ids of the entity it is given, removes
    what is extra, then appends what is missing. Ids outside ``subset`` are left
    untouched.
    """

    def _relevant(entity: object) -> list[int]:
        ids: list[int] = getattr(entity, attr)
        return sorted({entity_id for entity_id in ids if subset is None or subset(entity_id)})

    def _set(entity: object, expected: list[int]) -> None:
        to_add, to_remove = diff_sorted(expected, _relevant(entity))
        if to_add:
            log.info("Suggest adding to %s: %s", name, [label(entity_id) for entity_id in to_add])
        if to_remove:
            log.info(
                "Suggest removing from %s: %s", name, [label(entity_id) for entity_id in to_remove]
            )
        removed = set(to_remove)
        current: list[int] = getattr(entity, attr)
        kept = [entity_id for entity_id in current if entity_id not in removed]
        setattr(entity, attr, kept + to_add)

    return FieldAccessor(
        name=name,
        get=_relevant,
        set=_set,
        comparison=SortedIdsComparison(label=label),
    )


@dataclass(slots=True, kw_only=True)
class Checker[E: AuthoritativeEntity]:
    """Field checks for one matched pair.

    ``entity`` is the cached authoritative record. After a fix it is replaced by
    the re-retrieved record and ``on_refresh`` is called with it so the caller's
    dataset stays current.
    """

    entity: E
    store: AuthoritativeStore
    report: ReconciliationReport
    fix: bool = False
    on_refresh: Callable[[E], None] | None = None

    @property
    def kind(self) -> EntityKind:
        return self.entity.KIND

    def check[V](self, accessor: FieldAccessor[E, V], expected: V) -> bool:
        """Return whether the field matched before any fix was attempted."""

        actual = accessor.get(self.entity)
        if actual == expected:
            return True

        comparison = accessor.comparison
        self._log_mismatch(accessor.name, comparison.render(actual), comparison.render(expected))
        fixed = False
        try:
            if self.fix:
                fixed = self._fix(accessor, expected)
        finally:
            self._record(
                accessor.name, comparison.render(actual), comparison.render(expected), fixed
            )
        return False

    def check_links(
        self,
        name: str,
        *,
        actual: Sequence[int],
        expected: Sequence[int],
        counterpart_kind: EntityKind,
        counterpart_attr: str,
        label: Callable[[int], str],
        on_counterpart_refresh: Callable[[Any], None] | None = None,
    ) -> bool:
        """Check a relation stored on the counterparts rather than on this entity.

        ``actual`` and ``expected`` are sorted counterpart ids. Fixing adds or
        removes this entity's id in ``counterpart_attr`` of every affected
        counterpart, re-checking containment on the fresh record first.
        """

        if list(actual) == list(expected):
            return True

        comparison = SortedIdsComparison(label=label)
        self._log_mismatch(name, comparison.render(actual), comparison.render(expected))
        fixed = False
        try:
            if self.fix:
                fixed = self._relink_all(
                    name,
                    actual=actual,
                    expected=expected,
                    counterpart_kind=counterpart_kind,
                    counterpart_attr=counterpart_attr,
                    label=label,
                    on_refresh=on_counterpart_refresh,
                )
        finally:
            self._record(name, comparison.render(actual), comparison.render(expected), fixed)
        return False

    def _relink_all(
        self,
        name: str,
        *,
        actual: Sequence[int],
        expected: Sequence[int],
        counterpart_kind: EntityKind,
        counterpart_attr: str,
        label: Callable[[int], str],
        on_refresh: Callable[[Any], None] | None,
    ) -> bool:
        to_add, to_remove = diff_sorted(expected, actual)
        if to_add:
            log.info("Suggest adding to %s: %s", name, [label(entity_id) for entity_id in to_add])
        if to_remove:
            log.info(
                "Suggest removing from %s: %s", name, [label(entity_id) for entity_id in to_remove]
            )
        for counterpart_id in to_remove:
            self._relink(
                name,
                counterpart_kind,
                counterpart_id,
                counterpart_attr,
                add=False,
                on_refresh=on_refresh,
            )
        for counterpart_id in to_add:
            self._relink(
                name,
                counterpart_kind,
                counterpart_id,
                counterpart_attr,
                add=True,
                on_refresh=on_refresh,
            )
        return True

    def _fix[V](self, accessor: FieldAccessor[E, V], expected: V) -> bool:
        kind, entity_id = self.kind, self.entity.id
        try:
            fresh = cast("E", retry_once(lambda: self.store.retrieve_by_id(kind, entity_id)))
            try:
                accessor.set(fresh, expected)
            except UnresolvedReferenceError as exc:
                log.warning("%s #%d (%s): %s", kind, entity_id, self.entity.name, exc)
                return False
            retry_once(lambda: self.store.save(fresh))
            refreshed = cast("E", retry_once(lambda: self.store.retrieve_by_id(kind, entity_id)))
        except StoreError as exc:
            raise FixAbortedError(kind, entity_id, self.entity.name, accessor.name) from exc

        self.entity = refreshed
        if self.on_refresh is not None:
            self.on_refresh(refreshed)
        stored = accessor.get(refreshed)
        if stored != expected:
            log.warning(
                "%s #%d (%s): %s not taken by the store: store=%s codex=%s",
                kind,
                entity_id,
                refreshed.name,
                accessor.name,
                accessor.comparison.render(stored),
                accessor.comparison.render(expected),
            )
            return False
        return True

    def _relink(
        self,
        name: str,
        kind: EntityKind,
        counterpart_id: int,
        attr: str,
        *,
        add: bool,
        on_refresh: Callable[[Any], None] | None,
    ) -> None:
        link_id = self.entity.id
        try:
            counterpart = retry_once(lambda: self.store.retrieve_by_id(kind, counterpart_id))
            links: list[int] = getattr(counterpart, attr)
            if (link_id in links) == add:
                return
            if add:
                links.append(link_id)
            else:
                kept = [entity_id for entity_id in links if entity_id != link_id]
                setattr(counterpart, attr, kept)
            retry_once(lambda: self.store.save(counterpart))
            refreshed = retry_once(lambda: self.store.retrieve_by_id(kind, counterpart_id))
        except StoreError as exc:
            raise FixAbortedError(self.kind, self.entity.id, self.entity.name, name) from exc

        if on_refresh is not None:
            on_refresh(refreshed)

    def _log_mismatch(self, name: str, actual: str, expected: str) -> None:
        log.info(
            "%s #%d (%s): %s differs: store=%s codex=%s",
            self.kind,
            self.entity.id,
            self.entity.name,
            name,
            actual,
            expected,
        )

    def _record(self, name: str, actual: str, expected: str, fixed: bool) -> None:
        self.report.discrepancies.append(
            FieldDiscrepancy(
                kind=self.kind,
                entity_id=self.entity.id,
                entity_name=self.entity.name,
                field_name=name,
                authoritative_value=actual,
                reference_value=expected,
                fixed=fixed,
            )
        )
