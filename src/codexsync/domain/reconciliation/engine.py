"""Run a full reconciliation pass over the selected entity kinds."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from codexsync.domain.model import EntityKind

from .context import PassContext
from .followers import reconcile_followers
from .items import reconcile_items
from .monsters import reconcile_monsters
from .report import ReconciliationReport
from .skills import reconcile_skills
from .status_effects import reconcile_status_effects

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from codexsync.domain.model import Dataset
    from codexsync.domain.ports import AuthoritativeStore

log = getLogger(__name__)

type Driver = Callable[[PassContext], None]

DRIVERS: dict[EntityKind, Driver] = {
    EntityKind.ITEM: reconcile_items,
    EntityKind.MONSTER: reconcile_monsters,
    EntityKind.SKILL: reconcile_skills,
    EntityKind.FOLLOWER: reconcile_followers,
}


def reconcile_all(
    dataset: Dataset,
    store: AuthoritativeStore,
    *,
    fix: bool = False,
    kinds: Iterable[EntityKind] = tuple(EntityKind),
    status_effects: bool = True,
) -> ReconciliationReport:
    """Reconcile ``dataset`` against ``store`` and return what was found.

    Kinds always run in the order items, monsters, skills, followers so that
    entities created by an earlier driver are visible to the later ones.
    ``dataset`` is updated in place with created and re-retrieved records.
    """

    selected = set(kinds)
    report = ReconciliationReport()
    context = PassContext(dataset=dataset, store=store, report=report, fix=fix)
    for kind, driver in DRIVERS.items():
        if kind not in selected:
            continue
        log.info("Checking %s", kind)
        driver(context)
    if status_effects:
        reconcile_status_effects(context)

    log.info("Reconciliation finished: %s", report.summary())
    return report
