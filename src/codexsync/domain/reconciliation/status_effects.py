"""Coverage report of status effects between the codex and the store."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .tables import WEAPON_ELEMENT_STATUSES, translate_status_effect

if TYPE_CHECKING:
    from .context import PassContext

log = getLogger(__name__)


def reconcile_status_effects(context: PassContext) -> None:
    """Report effects the codex uses but the store lacks, and the reverse. Report only."""

    referenced: set[str] = set()
    for item in context.reference.items:
        referenced.update(item.causes, item.cures, item.gives, item.immunities)
    for skill in context.reference.skills:
        referenced.update(skill.causes, skill.gives)
    for statuses in WEAPON_ELEMENT_STATUSES.values():
        referenced.update(statuses)

    expected = {translate_status_effect(name) for name in referenced}
    known = {effect.name for effect in context.static.status_effects}

    missing = sorted(expected - known)
    unused = sorted(known - expected)
    for name in missing:
        log.info("status effect not in the store: %s", name)
    for name in unused:
        log.debug("status effect not referenced by the codex: %s", name)
    context.report.missing_status_effects.extend(missing)
    context.report.unused_status_effects.extend(unused)
