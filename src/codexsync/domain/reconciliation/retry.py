"""Single-retry wrapper for store round trips."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from codexsync.domain.ports import StoreError

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)


def retry_once[T](
    operation: Callable[[], T],
    *,
    retry_on: tuple[type[Exception], ...] = (StoreError,),
) -> T:
    """Run ``operation``; on a ``retry_on`` failure run it exactly once more.

    The second outcome is final, whether it returns or raises. ``operation``
    is re-evaluated from scratch, so it must not close over state mutated by
    the failed attempt.
    """

    try:
        return operation()
    except retry_on as exc:
        log.warning("Store call failed, retrying once: %s", exc)
    return operation()
