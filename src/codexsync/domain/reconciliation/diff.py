"""Set difference of two sorted sequences in a single pass."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence


class _Ordered(Protocol):
    def __lt__(self, other: object, /) -> bool: ...


def diff_sorted[T: _Ordered](a: Sequence[T], b: Sequence[T]) -> tuple[list[T], list[T]]:
    """Return ``(only_in_a, only_in_b)`` for two sorted, de-duplicated sequences.

    Both inputs must be sorted under the same order. Unsorted input yields a
    meaningless (but not failing) result.
    """

    only_in_a: list[T] = []
    only_in_b: list[T] = []
    i = j = 0
    while i < len(a) and j < len(b):
        left, right = a[i], b[j]
        if left < right:
            only_in_a.append(left)
            i += 1
        elif right < left:
            only_in_b.append(right)
            j += 1
        else:
            i += 1
            j += 1
    only_in_a.extend(a[i:])
    only_in_b.extend(b[j:])
    return only_in_a, only_in_b
