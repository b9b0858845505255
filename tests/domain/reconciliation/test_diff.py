from __future__ import annotations

import pytest

from codexsync.domain.reconciliation import diff_sorted


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ([1, 3, 5, 7], [2, 3, 4, 7, 9]),
        ([1, 2, 3], [4, 5, 6]),
        ([10], [1, 2, 10, 11]),
        (["axe", "bow", "sword"], ["bow", "dagger"]),
    ],
)
def test_diff_sorted_partitions_inputs(a: list[object], b: list[object]) -> None:
    only_in_a, only_in_b = diff_sorted(a, b)
    shared = [value for value in a if value in b]

    assert not set(only_in_a) & set(only_in_b)
    assert not set(only_in_a) & set(shared)
    assert not set(only_in_b) & set(shared)
    assert sorted([*only_in_a, *shared]) == a
    assert sorted([*only_in_b, *shared]) == b


def test_diff_sorted_reports_both_sides() -> None:
    assert diff_sorted([1, 3, 5], [2, 3, 4]) == ([1, 5], [2, 4])


def test_diff_sorted_identical_inputs_are_empty() -> None:
    assert diff_sorted([1, 2, 3], [1, 2, 3]) == ([], [])


def test_diff_sorted_against_empty() -> None:
    assert diff_sorted([1, 2], []) == ([1, 2], [])
    assert diff_sorted([], [4, 5]) == ([], [4, 5])
    assert diff_sorted([], []) == ([], [])
