from __future__ import annotations

import pytest

from codexsync.domain.ports import StoreError
from codexsync.domain.reconciliation import retry_once


class _Operation:
    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise StoreError(f"attempt {self.calls} failed")
        return "ok"


def test_retry_once_returns_first_success_without_retrying() -> None:
    operation = _Operation(failures=0)

    assert retry_once(operation) == "ok"
    assert operation.calls == 1


def test_retry_once_recovers_from_single_failure() -> None:
    operation = _Operation(failures=1)

    assert retry_once(operation) == "ok"
    assert operation.calls == 2


def test_retry_once_raises_second_failure() -> None:
    operation = _Operation(failures=2)

    with pytest.raises(StoreError, match="attempt 2 failed"):
        retry_once(operation)
    assert operation.calls == 2


def test_retry_once_does_not_retry_other_errors() -> None:
    calls: list[int] = []

    def operation() -> None:
        calls.append(1)
        raise ValueError("bad input")

    with pytest.raises(ValueError, match="bad input"):
        retry_once(operation)
    assert len(calls) == 1
