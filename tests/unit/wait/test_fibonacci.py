r"""Unit tests for FibonacciWait strategy."""

from __future__ import annotations

import pytest

from retrier.wait import BaseWaitStrategy, FibonacciWait


def test_fibonacci_wait() -> None:
    wait = FibonacciWait(start_millis=10)
    assert wait(0) == 0
    assert [wait(n) for n in range(1, 9)] == [10, 10, 20, 30, 50, 80, 130, 210]


def test_fibonacci_wait_with_max_millis() -> None:
    wait = FibonacciWait(start_millis=10, max_millis=100)
    assert wait(6) == 80
    assert wait(7) == 100


def test_fibonacci_wait_default_start() -> None:
    assert FibonacciWait()(3) == 200


def test_fibonacci_wait_is_wait_strategy() -> None:
    assert isinstance(FibonacciWait(), BaseWaitStrategy)


def test_fibonacci_wait_repr() -> None:
    assert repr(FibonacciWait(start_millis=10, max_millis=100)) == (
        "FibonacciWait(start_millis=10, max_millis=100)"
    )


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"start_millis": -5}, r"start_millis must be non-negative"),
        ({"max_millis": -5}, r"max_millis must be positive"),
        ({"max_millis": 0}, r"max_millis must be positive"),
    ],
)
def test_fibonacci_wait_invalid(kwargs: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        FibonacciWait(**kwargs)
