r"""Fibonacci wait strategy."""

from __future__ import annotations

__all__ = ["FibonacciWait"]

from retrier.wait.base import BaseWaitStrategy


class FibonacciWait(BaseWaitStrategy):
    """Fibonacci wait strategy.

    Calculates the pause as ``start_millis * fibonacci(attempts)``, with
    optional ``max_millis`` cap.

    The Fibonacci sequence (1, 1, 2, 3, 5, 8, 13, ...) ramps up more
    gradually than an exponential wait.

    Args:
        start_millis: The pause in milliseconds after the first attempt.
        max_millis: Optional maximum pause in milliseconds.

    Example:
        ```pycon
        >>> from retrier.wait import FibonacciWait
        >>> wait = FibonacciWait(start_millis=10)
        >>> [wait(n) for n in range(1, 7)]
        [10, 10, 20, 30, 50, 80]
        >>> FibonacciWait(start_millis=10, max_millis=25)(5)
        25

        ```
    """

    def __init__(self, start_millis: int = 100, max_millis: int | None = None) -> None:
        if start_millis < 0:
            msg = f"start_millis must be non-negative, got {start_millis}"
            raise ValueError(msg)
        if max_millis is not None and max_millis <= 0:
            msg = f"max_millis must be positive if specified, got {max_millis}"
            raise ValueError(msg)

        self.start_millis = start_millis
        self.max_millis = max_millis

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(start_millis={self.start_millis}, "
            f"max_millis={self.max_millis})"
        )

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (1-indexed)."""
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def calculate(self, attempts: int) -> int:
        """Return ``start_millis`` times the Fibonacci number of
        ``attempts``, capped at ``max_millis``."""
        delay = self.start_millis * self._fibonacci(attempts)
        if self.max_millis is not None:
            delay = min(delay, self.max_millis)
        return delay
