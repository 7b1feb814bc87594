r"""Exponential wait strategy."""

from __future__ import annotations

__all__ = ["ExponentialWait"]

import math

from retrier.config import (
    DEFAULT_BACKOFF_BASE,
    DEFAULT_MAX_WAIT_MILLIS,
    DEFAULT_START_WAIT_MILLIS,
)
from retrier.wait.base import BaseWaitStrategy


class ExponentialWait(BaseWaitStrategy):
    """Exponential wait strategy.

    Calculates the pause as ``round(start_millis * base ** attempts)``,
    capped at ``max_millis``. No pause is requested before any attempt
    was performed (``attempts <= 0``). Halves are rounded up.

    Args:
        start_millis: The initial delay factor in milliseconds.
        base: The growth factor applied for every attempt. Must be >= 1
            so that the pause never shrinks.
        max_millis: The maximum pause in milliseconds.

    Example:
        ```pycon
        >>> from retrier.wait import ExponentialWait
        >>> wait = ExponentialWait(start_millis=10, base=2.0)
        >>> wait(0)
        0
        >>> wait(1)
        20
        >>> wait(3)
        80
        >>> wait(10)  # Would be 10240, but capped
        1000
        >>> ExponentialWait(start_millis=10, base=3.0)(2)
        90

        ```
    """

    def __init__(
        self,
        start_millis: float = DEFAULT_START_WAIT_MILLIS,
        base: float = DEFAULT_BACKOFF_BASE,
        max_millis: int = DEFAULT_MAX_WAIT_MILLIS,
    ) -> None:
        if start_millis < 0:
            msg = f"start_millis must be non-negative, got {start_millis}"
            raise ValueError(msg)
        if base < 1:
            msg = f"base must be >= 1, got {base}"
            raise ValueError(msg)
        if max_millis <= 0:
            msg = f"max_millis must be positive, got {max_millis}"
            raise ValueError(msg)

        self.start_millis = start_millis
        self.base = base
        self.max_millis = max_millis

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(start_millis={self.start_millis}, "
            f"base={self.base}, max_millis={self.max_millis})"
        )

    def calculate(self, attempts: int) -> int:
        """Calculate exponential wait.

        Args:
            attempts: The number of attempts performed so far.

        Returns:
            ``0`` if ``attempts <= 0``, otherwise
            ``min(max_millis, round(start_millis * base ** attempts))``.
        """
        if attempts <= 0:
            return 0
        try:
            delay = self.start_millis * self.base**attempts
        except OverflowError:
            return self.max_millis
        if delay >= self.max_millis:
            return self.max_millis
        return int(math.floor(delay + 0.5))
