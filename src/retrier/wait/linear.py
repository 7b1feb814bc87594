r"""Linear wait strategy."""

from __future__ import annotations

__all__ = ["LinearWait"]

from retrier.wait.base import BaseWaitStrategy


class LinearWait(BaseWaitStrategy):
    """Linear wait strategy.

    Calculates the pause as ``start_millis + increment_millis *
    (attempts - 1)``, with optional ``max_millis`` cap.

    Args:
        start_millis: The pause in milliseconds after the first attempt.
        increment_millis: The amount added for every further attempt.
        max_millis: Optional maximum pause in milliseconds.

    Example:
        ```pycon
        >>> from retrier.wait import LinearWait
        >>> wait = LinearWait(start_millis=100, increment_millis=50)
        >>> wait(1)
        100
        >>> wait(3)
        200
        >>> LinearWait(start_millis=100, increment_millis=50, max_millis=120)(3)
        120

        ```
    """

    def __init__(
        self, start_millis: int = 0, increment_millis: int = 100, max_millis: int | None = None
    ) -> None:
        if start_millis < 0:
            msg = f"start_millis must be non-negative, got {start_millis}"
            raise ValueError(msg)
        if increment_millis < 0:
            msg = f"increment_millis must be non-negative, got {increment_millis}"
            raise ValueError(msg)
        if max_millis is not None and max_millis <= 0:
            msg = f"max_millis must be positive if specified, got {max_millis}"
            raise ValueError(msg)

        self.start_millis = start_millis
        self.increment_millis = increment_millis
        self.max_millis = max_millis

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(start_millis={self.start_millis}, "
            f"increment_millis={self.increment_millis}, max_millis={self.max_millis})"
        )

    def calculate(self, attempts: int) -> int:
        """Calculate linear wait.

        Args:
            attempts: The number of attempts performed so far.

        Returns:
            The capped linear pause, or 0 if ``attempts <= 0``.
        """
        if attempts <= 0:
            return 0
        delay = self.start_millis + self.increment_millis * (attempts - 1)
        if self.max_millis is not None:
            delay = min(delay, self.max_millis)
        return delay
