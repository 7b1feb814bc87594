r"""Constant wait strategy."""

from __future__ import annotations

__all__ = ["ConstantWait"]

from retrier.wait.base import BaseWaitStrategy


class ConstantWait(BaseWaitStrategy):
    """Constant/fixed wait strategy.

    Returns the same pause for every attempt, regardless of the number of
    attempts already performed.

    Args:
        delay: The fixed pause in milliseconds between two attempts.

    Example:
        ```pycon
        >>> from retrier.wait import ConstantWait
        >>> wait = ConstantWait(delay=250)
        >>> wait(1)
        250
        >>> wait(10)
        250

        ```
    """

    def __init__(self, delay: int | float) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(self, attempts: int) -> int | float:  # noqa: ARG002
        """Calculate constant wait.

        Args:
            attempts: The number of attempts performed so far (unused).

        Returns:
            The fixed delay value.
        """
        return self.delay
