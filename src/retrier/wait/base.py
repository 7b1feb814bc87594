r"""Abstract base class for wait strategies."""

from __future__ import annotations

__all__ = ["BaseWaitStrategy"]

from abc import ABC, abstractmethod


class BaseWaitStrategy(ABC):
    """Abstract base class for wait strategies.

    A wait strategy determines how long to pause before the next attempt
    given the number of attempts already performed. Instances are
    callable so they can be used anywhere a plain wait function is
    accepted.
    """

    def __call__(self, attempts: int) -> int | float:
        return self.calculate(attempts)

    @abstractmethod
    def calculate(self, attempts: int) -> int | float:
        """Calculate the pause before the next attempt.

        Args:
            attempts: The number of attempts performed so far, including
                the attempt that just completed (1-indexed).

        Returns:
            The pause in milliseconds. A value less than or equal to 0
            means no pause. Subclasses may return a ``float`` for
            sub-millisecond precision.
        """
