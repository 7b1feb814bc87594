r"""Wait strategy that never pauses."""

from __future__ import annotations

__all__ = ["NoWait"]

from retrier.wait.base import BaseWaitStrategy


class NoWait(BaseWaitStrategy):
    """Wait strategy that retries immediately.

    This is the default wait strategy of ``RetryPolicy``.

    Example:
        ```pycon
        >>> from retrier.wait import NoWait
        >>> NoWait()(5)
        0

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoWait)

    def __hash__(self) -> int:
        return hash(self.__class__)

    def calculate(self, attempts: int) -> int:  # noqa: ARG002
        """Return 0 whatever the number of attempts."""
        return 0
