r"""Stop strategies deciding when no more attempts should be made.

A stop strategy is a callable receiving the number of attempts performed
so far, including the attempt that just completed, and returning
``True`` when the retry loop must stop.
"""

from __future__ import annotations

__all__ = ["never_stop", "stop_after"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def never_stop(attempts: int) -> bool:  # noqa: ARG001
    """Stop strategy that never stops.

    This is the default stop strategy of ``RetryPolicy``: the operation
    is retried as long as the other strategies ask for it.

    Example:
        ```pycon
        >>> from retrier.stop import never_stop
        >>> never_stop(1_000_000)
        False

        ```
    """
    return False


def stop_after(max_attempts: int) -> Callable[[int], bool]:
    """Limit the number of attempts to a fixed value.

    Args:
        max_attempts: The maximum number of attempts, including the
            first one. Must be >= 1.

    Returns:
        A stop strategy returning ``True`` once ``max_attempts``
        attempts were performed.

    Raises:
        ValueError: If ``max_attempts`` is lower than 1.

    Example:
        ```pycon
        >>> from retrier.stop import stop_after
        >>> stop = stop_after(3)
        >>> stop(2)
        False
        >>> stop(3)
        True

        ```
    """
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)

    def stop(attempts: int) -> bool:
        return attempts >= max_attempts

    return stop
