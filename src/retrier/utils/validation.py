r"""Validation utilities for retry strategies.

Configuration errors are reported when a policy is assembled, so that a
misconfigured retrier fails before it runs any operation. Values
returned by the strategies are checked at call time.
"""

from __future__ import annotations

__all__ = ["validate_strategy", "validate_wait_millis"]

import numbers
from typing import Any


def validate_strategy(name: str, strategy: Any) -> None:
    """Validate that a strategy is present and callable.

    Args:
        name: The name of the strategy, used in the error message.
        strategy: The strategy to validate.

    Raises:
        TypeError: If ``strategy`` is ``None`` or is not callable.

    Example:
        ```pycon
        >>> from retrier.utils import validate_strategy
        >>> validate_strategy("stop_strategy", lambda attempts: False)
        >>> validate_strategy("stop_strategy", None)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        TypeError: stop_strategy must be callable, got None

        ```
    """
    if not callable(strategy):
        msg = f"{name} must be callable, got {strategy!r}"
        raise TypeError(msg)


def validate_wait_millis(wait_millis: Any, attempts: int) -> float:
    """Validate the value returned by a wait strategy.

    Args:
        wait_millis: The value returned by the wait strategy.
        attempts: The number of attempts passed to the wait strategy,
            used in the error message.

    Returns:
        The validated pause in milliseconds.

    Raises:
        TypeError: If ``wait_millis`` is not a real number.

    Example:
        ```pycon
        >>> from retrier.utils import validate_wait_millis
        >>> validate_wait_millis(100, attempts=1)
        100
        >>> validate_wait_millis(None, attempts=1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        TypeError: wait strategy must return a number of milliseconds, got None for attempt 1

        ```
    """
    if isinstance(wait_millis, bool) or not isinstance(wait_millis, numbers.Real):
        msg = (
            f"wait strategy must return a number of milliseconds, "
            f"got {wait_millis!r} for attempt {attempts}"
        )
        raise TypeError(msg)
    return wait_millis
