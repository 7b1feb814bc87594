r"""Callback types and data structures for observability.

This module provides callback support for the retrier package, enabling
users to hook into the retry lifecycle for logging, metrics or
alerting.

The callback system provides four lifecycle hooks:
- on_attempt: Called before each attempt
- on_retry: Called when a retry was decided, before the pause
- on_success: Called when the operation returns an accepted result
- on_give_up: Called when attempts are exhausted, before the give-up
  strategy runs

Example:
    ```pycon
    >>> from retrier import CallbackConfig, Retrier, RetryPolicy
    >>> from retrier.callbacks import RetryInfo
    >>> from retrier.stop import stop_after
    >>> def log_retry(retry_info: RetryInfo) -> None:
    ...     print(f"Retry {retry_info.attempt} in {retry_info.wait_millis}ms")
    ...
    >>> retrier = Retrier(
    ...     RetryPolicy(stop_strategy=stop_after(3)),
    ...     callbacks=CallbackConfig(on_retry=log_retry),
    ... )

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptInfo",
    "CallbackConfig",
    "GiveUpInfo",
    "RetryInfo",
    "SuccessInfo",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class AttemptInfo:
    """Information passed to on_attempt callback.

    Attributes:
        attempt: The attempt about to be performed (1-indexed).
    """

    attempt: int


@dataclass(frozen=True)
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        attempt: The attempt that will be performed next (1-indexed).
            The first retry is attempt 2.
        wait_millis: The pause in milliseconds before the next attempt.
        result: The result that triggered the retry (if any).
        error: The exception that triggered the retry (if any).
    """

    attempt: int
    wait_millis: float
    result: Any
    error: Exception | None


@dataclass(frozen=True)
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        attempt: The attempt that succeeded (1-indexed).
        result: The accepted result.
        total_time: Total time spent on all attempts including pauses
            (seconds).
    """

    attempt: int
    result: Any
    total_time: float


@dataclass(frozen=True)
class GiveUpInfo:
    """Information passed to on_give_up callback.

    Attributes:
        attempt: The final attempt number (1-indexed).
        result: The last result (if any).
        error: The last exception (if any).
        total_time: Total time spent on all attempts including pauses
            (seconds).
    """

    attempt: int
    result: Any
    error: Exception | None
    total_time: float


@dataclass(frozen=True)
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_attempt: Optional callback invoked before each attempt.
        on_retry: Optional callback invoked when a retry is decided.
        on_success: Optional callback invoked when a result is accepted.
        on_give_up: Optional callback invoked when attempts are
            exhausted.
    """

    on_attempt: Callable[[AttemptInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_give_up: Callable[[GiveUpInfo], None] | None = None

    def __post_init__(self) -> None:
        for name in ("on_attempt", "on_retry", "on_success", "on_give_up"):
            value = getattr(self, name)
            if value is not None and not callable(value):
                msg = f"{name} must be callable or None, got {value!r}"
                raise TypeError(msg)
