r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that handles invocation
of user-defined callbacks at various points in the retry lifecycle.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

import time
from typing import TYPE_CHECKING, Any

from retrier.callbacks import AttemptInfo, GiveUpInfo, RetryInfo, SuccessInfo

if TYPE_CHECKING:
    from retrier.callbacks import CallbackConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attributes:
        callbacks: Configuration containing callback functions for
            lifecycle events.
    """

    def __init__(self, callbacks: CallbackConfig) -> None:
        self.callbacks = callbacks

    def on_attempt(self, attempt: int) -> None:
        """Invoke on_attempt callback.

        Args:
            attempt: The attempt about to be performed (1-indexed).
        """
        if self.callbacks.on_attempt:
            self.callbacks.on_attempt(AttemptInfo(attempt=attempt))

    def on_retry(
        self, attempt: int, wait_millis: float, result: Any, error: Exception | None
    ) -> None:
        """Invoke on_retry callback.

        Args:
            attempt: The attempt that just completed (1-indexed). The
                callback receives the number of the next attempt.
            wait_millis: The pause before the next attempt.
            result: The result that triggered the retry (if any).
            error: The exception that triggered the retry (if any).
        """
        if self.callbacks.on_retry:
            self.callbacks.on_retry(
                RetryInfo(
                    attempt=attempt + 1,
                    wait_millis=wait_millis,
                    result=result,
                    error=error,
                )
            )

    def on_success(self, attempt: int, result: Any, start_time: float) -> None:
        """Invoke on_success callback.

        Args:
            attempt: The attempt that succeeded (1-indexed).
            result: The accepted result.
            start_time: Timestamp when the first attempt started.
        """
        if self.callbacks.on_success:
            self.callbacks.on_success(
                SuccessInfo(attempt=attempt, result=result, total_time=time.time() - start_time)
            )

    def on_give_up(
        self, attempt: int, result: Any, error: Exception | None, start_time: float
    ) -> None:
        """Invoke on_give_up callback.

        Args:
            attempt: The final attempt number (1-indexed).
            result: The last result (if any).
            error: The last exception (if any).
            start_time: Timestamp when the first attempt started.
        """
        if self.callbacks.on_give_up:
            self.callbacks.on_give_up(
                GiveUpInfo(
                    attempt=attempt,
                    result=result,
                    error=error,
                    total_time=time.time() - start_time,
                )
            )
