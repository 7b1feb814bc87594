r"""Asynchronous retry executor.

This module provides the AsyncRetrier class that executes a coroutine
function with automatic retry logic inside the calling task.
"""

from __future__ import annotations

__all__ = ["AsyncRetrier"]

import asyncio
import inspect
import logging
import time
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from retrier.callbacks import CallbackConfig
from retrier.cancellation import is_cancelled
from retrier.config import TOKEN_POLL_INTERVAL
from retrier.retry.decider import RetryDecider
from retrier.retry.executor_core import resolve_outcome
from retrier.retry.manager import CallbackManager
from retrier.retry.policy import RetryPolicy
from retrier.utils.validation import validate_strategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from retrier.cancellation import CancellationToken

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetrier:
    """Executes an async operation and retries it until it succeeds,
    according to a retry policy.

    The retry loop runs inside the calling task. Pauses use
    ``asyncio.sleep`` so other tasks keep running while waiting.
    Cancelling the calling task cancels the loop: the
    ``asyncio.CancelledError`` is re-raised and the give-up strategy is
    not invoked. A cancellation token passed to ``execute`` also cuts a
    pause short.

    Args:
        policy: The retry policy. Defaults to ``RetryPolicy()``.
        callbacks: Optional lifecycle callbacks.

    Attributes:
        policy: The retry policy.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retrier import AsyncRetrier, RetryPolicy
        >>> from retrier.stop import stop_after
        >>> calls = []
        >>> async def flaky() -> str:
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("unreachable")
        ...     return "ok"
        ...
        >>> retrier = AsyncRetrier(RetryPolicy(stop_strategy=stop_after(5)))
        >>> asyncio.run(retrier.execute(flaky))
        'ok'
        >>> len(calls)
        3

        ```
    """

    def __init__(
        self, policy: RetryPolicy | None = None, callbacks: CallbackConfig | None = None
    ) -> None:
        self.policy: RetryPolicy = policy if policy is not None else RetryPolicy()
        self.decider: RetryDecider = RetryDecider(self.policy)
        self.callbacks: CallbackManager = CallbackManager(
            callbacks if callbacks is not None else CallbackConfig()
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(policy={self.policy})"

    async def execute(
        self, operation: Callable[[], Any], token: CancellationToken | None = None
    ) -> Any:
        """Execute an async operation with automatic retry logic.

        Args:
            operation: Zero-argument callable returning an awaitable,
                typically a coroutine function. A plain return value is
                accepted as the result too.
            token: Optional cancellation token, checked after every
                attempt and after every pause.

        Returns:
            The result of the last attempt, or the value returned by the
            give-up strategy when attempts are exhausted.

        Raises:
            asyncio.CancelledError: If the calling task was cancelled
                during an attempt or a pause.
            RetryCancelledError: If the token was cancelled or the
                operation failed with a cancellation-type error.
            Exception: The error raised by the last attempt when it is
                not retryable, or whatever the give-up strategy raises.
        """
        validate_strategy("operation", operation)
        start_time = time.time()
        attempt = 0

        while True:
            attempt += 1
            self.callbacks.on_attempt(attempt)
            try:
                result = operation()
                if inspect.isawaitable(result):
                    result = await result
            except asyncio.CancelledError:
                logger.debug(f"Attempt {attempt}: task cancelled")
                raise
            except Exception as exc:
                outcome = self.decider.classify_error(attempt, exc, token)
            else:
                outcome = self.decider.classify_result(attempt, result, token)

            if not self.decider.should_retry(outcome):
                break

            wait_millis = self.decider.wait_millis(attempt)
            self.callbacks.on_retry(attempt, wait_millis, outcome.result, outcome.error)
            if wait_millis > 0:
                logger.debug(f"Waiting {wait_millis}ms before next attempt")
                try:
                    await _pause(wait_millis / 1000, token)
                except asyncio.CancelledError:
                    logger.debug(f"Task cancelled while waiting after attempt {attempt}")
                    raise
            if is_cancelled(token):
                outcome = replace(outcome, cancelled=True)
                break

        return resolve_outcome(outcome, self.policy, self.callbacks, start_time)


async def _pause(seconds: float, token: CancellationToken | None) -> None:
    """Sleep for ``seconds``, returning early once ``token`` is
    cancelled.

    Without a token the pause is a single ``asyncio.sleep``. With a
    token it is split into slices of at most ``TOKEN_POLL_INTERVAL``
    seconds and the token is checked after each of them.
    """
    if token is None:
        await asyncio.sleep(seconds)
        return
    remaining = seconds
    while remaining > 0 and not token.is_cancelled:
        step = min(remaining, TOKEN_POLL_INTERVAL)
        await asyncio.sleep(step)
        remaining -= step
