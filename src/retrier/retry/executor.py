r"""Synchronous retry executor.

This module provides the Retrier class that executes an operation with
automatic retry logic, on the caller's thread.
"""

from __future__ import annotations

__all__ = ["Retrier", "single_attempt"]

import logging
import time
from dataclasses import replace
from typing import TYPE_CHECKING, TypeVar

from retrier.callbacks import CallbackConfig
from retrier.cancellation import is_cancelled
from retrier.retry.decider import RetryDecider
from retrier.retry.executor_core import resolve_outcome
from retrier.retry.manager import CallbackManager
from retrier.retry.policy import SINGLE_ATTEMPT, RetryPolicy
from retrier.utils.validation import validate_strategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from retrier.cancellation import CancellationToken

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class Retrier:
    """Executes an operation and retries it until it succeeds, according
    to a retry policy.

    The executor holds no per-call state: a single instance can run any
    number of operations, sequentially or from several threads at once.

    The executor orchestrates the following components:
    - RetryDecider: Applies the policy strategies to each outcome
    - CallbackManager: Invokes user-defined callbacks at lifecycle events

    Args:
        policy: The retry policy. Defaults to ``RetryPolicy()``, which
            retries on any error forever without pausing.
        callbacks: Optional lifecycle callbacks.

    Attributes:
        policy: The retry policy.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> from retrier import Retrier, RetryPolicy
        >>> from retrier.predicates import retry_on_result
        >>> from retrier.stop import stop_after
        >>> values = iter([0, 0, 1])
        >>> retrier = Retrier(
        ...     RetryPolicy(stop_strategy=stop_after(5), result_retry_strategy=retry_on_result(0))
        ... )
        >>> retrier.execute(lambda: next(values))
        1

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

    def execute(self, operation: Callable[[], T], token: CancellationToken | None = None) -> T:
        """Execute an operation with automatic retry logic.

        After every attempt, the outcome is classified with the policy.
        The operation is attempted again while the outcome is
        retry-worthy, the stop strategy allows it and no cancellation was
        observed. The pause requested by the wait strategy is applied
        before each new attempt and blocks the calling thread.

        Args:
            operation: Zero-argument callable to execute.
            token: Optional cancellation token. It is checked after every
                attempt and after every pause, and interrupts pauses.

        Returns:
            The result of the last attempt, or the value returned by the
            give-up strategy when attempts are exhausted.

        Raises:
            RetryCancelledError: If a cancellation was observed. The
                error observed at that time is chained as the cause.
            Exception: The error raised by the last attempt when it is
                not retryable, or whatever the give-up strategy raises.
            TypeError: If ``operation`` is not callable or the wait
                strategy returns something else than a number.
        """
        validate_strategy("operation", operation)
        start_time = time.time()
        attempt = 0

        while True:
            attempt += 1
            self.callbacks.on_attempt(attempt)
            try:
                result = operation()
            except Exception as exc:
                outcome = self.decider.classify_error(attempt, exc, token)
            else:
                outcome = self.decider.classify_result(attempt, result, token)

            if not self.decider.should_retry(outcome):
                break

            wait_millis = self.decider.wait_millis(attempt)
            self.callbacks.on_retry(attempt, wait_millis, outcome.result, outcome.error)
            if self._pause(wait_millis, token):
                outcome = replace(outcome, cancelled=True)
                break

        return resolve_outcome(outcome, self.policy, self.callbacks, start_time)

    def _pause(self, wait_millis: float, token: CancellationToken | None) -> bool:
        """Pause before the next attempt.

        Returns:
            ``True`` if a cancellation was observed during or after the
            pause.
        """
        if wait_millis > 0:
            logger.debug(f"Waiting {wait_millis}ms before next attempt")
            if token is not None:
                return token.wait(wait_millis / 1000)
            time.sleep(wait_millis / 1000)
        return is_cancelled(token)


_SINGLE_ATTEMPT_RETRIER = Retrier(SINGLE_ATTEMPT)


def single_attempt() -> Retrier:
    """Return a shared retrier executing every operation exactly once.

    The operation is never retried and every error is propagated to the
    caller unchanged.

    Example:
        ```pycon
        >>> from retrier import single_attempt
        >>> single_attempt().execute(lambda: 42)
        42
        >>> single_attempt() is single_attempt()
        True

        ```
    """
    return _SINGLE_ATTEMPT_RETRIER
