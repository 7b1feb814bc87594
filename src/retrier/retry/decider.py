r"""Retry decision logic for determining whether to retry an
operation.

This module provides the RetryDecider class that applies the strategies
of a ``RetryPolicy`` to the outcome of an attempt.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING, Any

from retrier.cancellation import is_cancellation_error, is_cancelled
from retrier.retry.outcome import AttemptOutcome
from retrier.utils.validation import validate_wait_millis

if TYPE_CHECKING:
    from retrier.cancellation import CancellationToken
    from retrier.retry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether an operation should be attempted again.

    Args:
        policy: The strategies to apply.

    Example:
        ```pycon
        >>> from retrier import RetryPolicy
        >>> from retrier.retry import RetryDecider
        >>> from retrier.stop import stop_after
        >>> decider = RetryDecider(RetryPolicy(stop_strategy=stop_after(2)))
        >>> outcome = decider.classify_error(1, ValueError("boom"))
        >>> outcome.attempt_failed
        True
        >>> decider.should_retry(outcome)
        True
        >>> decider.should_retry(decider.classify_error(2, ValueError("boom")))
        False

        ```
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self.policy = policy

    def classify_result(
        self, attempt: int, result: Any, token: CancellationToken | None = None
    ) -> AttemptOutcome:
        """Classify an attempt that returned a result.

        Args:
            attempt: The attempt number (1-indexed).
            result: The value returned by the operation.
            token: Optional cancellation token to check.

        Returns:
            The classified outcome.
        """
        return AttemptOutcome(
            attempt=attempt,
            result=result,
            attempt_failed=bool(self.policy.result_retry_strategy(result)),
            cancelled=is_cancelled(token),
        )

    def classify_error(
        self, attempt: int, error: Exception, token: CancellationToken | None = None
    ) -> AttemptOutcome:
        """Classify an attempt that raised an error.

        Args:
            attempt: The attempt number (1-indexed).
            error: The exception raised by the operation.
            token: Optional cancellation token to check.

        Returns:
            The classified outcome. The outcome is cancelled if the token
            is cancelled or if ``error`` is, or was caused by, a
            cancellation.
        """
        return AttemptOutcome(
            attempt=attempt,
            error=error,
            attempt_failed=bool(self.policy.failed_retry_strategy(error)),
            cancelled=is_cancelled(token) or is_cancellation_error(error),
        )

    def should_retry(self, outcome: AttemptOutcome) -> bool:
        """Determine if another attempt should be made.

        The stop strategy is only consulted when the outcome is
        retry-worthy and not cancelled.

        Args:
            outcome: The outcome of the last attempt.

        Returns:
            ``True`` if the operation should be attempted again.
        """
        if outcome.cancelled:
            logger.debug(f"Attempt {outcome.attempt}: cancelled, will not retry")
            return False
        if not outcome.attempt_failed:
            return False
        if self.policy.stop_strategy(outcome.attempt):
            logger.debug(f"Attempt {outcome.attempt}: stop strategy requested to stop")
            return False
        logger.debug(f"Attempt {outcome.attempt}: will retry ({_describe(outcome)})")
        return True

    def wait_millis(self, attempt: int) -> float:
        """Calculate the pause before the next attempt.

        Args:
            attempt: The number of attempts performed so far.

        Returns:
            The pause in milliseconds. Values <= 0 mean no pause.

        Raises:
            TypeError: If the wait strategy does not return a number.
        """
        return validate_wait_millis(self.policy.wait_strategy(attempt), attempt)


def _describe(outcome: AttemptOutcome) -> str:
    if outcome.error is not None:
        return f"{type(outcome.error).__name__}: {outcome.error}"
    return f"result {outcome.result!r}"
