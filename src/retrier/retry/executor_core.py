r"""Shared core logic for retry executors.

This module provides the helpers used by both the synchronous and the
asynchronous retry executors to turn the outcome of the last attempt
into the final result of ``execute``.
"""

from __future__ import annotations

__all__ = ["resolve_outcome"]

import logging
from typing import TYPE_CHECKING, Any

from retrier.exceptions import RetryCancelledError

if TYPE_CHECKING:
    from retrier.retry.manager import CallbackManager
    from retrier.retry.outcome import AttemptOutcome
    from retrier.retry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


def resolve_outcome(
    outcome: AttemptOutcome,
    policy: RetryPolicy,
    callbacks: CallbackManager,
    start_time: float,
) -> Any:
    """Resolve the final result of a retry loop.

    Exactly one of the following applies, checked in this order:
    - the loop was cancelled: ``RetryCancelledError`` is raised, chained
      to the last error. The give-up strategy is not invoked.
    - the last attempt was retry-worthy: the give-up strategy decides.
    - the last attempt raised a non-retryable error: it is re-raised
      unchanged.
    - otherwise the last result is returned.

    Args:
        outcome: The outcome of the last attempt.
        policy: The policy providing the give-up strategy.
        callbacks: Callback manager for invoking on_give_up and
            on_success.
        start_time: Timestamp when the first attempt started.

    Returns:
        The last result, or the value returned by the give-up strategy.

    Raises:
        RetryCancelledError: If the loop was cancelled.
        Exception: The last error, or any error raised by the give-up
            strategy.
    """
    if outcome.cancelled:
        logger.debug(f"Retry loop cancelled after {outcome.attempt} attempt(s)")
        raise RetryCancelledError(outcome.attempt) from outcome.error

    if outcome.attempt_failed:
        logger.debug(f"Giving up after {outcome.attempt} attempt(s)")
        callbacks.on_give_up(outcome.attempt, outcome.result, outcome.error, start_time)
        return policy.give_up_strategy(outcome.result, outcome.error)

    if outcome.error is not None:
        logger.debug(
            f"Attempt {outcome.attempt} failed with non-retryable "
            f"{type(outcome.error).__name__}"
        )
        raise outcome.error

    callbacks.on_success(outcome.attempt, outcome.result, start_time)
    return outcome.result
