r"""Unit tests for the shared outcome resolution."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from retrier.callbacks import CallbackConfig
from retrier.exceptions import RetryCancelledError
from retrier.retry import AttemptOutcome, CallbackManager, RetryPolicy
from retrier.retry.executor_core import resolve_outcome


@pytest.fixture
def callbacks() -> CallbackManager:
    return CallbackManager(CallbackConfig())


def test_resolve_outcome_success(callbacks: CallbackManager) -> None:
    outcome = AttemptOutcome(attempt=1, result="value")
    assert resolve_outcome(outcome, RetryPolicy(), callbacks, 0.0) == "value"


def test_resolve_outcome_non_retryable_error(callbacks: CallbackManager) -> None:
    error = ValueError("boom")
    outcome = AttemptOutcome(attempt=1, error=error)

    with pytest.raises(ValueError, match=r"boom") as exc_info:
        resolve_outcome(outcome, RetryPolicy(), callbacks, 0.0)

    assert exc_info.value is error


def test_resolve_outcome_exhausted_calls_give_up(callbacks: CallbackManager) -> None:
    give_up = Mock(return_value="fallback")
    outcome = AttemptOutcome(attempt=3, result=0, attempt_failed=True)

    assert resolve_outcome(outcome, RetryPolicy(give_up_strategy=give_up), callbacks, 0.0) == (
        "fallback"
    )
    give_up.assert_called_once_with(0, None)


def test_resolve_outcome_cancelled(callbacks: CallbackManager) -> None:
    give_up = Mock()
    error = ConnectionError()
    outcome = AttemptOutcome(attempt=2, error=error, attempt_failed=True, cancelled=True)

    with pytest.raises(RetryCancelledError) as exc_info:
        resolve_outcome(outcome, RetryPolicy(give_up_strategy=give_up), callbacks, 0.0)

    assert exc_info.value.attempts == 2
    assert exc_info.value.__cause__ is error
    give_up.assert_not_called()


def test_resolve_outcome_cancelled_takes_precedence_over_success(
    callbacks: CallbackManager,
) -> None:
    outcome = AttemptOutcome(attempt=1, result="value", cancelled=True)
    with pytest.raises(RetryCancelledError):
        resolve_outcome(outcome, RetryPolicy(), callbacks, 0.0)
