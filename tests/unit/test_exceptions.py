r"""Unit tests for the retrier exceptions."""

from __future__ import annotations

from concurrent.futures import CancelledError

from retrier.exceptions import RetrierError, RetryCancelledError, RetryExhaustedError


def test_retry_cancelled_error_attempts() -> None:
    error = RetryCancelledError(attempts=4)
    assert error.attempts == 4
    assert str(error) == "retry cancelled after 4 attempt(s)"


def test_retry_cancelled_error_is_cancellation() -> None:
    """Test that RetryCancelledError is recognized as a cancellation."""
    error = RetryCancelledError(attempts=1)
    assert isinstance(error, CancelledError)
    assert isinstance(error, RetrierError)


def test_retry_exhausted_error() -> None:
    error = RetryExhaustedError("no more attempts", last_result=0)
    assert isinstance(error, RetrierError)
    assert error.last_result == 0
    assert str(error) == "no more attempts"


def test_retry_exhausted_error_default_last_result() -> None:
    assert RetryExhaustedError("no more attempts").last_result is None
