r"""Exceptions raised by the retrier package."""

from __future__ import annotations

__all__ = ["RetrierError", "RetryCancelledError", "RetryExhaustedError"]

from concurrent.futures import CancelledError
from typing import Any


class RetrierError(Exception):
    """Base class of all the errors raised by retrier."""


class RetryExhaustedError(RetrierError):
    """Raised when all the attempts are exhausted and the give-up
    strategy elects to signal it with a dedicated error.

    The last error, if any, is available as ``__cause__``.

    Args:
        message: The error message.
        last_result: The result returned by the last attempt, or
            ``None`` if the last attempt raised an error.

    Example:
        ```pycon
        >>> from retrier.exceptions import RetryExhaustedError
        >>> error = RetryExhaustedError("no more attempts", last_result=0)
        >>> error.last_result
        0

        ```
    """

    def __init__(self, message: str, last_result: Any = None) -> None:
        super().__init__(message)
        self.last_result = last_result


class RetryCancelledError(RetrierError, CancelledError):
    """Raised when the retry loop was abandoned because of a
    cancellation.

    The error subclasses ``concurrent.futures.CancelledError`` so that a
    retrier wrapping another retrier recognizes it as a cancellation too.
    The error that was observed when the cancellation happened, if any,
    is available as ``__cause__``.

    Args:
        attempts: The number of attempts performed before the
            cancellation.

    Example:
        ```pycon
        >>> from retrier.exceptions import RetryCancelledError
        >>> error = RetryCancelledError(attempts=3)
        >>> error.attempts
        3
        >>> str(error)
        'retry cancelled after 3 attempt(s)'

        ```
    """

    def __init__(self, attempts: int) -> None:
        super().__init__(f"retry cancelled after {attempts} attempt(s)")
        self.attempts = attempts
