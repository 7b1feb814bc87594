r"""Cancellation primitives used by the retry executors.

A ``CancellationToken`` is the explicit signal used to abandon a retry
loop from the outside. The executors check it after every attempt and
after every pause. Errors raised by the operation are also inspected:
an error that is, or was caused by, a cancellation-type error cancels
the loop.
"""

from __future__ import annotations

__all__ = [
    "CANCELLATION_ERRORS",
    "CancellationToken",
    "is_cancellation_error",
    "is_cancelled",
]

import asyncio
import concurrent.futures
import logging
import threading

from retrier.config import MAX_CAUSE_DEPTH

logger: logging.Logger = logging.getLogger(__name__)

CANCELLATION_ERRORS: tuple[type[BaseException], ...] = (
    concurrent.futures.CancelledError,
    asyncio.CancelledError,
)


class CancellationToken:
    """Thread-safe cancellation signal.

    The token starts in the non-cancelled state and can be cancelled
    exactly once. It can be shared between the thread running the retry
    loop and the threads that want to abandon it.

    Example:
        ```pycon
        >>> from retrier import CancellationToken
        >>> token = CancellationToken()
        >>> token.is_cancelled
        False
        >>> token.cancel()
        >>> token.is_cancelled
        True
        >>> token.wait(10.0)
        True

        ```
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(cancelled={self.is_cancelled})"

    @property
    def is_cancelled(self) -> bool:
        """``True`` if ``cancel`` has been called."""
        return self._event.is_set()

    def cancel(self) -> None:
        """Cancel the token and wake up any pending ``wait``."""
        if not self._event.is_set():
            logger.debug("Cancellation requested")
        self._event.set()

    def wait(self, timeout: float) -> bool:
        """Block until the token is cancelled or ``timeout`` elapses.

        Args:
            timeout: The maximum time to wait, in seconds.

        Returns:
            ``True`` if the token was cancelled, otherwise ``False``.
        """
        return self._event.wait(timeout)


def is_cancelled(token: CancellationToken | None) -> bool:
    """Return ``True`` if ``token`` is not ``None`` and cancelled."""
    return token is not None and token.is_cancelled


def is_cancellation_error(
    error: BaseException | None, max_depth: int = MAX_CAUSE_DEPTH
) -> bool:
    """Indicate if an error is, or was caused by, a cancellation.

    Only the explicit cause chain (``raise ... from ...``) is followed
    through ``__cause__``. The implicit ``__context__`` of an error raised
    while handling a cancellation is ignored, so an error raised with
    ``from None`` or unrelated to the handled one does not cancel the
    loop. The walk stops after ``max_depth`` links or when a link is
    visited twice.

    Args:
        error: The error to inspect. ``None`` is never a cancellation.
        max_depth: The maximum number of links to follow.

    Returns:
        ``True`` if a cancellation-type error was found in the chain.

    Example:
        ```pycon
        >>> from concurrent.futures import CancelledError
        >>> from retrier.cancellation import is_cancellation_error
        >>> is_cancellation_error(ValueError("boom"))
        False
        >>> try:
        ...     try:
        ...         raise CancelledError()
        ...     except CancelledError as exc:
        ...         raise RuntimeError("wrapped") from exc
        ... except RuntimeError as exc:
        ...     is_cancellation_error(exc)
        ...
        True

        ```
    """
    seen: set[int] = set()
    current = error
    depth = 0
    while current is not None and depth <= max_depth and id(current) not in seen:
        if isinstance(current, CANCELLATION_ERRORS):
            return True
        seen.add(id(current))
        current = current.__cause__
        depth += 1
    return False
