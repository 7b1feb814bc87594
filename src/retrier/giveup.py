r"""Give-up strategies resolving the outcome of an exhausted retry loop.

A give-up strategy is called once, with the last result and the last
error, when no more attempts are allowed and the last attempt was still
retry-worthy. Whatever it returns becomes the result of ``execute``; any
exception it raises propagates to the caller.
"""

from __future__ import annotations

__all__ = ["raise_exhausted", "reraise_or_return_last", "return_default"]

import logging
from typing import TYPE_CHECKING, Any

from retrier.exceptions import RetryExhaustedError

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


def reraise_or_return_last(last_result: Any, last_error: Exception | None) -> Any:
    """Re-raise the last error unchanged, or return the last result.

    This is the default give-up strategy of ``RetryPolicy``.

    Example:
        ```pycon
        >>> from retrier.giveup import reraise_or_return_last
        >>> reraise_or_return_last(0, None)
        0
        >>> reraise_or_return_last(None, ValueError("boom"))  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: boom

        ```
    """
    if last_error is not None:
        raise last_error
    return last_result


def return_default(default: Any) -> Callable[[Any, Exception | None], Any]:
    """Return a fixed value instead of the last result or error.

    Example:
        ```pycon
        >>> from retrier.giveup import return_default
        >>> give_up = return_default("n/a")
        >>> give_up(None, ValueError("boom"))
        'n/a'

        ```
    """

    def give_up(last_result: Any, last_error: Exception | None) -> Any:
        logger.debug(
            f"Giving up with default value {default!r} "
            f"(last_result={last_result!r}, last_error={last_error!r})"
        )
        return default

    return give_up


def raise_exhausted(last_result: Any, last_error: Exception | None) -> Any:
    """Raise ``RetryExhaustedError`` chained to the last error.

    Example:
        ```pycon
        >>> from retrier.giveup import raise_exhausted
        >>> raise_exhausted(0, None)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        retrier.exceptions.RetryExhaustedError: no more attempts allowed (last result: 0)

        ```
    """
    if last_error is not None:
        msg = f"no more attempts allowed (last error: {last_error!r})"
        raise RetryExhaustedError(msg) from last_error
    msg = f"no more attempts allowed (last result: {last_result!r})"
    raise RetryExhaustedError(msg, last_result=last_result)
