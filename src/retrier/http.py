r"""Retry strategies for operations performing HTTP requests with
httpx.

An HTTP response carrying a server error status code is a successful
return value from the point of view of the operation, so it is flagged
with a result retry strategy. Network-level failures are raised as
exceptions and flagged with a failed retry strategy.

Example:
    ```pycon
    >>> import httpx
    >>> from retrier import Retrier, RetryPolicy
    >>> from retrier.http import retry_on_status, retry_on_transport_error
    >>> from retrier.stop import stop_after
    >>> from retrier.wait import ExponentialWait
    >>> retrier = Retrier(
    ...     RetryPolicy(
    ...         stop_strategy=stop_after(5),
    ...         wait_strategy=ExponentialWait(start_millis=50),
    ...         result_retry_strategy=retry_on_status(),
    ...         failed_retry_strategy=retry_on_transport_error,
    ...     )
    ... )
    >>> response = retrier.execute(
    ...     lambda: httpx.get("https://api.example.com/data")
    ... )  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["retry_on_status", "retry_on_transport_error"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from retrier.config import RETRY_STATUS_CODES

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


def retry_on_status(*status_codes: int) -> Callable[[Any], bool]:
    """Retry when the operation returns an ``httpx.Response`` with one
    of the given status codes.

    Results that are not ``httpx.Response`` objects are never retried.

    Args:
        *status_codes: The retryable status codes. Defaults to
            ``RETRY_STATUS_CODES`` when empty.

    Returns:
        A result retry strategy.

    Example:
        ```pycon
        >>> import httpx
        >>> from retrier.http import retry_on_status
        >>> retryable = retry_on_status(503)
        >>> retryable(httpx.Response(503))
        True
        >>> retryable(httpx.Response(200))
        False

        ```
    """
    codes = frozenset(status_codes or RETRY_STATUS_CODES)
    for code in codes:
        if not 100 <= code <= 599:
            msg = f"status codes must be between 100 and 599, got {code}"
            raise ValueError(msg)

    def predicate(result: Any) -> bool:
        if not isinstance(result, httpx.Response):
            return False
        if result.status_code in codes:
            logger.debug(f"Response with status {result.status_code} is retry-worthy")
            return True
        return False

    return predicate


def retry_on_transport_error(error: Exception) -> bool:
    """Retry on httpx timeouts and transport errors.

    ``httpx.HTTPStatusError`` raised by ``raise_for_status`` is not a
    transport error and is not retried; combine this strategy with
    ``retrier.predicates.retry_on`` to retry it too.

    Example:
        ```pycon
        >>> import httpx
        >>> from retrier.http import retry_on_transport_error
        >>> retry_on_transport_error(httpx.ConnectError("refused"))
        True
        >>> retry_on_transport_error(ValueError("boom"))
        False

        ```
    """
    return isinstance(error, (httpx.TimeoutException, httpx.TransportError))
