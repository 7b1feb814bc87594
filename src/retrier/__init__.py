r"""retrier - Configurable retry executor.

This package invokes an operation repeatedly, according to pluggable
strategies, until it succeeds, is abandoned, or is cancelled.

Key Features:
    - Four independent strategies: stop, wait, result-based retry and
      failure-based retry, plus a give-up strategy
    - Immutable policies that can be shared across threads and tasks
    - Constant, exponential, linear and Fibonacci wait strategies
    - Explicit cancellation with ``CancellationToken``
    - Synchronous and asyncio executors
    - Callback system for observability (logging, metrics, alerting)

Example:
    ```pycon
    >>> from retrier import Retrier, RetryPolicy
    >>> from retrier.predicates import retry_on
    >>> from retrier.stop import stop_after
    >>> from retrier.wait import ExponentialWait
    >>> retrier = Retrier(
    ...     RetryPolicy(
    ...         stop_strategy=stop_after(5),
    ...         wait_strategy=ExponentialWait(start_millis=10, base=2.0),
    ...         failed_retry_strategy=retry_on(ConnectionError),
    ...     )
    ... )
    >>> retrier.execute(lambda: "done")
    'done'

    ```
"""

from __future__ import annotations

__all__ = [
    "SINGLE_ATTEMPT",
    "AsyncRetrier",
    "CallbackConfig",
    "CancellationToken",
    "Retrier",
    "RetrierError",
    "RetryCancelledError",
    "RetryExhaustedError",
    "RetryPolicy",
    "RetryPolicyBuilder",
    "__version__",
    "single_attempt",
]

from importlib.metadata import PackageNotFoundError, version

from retrier.callbacks import CallbackConfig
from retrier.cancellation import CancellationToken
from retrier.exceptions import RetrierError, RetryCancelledError, RetryExhaustedError
from retrier.retry import (
    SINGLE_ATTEMPT,
    AsyncRetrier,
    Retrier,
    RetryPolicy,
    RetryPolicyBuilder,
    single_attempt,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
