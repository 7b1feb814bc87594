r"""Immutable retry policy and its builder.

A ``RetryPolicy`` bundles the four decision strategies and the give-up
strategy used by the retry executors. It is validated once, when it is
created, and never changes afterwards, so a single policy can be shared
by any number of executors, threads and tasks.
"""

from __future__ import annotations

__all__ = ["SINGLE_ATTEMPT", "RetryPolicy", "RetryPolicyBuilder"]

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from retrier.giveup import reraise_or_return_last
from retrier.predicates import never_retry_result, retry_on_any_error
from retrier.stop import never_stop, stop_after
from retrier.utils.validation import validate_strategy
from retrier.wait import NoWait

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class RetryPolicy:
    """Strategies driving a retry loop.

    By default, the operation is retried on any error, for an unlimited
    number of attempts, without pausing between attempts. Results are
    never retried, and the last error is re-raised when the loop gives
    up.

    Args:
        stop_strategy: Receives the number of attempts performed so far
            and returns ``True`` to stop retrying.
        wait_strategy: Receives the number of attempts performed so far
            and returns the pause in milliseconds before the next
            attempt. Values <= 0 mean no pause.
        result_retry_strategy: Receives the result of an attempt and
            returns ``True`` if the operation should be attempted again.
        failed_retry_strategy: Receives the exception raised by an
            attempt and returns ``True`` if it is retryable.
        give_up_strategy: Receives the last result and the last error
            when attempts are exhausted and returns the final result, or
            raises.

    Raises:
        TypeError: If one of the strategies is not callable.

    Example:
        ```pycon
        >>> from retrier import RetryPolicy
        >>> from retrier.stop import stop_after
        >>> from retrier.wait import ConstantWait
        >>> policy = RetryPolicy(stop_strategy=stop_after(3), wait_strategy=ConstantWait(10))
        >>> policy.stop_strategy(3)
        True
        >>> policy.wait_strategy(1)
        10
        >>> policy.merge(wait_strategy=ConstantWait(20)).wait_strategy(1)
        20

        ```
    """

    stop_strategy: Callable[[int], bool] = never_stop
    wait_strategy: Callable[[int], float] = NoWait()
    result_retry_strategy: Callable[[Any], bool] = never_retry_result
    failed_retry_strategy: Callable[[Exception], bool] = retry_on_any_error
    give_up_strategy: Callable[[Any, Exception | None], Any] = reraise_or_return_last

    def __post_init__(self) -> None:
        """Validate the strategies after initialization.

        Raises:
            TypeError: If one of the strategies is not callable.
        """
        for field in fields(self):
            validate_strategy(field.name, getattr(self, field.name))

    def merge(self, **overrides: Any) -> RetryPolicy:
        """Create a new policy with some strategies replaced.

        Args:
            **overrides: The strategies to replace.

        Returns:
            A new, validated policy. This policy is unchanged.
        """
        return replace(self, **overrides)


class RetryPolicyBuilder:
    """Step-by-step assembly of a ``RetryPolicy``.

    Every ``with_*`` method validates its argument immediately and
    returns the builder. ``build`` returns a frozen policy; the builder
    can keep being used afterwards without affecting policies that were
    already built.

    Example:
        ```pycon
        >>> from retrier import RetryPolicyBuilder
        >>> from retrier.predicates import retry_on
        >>> from retrier.stop import stop_after
        >>> from retrier.wait import ExponentialWait
        >>> policy = (
        ...     RetryPolicyBuilder()
        ...     .with_stop_strategy(stop_after(5))
        ...     .with_wait_strategy(ExponentialWait(start_millis=10))
        ...     .with_failed_retry_strategy(retry_on(ConnectionError))
        ...     .build()
        ... )
        >>> policy.stop_strategy(5)
        True

        ```
    """

    def __init__(self) -> None:
        self._strategies: dict[str, Callable[..., Any]] = {}

    def with_stop_strategy(self, stop_strategy: Callable[[int], bool]) -> RetryPolicyBuilder:
        return self._set("stop_strategy", stop_strategy)

    def with_wait_strategy(self, wait_strategy: Callable[[int], float]) -> RetryPolicyBuilder:
        return self._set("wait_strategy", wait_strategy)

    def with_result_retry_strategy(
        self, result_retry_strategy: Callable[[Any], bool]
    ) -> RetryPolicyBuilder:
        return self._set("result_retry_strategy", result_retry_strategy)

    def with_failed_retry_strategy(
        self, failed_retry_strategy: Callable[[Exception], bool]
    ) -> RetryPolicyBuilder:
        return self._set("failed_retry_strategy", failed_retry_strategy)

    def with_give_up_strategy(
        self, give_up_strategy: Callable[[Any, Exception | None], Any]
    ) -> RetryPolicyBuilder:
        return self._set("give_up_strategy", give_up_strategy)

    def build(self) -> RetryPolicy:
        """Freeze the configured strategies into a ``RetryPolicy``.

        Strategies that were not configured keep their default value.
        """
        return RetryPolicy(**self._strategies)

    def _set(self, name: str, strategy: Callable[..., Any]) -> RetryPolicyBuilder:
        validate_strategy(name, strategy)
        self._strategies[name] = strategy
        return self


# Executes every operation exactly once. All errors are propagated.
SINGLE_ATTEMPT: RetryPolicy = RetryPolicy(stop_strategy=stop_after(1))
