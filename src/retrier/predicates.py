r"""Predicates deciding whether a result or an error is retry-worthy.

A result retry strategy receives the value returned by the operation and
returns ``True`` when the operation should be attempted again. A failed
retry strategy receives the exception raised by the operation and
returns ``True`` when the failure is retryable.

The combinators ``any_of``, ``all_of`` and ``negate`` work with both
kinds of predicates.
"""

from __future__ import annotations

__all__ = [
    "all_of",
    "any_of",
    "negate",
    "never_retry_result",
    "retry_if_result",
    "retry_on",
    "retry_on_any_error",
    "retry_on_result",
]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


def never_retry_result(result: Any) -> bool:  # noqa: ARG001
    """Result retry strategy that accepts every result.

    This is the default result retry strategy of ``RetryPolicy``.
    """
    return False


def retry_on_any_error(error: Exception) -> bool:  # noqa: ARG001
    """Failed retry strategy that retries on every error.

    This is the default failed retry strategy of ``RetryPolicy``.
    """
    return True


def retry_on(*error_types: type[BaseException]) -> Callable[[Exception], bool]:
    """Retry only if the error is an instance of one of the given types.

    Args:
        *error_types: The retryable exception classes. Subclasses match
            too.

    Returns:
        A failed retry strategy.

    Raises:
        ValueError: If no exception class is given.
        TypeError: If one of the arguments is not an exception class.

    Example:
        ```pycon
        >>> from retrier.predicates import retry_on
        >>> retryable = retry_on(ConnectionError, TimeoutError)
        >>> retryable(ConnectionResetError())
        True
        >>> retryable(ValueError())
        False

        ```
    """
    if not error_types:
        msg = "retry_on requires at least one exception class"
        raise ValueError(msg)
    for error_type in error_types:
        if not (isinstance(error_type, type) and issubclass(error_type, BaseException)):
            msg = f"retry_on expects exception classes, got {error_type!r}"
            raise TypeError(msg)

    def predicate(error: Exception) -> bool:
        return isinstance(error, error_types)

    return predicate


def retry_on_result(*values: Any) -> Callable[[Any], bool]:
    """Retry when the result is equal to one of the given values.

    Example:
        ```pycon
        >>> from retrier.predicates import retry_on_result
        >>> retryable = retry_on_result(None, 0)
        >>> retryable(0)
        True
        >>> retryable(1)
        False

        ```
    """
    if not values:
        msg = "retry_on_result requires at least one value"
        raise ValueError(msg)

    def predicate(result: Any) -> bool:
        return any(result == value for value in values)

    return predicate


def retry_if_result(predicate: Callable[[Any], Any]) -> Callable[[Any], bool]:
    """Turn a plain predicate over the result into a result retry
    strategy.

    The predicate return value is converted with ``bool``.

    Example:
        ```pycon
        >>> from retrier.predicates import retry_if_result
        >>> retryable = retry_if_result(lambda result: not result)
        >>> retryable([])
        True
        >>> retryable([1])
        False

        ```
    """
    if not callable(predicate):
        msg = f"predicate must be callable, got {predicate!r}"
        raise TypeError(msg)

    def wrapper(result: Any) -> bool:
        return bool(predicate(result))

    return wrapper


def any_of(*predicates: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Combine predicates with a logical OR.

    Example:
        ```pycon
        >>> from retrier.predicates import any_of, retry_on
        >>> retryable = any_of(retry_on(ConnectionError), lambda e: "retry" in str(e))
        >>> retryable(ValueError("please retry"))
        True
        >>> retryable(ValueError("fatal"))
        False

        ```
    """
    _check_callables(predicates)

    def predicate(value: Any) -> bool:
        return any(pred(value) for pred in predicates)

    return predicate


def all_of(*predicates: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Combine predicates with a logical AND.

    Example:
        ```pycon
        >>> from retrier.predicates import all_of
        >>> retryable = all_of(lambda r: r is not None, lambda r: r < 0)
        >>> retryable(-1)
        True
        >>> retryable(None)
        False

        ```
    """
    _check_callables(predicates)

    def predicate(value: Any) -> bool:
        return all(pred(value) for pred in predicates)

    return predicate


def negate(predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Invert a predicate.

    Example:
        ```pycon
        >>> from retrier.predicates import negate, retry_on
        >>> retryable = negate(retry_on(KeyError))
        >>> retryable(KeyError())
        False
        >>> retryable(OSError())
        True

        ```
    """
    _check_callables((predicate,))

    def negated(value: Any) -> bool:
        return not predicate(value)

    return negated


def _check_callables(predicates: tuple[Any, ...]) -> None:
    if not predicates:
        msg = "at least one predicate is required"
        raise ValueError(msg)
    for predicate in predicates:
        if not callable(predicate):
            msg = f"predicate must be callable, got {predicate!r}"
            raise TypeError(msg)
