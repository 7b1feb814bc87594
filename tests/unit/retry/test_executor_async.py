r"""Unit tests for asynchronous retry executor."""

from __future__ import annotations

import asyncio
import time
from concurrent.futures import CancelledError
from unittest.mock import AsyncMock, Mock, call

import pytest

from retrier import CallbackConfig, CancellationToken, RetryCancelledError
from retrier.predicates import retry_on, retry_on_result
from retrier.retry import AsyncRetrier, RetryPolicy
from retrier.stop import stop_after
from retrier.wait import ConstantWait, ExponentialWait


def test_async_retrier_creation() -> None:
    policy = RetryPolicy(stop_strategy=stop_after(3))
    retrier = AsyncRetrier(policy)

    assert retrier.policy is policy
    assert retrier.decider.policy is policy
    assert retrier.callbacks is not None


@pytest.mark.asyncio
async def test_async_retrier_successful_operation(mock_asleep: Mock) -> None:
    operation = AsyncMock(return_value="value")

    assert await AsyncRetrier().execute(operation) == "value"
    operation.assert_awaited_once()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retrier_accepts_plain_callable() -> None:
    operation = Mock(return_value="value")
    assert await AsyncRetrier().execute(operation) == "value"


@pytest.mark.asyncio
@pytest.mark.parametrize("max_attempts", [1, 3, 10])
async def test_async_retrier_stops_after_n_attempts(max_attempts: int, mock_asleep: Mock) -> None:
    operation = AsyncMock(side_effect=ConnectionError("unreachable"))
    retrier = AsyncRetrier(RetryPolicy(stop_strategy=stop_after(max_attempts)))

    with pytest.raises(ConnectionError, match=r"unreachable"):
        await retrier.execute(operation)

    assert operation.await_count == max_attempts


@pytest.mark.asyncio
async def test_async_retrier_retries_on_result() -> None:
    operation = AsyncMock(side_effect=[0, 0, 1])
    retrier = AsyncRetrier(
        RetryPolicy(stop_strategy=stop_after(10), result_retry_strategy=retry_on_result(0))
    )

    assert await retrier.execute(operation) == 1
    assert operation.await_count == 3


@pytest.mark.asyncio
async def test_async_retrier_non_retryable_error() -> None:
    error = ValueError("fatal")
    operation = AsyncMock(side_effect=error)
    retrier = AsyncRetrier(RetryPolicy(failed_retry_strategy=retry_on(KeyError)))

    with pytest.raises(ValueError, match=r"fatal") as exc_info:
        await retrier.execute(operation)

    assert exc_info.value is error
    operation.assert_awaited_once()


@pytest.mark.asyncio
async def test_async_retrier_waits_between_attempts(mock_asleep: Mock) -> None:
    operation = AsyncMock(side_effect=ConnectionError())
    retrier = AsyncRetrier(
        RetryPolicy(
            stop_strategy=stop_after(4), wait_strategy=ExponentialWait(start_millis=100)
        )
    )

    with pytest.raises(ConnectionError):
        await retrier.execute(operation)

    assert mock_asleep.call_args_list == [call(0.2), call(0.4), call(0.8)]


@pytest.mark.asyncio
async def test_async_retrier_give_up(mock_asleep: Mock) -> None:
    give_up = Mock(return_value="fallback")
    retrier = AsyncRetrier(RetryPolicy(stop_strategy=stop_after(2), give_up_strategy=give_up))

    assert await retrier.execute(AsyncMock(side_effect=ConnectionError())) == "fallback"
    give_up.assert_called_once()


@pytest.mark.asyncio
async def test_async_retrier_token_cancelled_during_attempt() -> None:
    token = CancellationToken()
    give_up = Mock()

    async def operation() -> None:
        token.cancel()
        raise ConnectionError("unreachable")

    with pytest.raises(RetryCancelledError) as exc_info:
        await AsyncRetrier(RetryPolicy(give_up_strategy=give_up)).execute(operation, token=token)

    assert exc_info.value.attempts == 1
    assert isinstance(exc_info.value.__cause__, ConnectionError)
    give_up.assert_not_called()


@pytest.mark.asyncio
async def test_async_retrier_token_cancelled_during_wait(mock_asleep: Mock) -> None:
    token = CancellationToken()
    mock_asleep.side_effect = lambda delay: token.cancel()
    operation = AsyncMock(side_effect=ConnectionError())

    with pytest.raises(RetryCancelledError):
        await AsyncRetrier(RetryPolicy(wait_strategy=ConstantWait(delay=10))).execute(
            operation, token=token
        )

    operation.assert_awaited_once()
    mock_asleep.assert_called_once_with(0.01)


@pytest.mark.asyncio
async def test_async_retrier_token_cancelled_during_long_wait() -> None:
    """Test that cancelling the token cuts a long pause short."""
    token = CancellationToken()
    operation = AsyncMock(side_effect=ConnectionError("unreachable"))
    give_up = Mock()
    retrier = AsyncRetrier(
        RetryPolicy(wait_strategy=ConstantWait(delay=60_000), give_up_strategy=give_up)
    )

    handle = asyncio.get_running_loop().call_later(0.05, token.cancel)
    start = time.monotonic()
    try:
        with pytest.raises(RetryCancelledError) as exc_info:
            await retrier.execute(operation, token=token)
    finally:
        handle.cancel()

    assert time.monotonic() - start < 5.0
    assert exc_info.value.attempts == 1
    operation.assert_awaited_once()
    give_up.assert_not_called()


@pytest.mark.asyncio
async def test_async_retrier_token_long_wait_sliced(mock_asleep: Mock) -> None:
    token = CancellationToken()
    operation = AsyncMock(side_effect=[ConnectionError(), "value"])

    assert (
        await AsyncRetrier(RetryPolicy(wait_strategy=ConstantWait(delay=120))).execute(
            operation, token=token
        )
        == "value"
    )
    assert mock_asleep.call_args_list == [call(0.05), call(0.05), call(pytest.approx(0.02))]


@pytest.mark.asyncio
async def test_async_retrier_cancellation_error_from_operation() -> None:
    give_up = Mock()
    error = RuntimeError("wrapped")
    error.__cause__ = CancelledError()
    operation = AsyncMock(side_effect=error)

    with pytest.raises(RetryCancelledError):
        await AsyncRetrier(RetryPolicy(give_up_strategy=give_up)).execute(operation)

    operation.assert_awaited_once()
    give_up.assert_not_called()


@pytest.mark.asyncio
async def test_async_retrier_operation_cancelled() -> None:
    """Test that asyncio.CancelledError raised by the operation is
    propagated without retrying."""
    give_up = Mock()
    operation = AsyncMock(side_effect=asyncio.CancelledError)

    with pytest.raises(asyncio.CancelledError):
        await AsyncRetrier(RetryPolicy(give_up_strategy=give_up)).execute(operation)

    operation.assert_awaited_once()
    give_up.assert_not_called()


@pytest.mark.asyncio
async def test_async_retrier_task_cancelled_during_wait() -> None:
    """Test that cancelling the calling task interrupts the pause."""
    give_up = Mock()
    operation = AsyncMock(side_effect=ConnectionError())
    retrier = AsyncRetrier(
        RetryPolicy(wait_strategy=ConstantWait(delay=60_000), give_up_strategy=give_up)
    )

    task = asyncio.create_task(retrier.execute(operation))
    await asyncio.sleep(0.01)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    operation.assert_awaited_once()
    give_up.assert_not_called()


@pytest.mark.asyncio
async def test_async_retrier_callbacks(mock_asleep: Mock) -> None:
    events = []
    callbacks = CallbackConfig(
        on_attempt=lambda info: events.append(("attempt", info.attempt)),
        on_retry=lambda info: events.append(("retry", info.attempt)),
        on_success=lambda info: events.append(("success", info.attempt)),
    )
    retrier = AsyncRetrier(callbacks=callbacks)

    assert await retrier.execute(AsyncMock(side_effect=[ConnectionError(), "value"])) == "value"
    assert events == [("attempt", 1), ("retry", 2), ("attempt", 2), ("success", 2)]
