r"""Unit tests for default configuration values."""

from __future__ import annotations

from retrier.config import (
    DEFAULT_BACKOFF_BASE,
    DEFAULT_MAX_WAIT_MILLIS,
    DEFAULT_START_WAIT_MILLIS,
    MAX_CAUSE_DEPTH,
    RETRY_STATUS_CODES,
    TOKEN_POLL_INTERVAL,
)
from retrier.wait import ExponentialWait


def test_default_values() -> None:
    assert DEFAULT_START_WAIT_MILLIS == 1
    assert DEFAULT_BACKOFF_BASE == 2.0
    assert DEFAULT_MAX_WAIT_MILLIS == 1000
    assert MAX_CAUSE_DEPTH > 0
    assert 0 < TOKEN_POLL_INTERVAL <= 0.1


def test_retry_status_codes() -> None:
    assert RETRY_STATUS_CODES == (429, 500, 502, 503, 504)


def test_exponential_wait_uses_defaults() -> None:
    wait = ExponentialWait()
    assert wait.start_millis == DEFAULT_START_WAIT_MILLIS
    assert wait.base == DEFAULT_BACKOFF_BASE
    assert wait.max_millis == DEFAULT_MAX_WAIT_MILLIS
