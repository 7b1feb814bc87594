r"""Unit tests for callback configuration and info dataclasses."""

from __future__ import annotations

import dataclasses

import pytest

from retrier.callbacks import AttemptInfo, CallbackConfig, RetryInfo


def test_callback_config_defaults() -> None:
    config = CallbackConfig()
    assert config.on_attempt is None
    assert config.on_retry is None
    assert config.on_success is None
    assert config.on_give_up is None


@pytest.mark.parametrize("name", ["on_attempt", "on_retry", "on_success", "on_give_up"])
def test_callback_config_rejects_non_callable(name: str) -> None:
    with pytest.raises(TypeError, match=rf"{name} must be callable or None"):
        CallbackConfig(**{name: "not callable"})


def test_callback_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        CallbackConfig().on_retry = print


def test_info_dataclasses_equality() -> None:
    assert AttemptInfo(attempt=1) == AttemptInfo(attempt=1)
    assert RetryInfo(attempt=2, wait_millis=10, result=0, error=None) != RetryInfo(
        attempt=2, wait_millis=20, result=0, error=None
    )
