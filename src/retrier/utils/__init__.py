r"""Utility functions shared by the retry executors."""

from __future__ import annotations

__all__ = ["validate_strategy", "validate_wait_millis"]

from retrier.utils.validation import validate_strategy, validate_wait_millis
