r"""Outcome of a single attempt."""

from __future__ import annotations

__all__ = ["AttemptOutcome"]

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AttemptOutcome:
    """Classified outcome of one attempt.

    Exactly one of ``result`` and ``error`` is meaningful: ``error`` is
    ``None`` when the operation returned, and ``result`` is ``None`` when
    it raised.

    Attributes:
        attempt: The attempt number (1-indexed).
        result: The value returned by the operation.
        error: The exception raised by the operation.
        attempt_failed: ``True`` if the result or the error is
            retry-worthy.
        cancelled: ``True`` if a cancellation was observed after the
            attempt.
    """

    attempt: int
    result: Any = None
    error: Exception | None = None
    attempt_failed: bool = False
    cancelled: bool = False
