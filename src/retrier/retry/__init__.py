r"""Retry package implementing class-based composition pattern.

Public API:
    - RetryPolicy: Immutable set of retry strategies
    - RetryPolicyBuilder: Step-by-step assembly of a RetryPolicy
    - SINGLE_ATTEMPT: Policy executing every operation exactly once
    - AttemptOutcome: Classified outcome of one attempt
    - RetryDecider: Logic for deciding whether to retry
    - CallbackManager: Manager for callback invocations
    - Retrier: Synchronous retry executor
    - AsyncRetrier: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "SINGLE_ATTEMPT",
    "AsyncRetrier",
    "AttemptOutcome",
    "CallbackManager",
    "Retrier",
    "RetryDecider",
    "RetryPolicy",
    "RetryPolicyBuilder",
    "single_attempt",
]

from retrier.retry.decider import RetryDecider
from retrier.retry.executor import Retrier, single_attempt
from retrier.retry.executor_async import AsyncRetrier
from retrier.retry.manager import CallbackManager
from retrier.retry.outcome import AttemptOutcome
from retrier.retry.policy import SINGLE_ATTEMPT, RetryPolicy, RetryPolicyBuilder
