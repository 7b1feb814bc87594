r"""Wait strategies used to pause between two attempts.

This package provides various wait strategies, including constant,
exponential, linear and Fibonacci growth patterns. All the values are
expressed in milliseconds.
"""

from __future__ import annotations

__all__ = [
    "BaseWaitStrategy",
    "ConstantWait",
    "ExponentialWait",
    "FibonacciWait",
    "LinearWait",
    "NoWait",
]

from retrier.wait.base import BaseWaitStrategy
from retrier.wait.constant import ConstantWait
from retrier.wait.exponential import ExponentialWait
from retrier.wait.fibonacci import FibonacciWait
from retrier.wait.linear import LinearWait
from retrier.wait.none import NoWait
