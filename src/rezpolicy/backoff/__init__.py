r"""Backoff strategies for computed retry delays.

This package provides delay generators that plug into the computed-wait
policy methods (``complex_wait_*``), including constant, linear,
exponential and Fibonacci backoff patterns.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "LinearBackoff",
]

from rezpolicy.backoff.base import BaseBackoffStrategy
from rezpolicy.backoff.constant import ConstantBackoff
from rezpolicy.backoff.exponential import ExponentialBackoff
from rezpolicy.backoff.fibonacci import FibonacciBackoff
from rezpolicy.backoff.linear import LinearBackoff
