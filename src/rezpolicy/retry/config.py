r"""Configuration dataclass for retry behavior.

This module provides the retry strategy embedded in a policy and the
signatures of the functions it is assembled from.
"""

from __future__ import annotations

__all__ = ["FailureCallback", "RetryPolicy", "ShouldRetry", "WaitDuration"]

from collections.abc import Callable
from dataclasses import dataclass

ShouldRetry = Callable[[int, Exception], bool]
FailureCallback = Callable[[int, Exception], None]
WaitDuration = Callable[[int, Exception], float]


@dataclass(frozen=True)
class RetryPolicy:
    """Configuration for retry behavior.

    All three functions receive the retry attempt number (1 for the first
    retry decision) and the error raised by the most recent attempt.

    Attributes:
        should_retry: Predicate deciding whether another attempt is made.
        on_failure: Optional callback invoked before each retry, after
            ``should_retry`` returned True.
        wait_duration: Optional function returning the number of seconds
            to wait before the next attempt. ``None`` means no wait.
    """

    should_retry: ShouldRetry
    on_failure: FailureCallback | None = None
    wait_duration: WaitDuration | None = None
