r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
asynchronous policy executors. They evaluate the retry decision and run
the hooks configured between two attempts.
"""

from __future__ import annotations

__all__ = ["prepare_next_attempt", "should_retry"]

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rezpolicy.retry.config import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


def should_retry(retry: RetryPolicy, attempt: int, error: Exception) -> bool:
    """Evaluate the retry predicate for a failed attempt.

    Args:
        retry: The active retry strategy.
        attempt: The retry attempt number (1-indexed).
        error: The error raised by the most recent attempt.

    Returns:
        ``True`` if the operation should be attempted again.
    """
    if retry.should_retry(attempt, error):
        logger.debug(f"Operation failed with {type(error).__name__}: will retry (attempt {attempt})")
        return True
    logger.debug(
        f"Operation failed with {type(error).__name__} after {attempt} attempts: giving up"
    )
    return False


def prepare_next_attempt(retry: RetryPolicy, attempt: int, error: Exception) -> float | None:
    """Invoke the failure callback and compute the wait before the next
    attempt.

    The failure callback and the wait function are invoked inline.
    Anything they raise propagates to the caller and aborts the retry
    loop.

    Args:
        retry: The active retry strategy.
        attempt: The retry attempt number (1-indexed).
        error: The error raised by the most recent attempt.

    Returns:
        The number of seconds to wait, or ``None`` if the strategy has
        no wait configured. Negative waits are clamped to zero.
    """
    if retry.on_failure is not None:
        retry.on_failure(attempt, error)

    if retry.wait_duration is None:
        return None
    wait = max(retry.wait_duration(attempt, error), 0.0)
    logger.debug(f"Waiting {wait:.2f}s before retry {attempt}")
    return wait
