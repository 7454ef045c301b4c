r"""Backoff doubling the wait after every retry."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from rezpolicy.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Wait ``base_delay * 2 ** (attempt - 1)`` seconds before retry
    ``attempt``.

    The first retry waits ``base_delay``. Each later retry waits twice as
    long as the one before, up to ``max_delay`` when it is set.

    Args:
        base_delay: Wait before the first retry, in seconds (default: 0.3).
        max_delay: Optional upper bound on the wait, in seconds.

    Example:
        ```pycon
        >>> from rezpolicy.backoff import ExponentialBackoff
        >>> wait = ExponentialBackoff(base_delay=0.25)
        >>> [wait.calculate(attempt) for attempt in (1, 2, 3, 4)]
        [0.25, 0.5, 1.0, 2.0]
        >>> ExponentialBackoff(base_delay=0.25, max_delay=3.0).calculate(8)
        3.0

        ```
    """

    def __init__(self, base_delay: float = 0.3, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def calculate(self, attempt: int) -> float:
        # attempts below 1 wait like the first retry
        delay = self.base_delay * (2 ** max(attempt - 1, 0))
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
