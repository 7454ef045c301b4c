r"""Backoff growing by a fixed step per retry."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from rezpolicy.backoff.base import BaseBackoffStrategy


class LinearBackoff(BaseBackoffStrategy):
    """Wait ``base_delay * attempt`` seconds before retry ``attempt``.

    Args:
        base_delay: Step added for every retry, in seconds (default: 1.0).
        max_delay: Optional upper bound on the wait, in seconds.

    Example:
        ```pycon
        >>> from rezpolicy.backoff import LinearBackoff
        >>> wait = LinearBackoff(base_delay=0.5)
        >>> [wait.calculate(attempt) for attempt in (1, 2, 3)]
        [0.5, 1.0, 1.5]
        >>> LinearBackoff(base_delay=0.5, max_delay=1.2).calculate(4)
        1.2

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
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
        delay = self.base_delay * attempt
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
