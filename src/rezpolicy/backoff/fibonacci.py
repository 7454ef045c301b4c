r"""Backoff following the Fibonacci sequence."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

from rezpolicy.backoff.base import BaseBackoffStrategy


class FibonacciBackoff(BaseBackoffStrategy):
    """Wait ``base_delay * fib(attempt)`` seconds before retry ``attempt``.

    With fib(1) = fib(2) = 1 the waits grow slower than with
    ``ExponentialBackoff`` but faster than with ``LinearBackoff``.

    Args:
        base_delay: Multiplier applied to the Fibonacci number, in seconds
            (default: 1.0).
        max_delay: Optional upper bound on the wait, in seconds.

    Example:
        ```pycon
        >>> from rezpolicy.backoff import FibonacciBackoff
        >>> wait = FibonacciBackoff(base_delay=0.5)
        >>> [wait.calculate(attempt) for attempt in range(1, 7)]
        [0.5, 0.5, 1.0, 1.5, 2.5, 4.0]
        >>> FibonacciBackoff(base_delay=0.5, max_delay=3.0).calculate(9)
        3.0

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

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Return the ``n``-th Fibonacci number, or 0 when ``n`` is not
        positive."""
        previous, current = 0, 1
        for _ in range(n - 1):
            previous, current = current, previous + current
        return current if n > 0 else 0

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * self._fibonacci(attempt)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
