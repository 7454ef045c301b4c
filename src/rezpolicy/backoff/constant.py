r"""Fixed-delay backoff between retries."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from rezpolicy.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Wait the same number of seconds before every retry.

    Equivalent to the fixed-wait policy methods, but usable anywhere a
    computed wait is expected.

    Args:
        delay: Seconds to wait before each retry (default: 1.0).

    Example:
        ```pycon
        >>> from rezpolicy.backoff import ConstantBackoff
        >>> wait = ConstantBackoff(delay=0.75)
        >>> [wait.calculate(attempt) for attempt in (1, 2, 20)]
        [0.75, 0.75, 0.75]
        >>> wait(4, TimeoutError())
        0.75

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
