r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A strategy maps the number of the upcoming retry to the seconds to
    sleep before it.

    Instances are callable with the ``(attempt, error)`` signature used
    by the computed-wait policies, so they can be passed directly as
    ``wait_callback``:

    ```pycon
    >>> from rezpolicy import Policy
    >>> from rezpolicy.backoff import LinearBackoff
    >>> policy = Policy().complex_wait_retry_x_times(3, LinearBackoff(base_delay=0.5))

    ```
    """

    def __call__(self, attempt: int, error: Exception | None = None) -> float:  # noqa: ARG002
        """Compute the delay for the given retry attempt.

        Args:
            attempt: The retry attempt number (1-indexed).
            error: The error of the failed attempt. Ignored by the
                built-in strategies.

        Returns:
            The delay in seconds before the next attempt.
        """
        return self.calculate(attempt)

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay for a given retry attempt.

        Args:
            attempt: Number of the upcoming retry, starting at 1 for the
                retry after the first failure.

        Returns:
            The calculated delay in seconds before the next attempt.
        """
