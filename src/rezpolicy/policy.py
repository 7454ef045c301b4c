r"""Fluent construction of retry policies.

A ``Policy`` holds at most one retry strategy. Each configuration method
returns a new ``Policy`` whose retry strategy is fully replaced, so a base
policy can be configured differently along several branches:

```pycon
>>> from rezpolicy import Policy
>>> base = Policy()
>>> quick = base.retry_x_times(2)
>>> patient = base.wait_retry_x_times(10, 0.5)
>>> base.retry is None
True
>>> quick.retry is patient.retry
False

```

Configuration methods combine three independent axes:

- stop condition: a retry count (``*_x_times``) or a caller-supplied
  predicate (``*_on_callback``),
- delay: none, a fixed number of seconds (``wait_*``) or a function of the
  attempt number and error (``complex_wait_*``),
- an optional failure callback (``*_with_failure_callback``).

Inputs are not validated. A negative retry count simply yields zero
retries.
"""

from __future__ import annotations

__all__ = ["Policy", "new_policy"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from rezpolicy.retry.config import RetryPolicy

if TYPE_CHECKING:
    from rezpolicy.retry.config import FailureCallback, ShouldRetry, WaitDuration


def _retry_count_predicate(retry_count: int) -> ShouldRetry:
    def should_retry(attempt: int, error: Exception) -> bool:  # noqa: ARG001
        return attempt <= retry_count

    return should_retry


def _fixed_wait(wait: float) -> WaitDuration:
    def wait_duration(attempt: int, error: Exception) -> float:  # noqa: ARG001
        return wait

    return wait_duration


@dataclass(frozen=True)
class Policy:
    """Immutable description of how a failing operation is retried.

    Attributes:
        retry: The active retry strategy, or ``None`` to never retry.

    Warning:
        Predicate-based policies are not capped. A predicate that always
        returns True combined with an operation that always fails makes
        ``execute`` loop forever.
    """

    retry: RetryPolicy | None = None

    def _with_retry(
        self,
        should_retry: ShouldRetry,
        wait_duration: WaitDuration | None = None,
        on_failure: FailureCallback | None = None,
    ) -> Policy:
        return replace(
            self,
            retry=RetryPolicy(
                should_retry=should_retry,
                on_failure=on_failure,
                wait_duration=wait_duration,
            ),
        )

    def retry_x_times(self, retry_count: int) -> Policy:
        """Retry a failing operation up to ``retry_count`` times.

        Args:
            retry_count: Maximum number of retries after the initial
                attempt.

        Returns:
            A new policy with the retry strategy replaced.

        Example:
            ```pycon
            >>> from rezpolicy import Policy, build_executor
            >>> executor = build_executor(Policy().retry_x_times(3))
            >>> executor.execute(lambda: 42)
            42

            ```
        """
        return self._with_retry(_retry_count_predicate(retry_count))

    def retry_x_times_with_failure_callback(
        self, retry_count: int, on_failure: FailureCallback
    ) -> Policy:
        """Retry up to ``retry_count`` times, calling ``on_failure`` before
        each retry.

        Args:
            retry_count: Maximum number of retries after the initial
                attempt.
            on_failure: Callback invoked with the attempt number and the
                error before each retry.

        Returns:
            A new policy with the retry strategy replaced.
        """
        return self._with_retry(_retry_count_predicate(retry_count), on_failure=on_failure)

    def retry_on_callback(self, should_retry: ShouldRetry) -> Policy:
        """Retry as long as ``should_retry`` returns True.

        Args:
            should_retry: Predicate receiving the attempt number and the
                error of the failed attempt.

        Returns:
            A new policy with the retry strategy replaced.
        """
        return self._with_retry(should_retry)

    def retry_on_callback_with_failure_callback(
        self, should_retry: ShouldRetry, on_failure: FailureCallback
    ) -> Policy:
        """Retry as long as ``should_retry`` returns True, calling
        ``on_failure`` before each retry.

        Args:
            should_retry: Predicate receiving the attempt number and the
                error of the failed attempt.
            on_failure: Callback invoked with the attempt number and the
                error before each retry.

        Returns:
            A new policy with the retry strategy replaced.
        """
        return self._with_retry(should_retry, on_failure=on_failure)

    def wait_retry_x_times(self, retry_count: int, wait: float) -> Policy:
        """Retry up to ``retry_count`` times, waiting ``wait`` seconds
        before each retry.

        Args:
            retry_count: Maximum number of retries after the initial
                attempt.
            wait: Seconds to wait before each retry.

        Returns:
            A new policy with the retry strategy replaced.
        """
        return self._with_retry(_retry_count_predicate(retry_count), _fixed_wait(wait))

    def wait_retry_x_times_with_failure_callback(
        self, retry_count: int, wait: float, on_failure: FailureCallback
    ) -> Policy:
        """Retry up to ``retry_count`` times with a fixed wait, calling
        ``on_failure`` before each retry.

        Args:
            retry_count: Maximum number of retries after the initial
                attempt.
            wait: Seconds to wait before each retry.
            on_failure: Callback invoked with the attempt number and the
                error before each retry.

        Returns:
            A new policy with the retry strategy replaced.
        """
        return self._with_retry(
            _retry_count_predicate(retry_count), _fixed_wait(wait), on_failure
        )

    def wait_retry_on_callback(self, wait: float, should_retry: ShouldRetry) -> Policy:
        """Retry as long as ``should_retry`` returns True, waiting ``wait``
        seconds before each retry.

        Args:
            wait: Seconds to wait before each retry.
            should_retry: Predicate receiving the attempt number and the
                error of the failed attempt.

        Returns:
            A new policy with the retry strategy replaced.
        """
        return self._with_retry(should_retry, _fixed_wait(wait))

    def wait_retry_on_callback_with_failure_callback(
        self, wait: float, should_retry: ShouldRetry, on_failure: FailureCallback
    ) -> Policy:
        """Retry as long as ``should_retry`` returns True with a fixed wait,
        calling ``on_failure`` before each retry.

        Args:
            wait: Seconds to wait before each retry.
            should_retry: Predicate receiving the attempt number and the
                error of the failed attempt.
            on_failure: Callback invoked with the attempt number and the
                error before each retry.

        Returns:
            A new policy with the retry strategy replaced.
        """
        return self._with_retry(should_retry, _fixed_wait(wait), on_failure)

    def complex_wait_retry_x_times(
        self, retry_count: int, wait_callback: WaitDuration
    ) -> Policy:
        """Retry up to ``retry_count`` times, waiting the number of seconds
        returned by ``wait_callback`` before each retry.

        Args:
            retry_count: Maximum number of retries after the initial
                attempt.
            wait_callback: Function of the attempt number and the error
                returning the wait in seconds. Backoff strategies from
                ``rezpolicy.backoff`` follow this signature.

        Returns:
            A new policy with the retry strategy replaced.

        Example:
            ```pycon
            >>> from rezpolicy import Policy
            >>> from rezpolicy.backoff import ExponentialBackoff
            >>> policy = Policy().complex_wait_retry_x_times(
            ...     5, ExponentialBackoff(base_delay=0.1, max_delay=2.0)
            ... )
            >>> policy.retry.wait_duration(3, RuntimeError())
            0.4

            ```
        """
        return self._with_retry(_retry_count_predicate(retry_count), wait_callback)

    def complex_wait_retry_x_times_with_failure_callback(
        self,
        retry_count: int,
        wait_callback: WaitDuration,
        on_failure: FailureCallback,
    ) -> Policy:
        """Retry up to ``retry_count`` times with a computed wait, calling
        ``on_failure`` before each retry.

        Args:
            retry_count: Maximum number of retries after the initial
                attempt.
            wait_callback: Function of the attempt number and the error
                returning the wait in seconds.
            on_failure: Callback invoked with the attempt number and the
                error before each retry.

        Returns:
            A new policy with the retry strategy replaced.
        """
        return self._with_retry(_retry_count_predicate(retry_count), wait_callback, on_failure)

    def complex_wait_retry_on_callback(
        self, wait_callback: WaitDuration, should_retry: ShouldRetry
    ) -> Policy:
        """Retry as long as ``should_retry`` returns True, waiting the number
        of seconds returned by ``wait_callback`` before each retry.

        Args:
            wait_callback: Function of the attempt number and the error
                returning the wait in seconds.
            should_retry: Predicate receiving the attempt number and the
                error of the failed attempt.

        Returns:
            A new policy with the retry strategy replaced.
        """
        return self._with_retry(should_retry, wait_callback)

    def complex_wait_retry_on_callback_with_failure_callback(
        self,
        wait_callback: WaitDuration,
        should_retry: ShouldRetry,
        on_failure: FailureCallback,
    ) -> Policy:
        """Retry as long as ``should_retry`` returns True with a computed
        wait, calling ``on_failure`` before each retry.

        Args:
            wait_callback: Function of the attempt number and the error
                returning the wait in seconds.
            should_retry: Predicate receiving the attempt number and the
                error of the failed attempt.
            on_failure: Callback invoked with the attempt number and the
                error before each retry.

        Returns:
            A new policy with the retry strategy replaced.
        """
        return self._with_retry(should_retry, wait_callback, on_failure)


def new_policy() -> Policy:
    """Create an empty policy that never retries.

    Returns:
        A policy without a retry strategy.
    """
    return Policy()
