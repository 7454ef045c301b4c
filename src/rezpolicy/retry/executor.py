r"""Synchronous policy executor.

This module provides the PolicyExecutor class that runs a fallible
operation and retries it according to a ``Policy``.
"""

from __future__ import annotations

__all__ = ["BasePolicyExecutor", "PolicyExecutor", "build_executor"]

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from rezpolicy.retry.executor_core import prepare_next_attempt, should_retry

if TYPE_CHECKING:
    from collections.abc import Callable

    from rezpolicy.policy import Policy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class BasePolicyExecutor(ABC, Generic[T]):
    """Abstract base class for policy executors.

    An executor exposes a single operation, ``execute``, that runs a
    zero-argument operation under the executor's policy.
    """

    @abstractmethod
    def execute(self, operation: Callable[[], T]) -> T:
        """Execute the operation under the executor's policy.

        Args:
            operation: A zero-argument callable. It succeeds by returning
                a value and fails by raising an ``Exception``.

        Returns:
            The value returned by the first successful attempt.
        """


class PolicyExecutor(BasePolicyExecutor[T]):
    """Executes operations with the retry strategy of a policy.

    The executor holds no state between calls: the attempt counter is
    local to each ``execute`` call, so one executor can be shared by
    several threads.

    Attributes:
        policy: The policy captured at construction.

    Example:
        ```pycon
        >>> from rezpolicy import Policy, PolicyExecutor
        >>> executor: PolicyExecutor[int] = PolicyExecutor(Policy().retry_x_times(2))
        >>> calls = []
        >>> def flaky() -> int:
        ...     calls.append(None)
        ...     if len(calls) < 2:
        ...         raise ConnectionError("unavailable")
        ...     return len(calls)
        ...
        >>> executor.execute(flaky)
        2

        ```
    """

    def __init__(self, policy: Policy) -> None:
        self.policy = policy

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(policy={self.policy!r})"

    def execute(self, operation: Callable[[], T]) -> T:
        """Execute the operation, retrying failures per the policy.

        The operation is invoked once unconditionally. If it succeeds, its
        result is returned without consulting the retry strategy.
        Otherwise, while the strategy's ``should_retry`` returns True for
        the current attempt number (starting at 1), the failure callback
        is invoked, the thread sleeps for the configured wait and the
        operation is invoked again.

        Only ``Exception`` subclasses count as failures.
        ``KeyboardInterrupt``, ``SystemExit`` and other ``BaseException``
        subclasses propagate immediately.

        Warning:
            The loop has no upper bound of its own. A ``should_retry``
            that never returns False, combined with an operation that
            never succeeds, runs forever. The wait is a blocking
            ``time.sleep`` that cannot be cancelled.

        Args:
            operation: A zero-argument callable. It succeeds by returning
                a value and fails by raising an ``Exception``.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            Exception: The error raised by the last attempt, unchanged,
                once the retry strategy declines another attempt or if
                no retry strategy is configured. Errors raised by the
                failure callback or the wait function propagate as is.
        """
        try:
            return operation()
        except Exception as exc:
            error = exc

        retry = self.policy.retry
        if retry is None:
            raise error

        attempt = 1
        while should_retry(retry, attempt, error):
            wait = prepare_next_attempt(retry, attempt, error)
            if wait is not None:
                time.sleep(wait)

            try:
                result = operation()
            except Exception as exc:
                error = exc
            else:
                logger.debug(f"Operation succeeded on retry {attempt}")
                return result
            attempt += 1

        raise error


def build_executor(policy: Policy) -> PolicyExecutor[Any]:
    """Build a synchronous executor for a policy.

    Policies are immutable, so configuring the same policy variable again
    after this call does not affect the returned executor.

    Args:
        policy: The policy to execute operations with.

    Returns:
        An executor bound to ``policy``.

    Example:
        ```pycon
        >>> from rezpolicy import Policy, build_executor
        >>> executor = build_executor(Policy().retry_x_times(1))
        >>> executor.execute(lambda: "ok")
        'ok'

        ```
    """
    return PolicyExecutor(policy)
