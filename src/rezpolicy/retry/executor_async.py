r"""Asynchronous policy executor.

This module provides the AsyncPolicyExecutor class that awaits a
fallible coroutine function and retries it according to a ``Policy``.
"""

from __future__ import annotations

__all__ = ["AsyncPolicyExecutor", "BaseAsyncPolicyExecutor", "build_async_executor"]

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from rezpolicy.retry.executor_core import prepare_next_attempt, should_retry

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from rezpolicy.policy import Policy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class BaseAsyncPolicyExecutor(ABC, Generic[T]):
    """Abstract base class for asynchronous policy executors.

    An async executor exposes a single coroutine method, ``execute``,
    that awaits a zero-argument operation under the executor's policy.
    """

    @abstractmethod
    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Await the operation under the executor's policy.

        Args:
            operation: A zero-argument callable returning an awaitable.

        Returns:
            The value produced by the first successful attempt.
        """


class AsyncPolicyExecutor(BaseAsyncPolicyExecutor[T]):
    """Executes async operations with the retry strategy of a policy.

    Attempts are strictly sequential: the next attempt only starts once
    the previous one has failed and the wait has elapsed. The wait uses
    ``asyncio.sleep``, so other tasks run meanwhile and cancelling the
    awaiting task interrupts it. The failure callback and the wait
    function are invoked synchronously.

    Attributes:
        policy: The policy captured at construction.

    Example:
        ```pycon
        >>> import asyncio
        >>> from rezpolicy import Policy, build_async_executor
        >>> executor = build_async_executor(Policy().retry_x_times(3))
        >>> async def fetch() -> str:
        ...     return "data"
        ...
        >>> asyncio.run(executor.execute(fetch))
        'data'

        ```
    """

    def __init__(self, policy: Policy) -> None:
        self.policy = policy

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(policy={self.policy!r})"

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Await the operation, retrying failures per the policy.

        Same semantics as ``PolicyExecutor.execute``. The loop has no
        upper bound of its own.

        Args:
            operation: A zero-argument callable returning an awaitable.
                It succeeds by producing a value and fails by raising an
                ``Exception``.

        Returns:
            The value produced by the first successful attempt.

        Raises:
            Exception: The error raised by the last attempt, unchanged,
                once the retry strategy declines another attempt or if
                no retry strategy is configured.
        """
        try:
            return await operation()
        except Exception as exc:
            error = exc

        retry = self.policy.retry
        if retry is None:
            raise error

        attempt = 1
        while should_retry(retry, attempt, error):
            wait = prepare_next_attempt(retry, attempt, error)
            if wait is not None:
                await asyncio.sleep(wait)

            try:
                result = await operation()
            except Exception as exc:
                error = exc
            else:
                logger.debug(f"Operation succeeded on retry {attempt}")
                return result
            attempt += 1

        raise error


def build_async_executor(policy: Policy) -> AsyncPolicyExecutor[Any]:
    """Build an asynchronous executor for a policy.

    Args:
        policy: The policy to execute operations with.

    Returns:
        An async executor bound to ``policy``.
    """
    return AsyncPolicyExecutor(policy)
