r"""rezpolicy - Retry policies for fallible operations.

This package wraps an arbitrary fallible operation with a configurable
retry strategy. A ``Policy`` is built through fluent configuration calls,
each returning a new immutable policy, and handed to an executor that
runs the operation and retries it on failure.

Key Features:
    - Retry a fixed number of times or while a custom predicate holds
    - No wait, a fixed wait, or a wait computed from the attempt and error
    - Optional failure callback between attempts (logging, metrics)
    - Backoff strategies: Constant, Linear, Exponential and Fibonacci
    - Synchronous and asynchronous executors

Example:
    ```pycon
    >>> from rezpolicy import Policy, build_executor
    >>> policy = Policy().wait_retry_x_times(3, 0.0)
    >>> executor = build_executor(policy)
    >>> executor.execute(lambda: 2 + 2)
    4

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncPolicyExecutor",
    "BaseAsyncPolicyExecutor",
    "BasePolicyExecutor",
    "Policy",
    "PolicyExecutor",
    "RetryPolicy",
    "__version__",
    "build_async_executor",
    "build_executor",
    "new_policy",
]

from importlib.metadata import PackageNotFoundError, version

from rezpolicy.policy import Policy, new_policy
from rezpolicy.retry import (
    AsyncPolicyExecutor,
    BaseAsyncPolicyExecutor,
    BasePolicyExecutor,
    PolicyExecutor,
    RetryPolicy,
    build_async_executor,
    build_executor,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
