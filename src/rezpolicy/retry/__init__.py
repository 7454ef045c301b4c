r"""Retry package implementing the policy executors.

Public API:
    - RetryPolicy: Retry strategy embedded in a policy
    - BasePolicyExecutor: Interface of synchronous executors
    - PolicyExecutor: Synchronous policy executor
    - BaseAsyncPolicyExecutor: Interface of asynchronous executors
    - AsyncPolicyExecutor: Asynchronous policy executor
    - build_executor / build_async_executor: Executor factories
"""

from __future__ import annotations

__all__ = [
    "AsyncPolicyExecutor",
    "BaseAsyncPolicyExecutor",
    "BasePolicyExecutor",
    "FailureCallback",
    "PolicyExecutor",
    "RetryPolicy",
    "ShouldRetry",
    "WaitDuration",
    "build_async_executor",
    "build_executor",
]

from rezpolicy.retry.config import FailureCallback, RetryPolicy, ShouldRetry, WaitDuration
from rezpolicy.retry.executor import BasePolicyExecutor, PolicyExecutor, build_executor
from rezpolicy.retry.executor_async import (
    AsyncPolicyExecutor,
    BaseAsyncPolicyExecutor,
    build_async_executor,
)
