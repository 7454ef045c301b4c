r"""Operations with scripted outcomes shared by the test suite."""

from __future__ import annotations

__all__ = [
    "AlwaysFailingOperation",
    "AsyncAlwaysFailingOperation",
    "AsyncScriptedOperation",
    "ScriptedOperation",
    "fail_times",
]

from typing import Any


class ScriptedOperation:
    """Zero-argument operation that replays a script of outcomes.

    Each call consumes the next item of the script: exceptions are
    raised, anything else is returned. Once the script is exhausted the
    last item is replayed forever.

    Attributes:
        call_count: Number of times the operation was invoked.
        raised: Exceptions raised so far, in order.
    """

    def __init__(self, outcomes: list[Any]) -> None:
        if not outcomes:
            msg = "outcomes must not be empty"
            raise ValueError(msg)
        self.outcomes = outcomes
        self.call_count = 0
        self.raised: list[BaseException] = []

    def _outcome(self, index: int) -> Any:
        return self.outcomes[min(index, len(self.outcomes) - 1)]

    def _next(self) -> Any:
        outcome = self._outcome(self.call_count)
        self.call_count += 1
        if isinstance(outcome, BaseException):
            self.raised.append(outcome)
            raise outcome
        return outcome

    def __call__(self) -> Any:
        return self._next()


class AsyncScriptedOperation(ScriptedOperation):
    """Coroutine version of ``ScriptedOperation``."""

    async def __call__(self) -> Any:
        return self._next()


class AlwaysFailingOperation(ScriptedOperation):
    """Operation raising a distinct ``RuntimeError`` on every call."""

    def __init__(self, message: str = "some error") -> None:
        super().__init__([None])
        self.message = message

    def _outcome(self, index: int) -> Any:
        return RuntimeError(f"{self.message} #{index + 1}")


class AsyncAlwaysFailingOperation(AlwaysFailingOperation):
    """Coroutine version of ``AlwaysFailingOperation``."""

    async def __call__(self) -> Any:
        return self._next()


def fail_times(count: int, result: Any = 42) -> ScriptedOperation:
    """Create an operation failing ``count`` times, then returning ``result``."""
    return ScriptedOperation([RuntimeError(f"failure {i + 1}") for i in range(count)] + [result])
