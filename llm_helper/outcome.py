"""
Tagged results for callers that prefer matching on a value over
catching exceptions.

    outcome = await capture(helper.generate_solution(info))
    match outcome.kind:
        case ErrorKind.PARSE: ...
        case ErrorKind.REMOTE: ...
        case None: use(outcome.value)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Generic, Optional, TypeVar

from ai.exceptions import LLMHelperError

T = TypeVar("T")


class ErrorKind(str, Enum):
    IO = "io"
    REMOTE = "remote"
    PARSE = "parse"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    value: Optional[T] = None
    error: Optional[LLMHelperError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        if self.error is None:
            return None
        return ErrorKind(self.error.kind)

    def unwrap(self) -> T:
        """Return the value or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value


async def capture(awaitable: Awaitable[T]) -> Outcome[T]:
    """Await a helper operation and wrap its value or its helper error."""
    try:
        return Outcome(value=await awaitable)
    except LLMHelperError as exc:
        return Outcome(error=exc)
