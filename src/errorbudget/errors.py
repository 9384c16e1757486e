"""Deterministic error model and the stop signal."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum


class ErrorCode(IntEnum):
    SUCCESS = 0
    INVALID_CONFIG = 3
    RUNTIME_ERROR = 4
    VALIDATION_ERROR = 7


@dataclass
class BudgetError(Exception):
    message: str
    code: ErrorCode = ErrorCode.RUNTIME_ERROR
    hint: str = ""

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} Hint: {self.hint}"
        return self.message


@dataclass
class InvalidConfigError(BudgetError):
    code: ErrorCode = ErrorCode.INVALID_CONFIG
    field: str = ""


class Stop(Exception):
    """Raised by an operation to end retries and report success."""

    def __init__(self) -> None:
        super().__init__()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Stop)

    def __hash__(self) -> int:
        return hash(Stop)

    def __repr__(self) -> str:
        return "Stop()"


def _chain(error: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__


def is_stop(error: BaseException | None) -> bool:
    """Return True when ``error`` or anything it wraps is a :class:`Stop`.

    Only explicit wrapping (``raise ... from``) is followed. A failure raised
    while handling a stop is a new failure, not a stop. An exception group is
    a stop when every exception it holds is one.
    """
    if error is None:
        return False
    for link in _chain(error):
        if isinstance(link, Stop):
            return True
        if isinstance(link, BaseExceptionGroup) and all(
            is_stop(inner) for inner in link.exceptions
        ):
            return True
    return False
