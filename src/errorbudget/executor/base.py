"""Executor contract and execution outcome models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class BudgetState(str, Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    STOPPED = "stopped"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class ExecutionOutcome:
    state: BudgetState
    attempts: int
    value: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.state in (BudgetState.SUCCEEDED, BudgetState.STOPPED)

    def unwrap(self) -> Any:
        """Return the value of a successful outcome or raise its error."""
        if self.error is not None and not self.ok:
            raise self.error
        return self.value


class Executor(Protocol):
    """Retries arbitrary operations according to some error budget.

    Implementations are safe for sequential reuse. Overlapping calls on the
    same instance are not supported.
    """

    def execute(self, operation: Callable[[], T]) -> T | None:
        """Run ``operation`` until it succeeds or the budget is used up."""
        ...

    def run(self, operation: Callable[[], T]) -> ExecutionOutcome: ...
