"""Executor that runs an operation exactly once."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from errorbudget.executor.base import BudgetState, ExecutionOutcome

T = TypeVar("T")


class SingleExecutor:
    """Run the operation once, whether it fails or succeeds.

    Mostly useful as a test double where an executor is expected. Failures are
    raised as is; a :class:`~errorbudget.errors.Stop` is not treated specially.
    """

    def execute(self, operation: Callable[[], T]) -> T | None:
        return operation()

    def run(self, operation: Callable[[], T]) -> ExecutionOutcome:
        try:
            value = operation()
        except Exception as exc:
            return ExecutionOutcome(state=BudgetState.EXHAUSTED, attempts=1, error=exc)
        return ExecutionOutcome(state=BudgetState.SUCCEEDED, attempts=1, value=value)


def new_single_executor() -> SingleExecutor:
    return SingleExecutor()
