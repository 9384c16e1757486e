"""Error budget executors."""

from .base import BudgetState, ExecutionOutcome, Executor
from .constant import ConstantExecutor, new_constant_executor
from .single import SingleExecutor, new_single_executor

__all__ = [
    "BudgetState",
    "ConstantExecutor",
    "ExecutionOutcome",
    "Executor",
    "new_constant_executor",
    "new_single_executor",
    "SingleExecutor",
]
