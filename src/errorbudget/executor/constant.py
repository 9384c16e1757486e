"""Constant-delay error budget executor."""

from __future__ import annotations

import logging as py_logging
import time
from collections.abc import Callable, Mapping
from typing import TypeVar

from errorbudget.config import BudgetConfig, validate_config
from errorbudget.errors import is_stop
from errorbudget.executor.base import BudgetState, ExecutionOutcome

logger = py_logging.getLogger(__name__)

T = TypeVar("T")


class ConstantExecutor:
    """Retry an operation up to ``max_attempts`` times with a fixed delay.

    An operation fails by raising. Raising :class:`~errorbudget.errors.Stop`,
    directly or wrapped, ends the loop and counts as success. Once the budget
    is used up the last failure is re-raised unchanged.

    The attempt counter lives inside each call, so one instance can be reused
    for any number of sequential calls.
    """

    def __init__(
        self,
        config: BudgetConfig | Mapping[str, object] | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._config = validate_config(config)
        self._sleep = sleep
        logger.debug(
            "Constant executor ready max_attempts=%s delay_seconds=%s",
            self._config.max_attempts,
            self._config.delay_seconds,
        )

    @property
    def config(self) -> BudgetConfig:
        return self._config

    def execute(self, operation: Callable[[], T]) -> T | None:
        return self.run(operation).unwrap()

    def run(self, operation: Callable[[], T]) -> ExecutionOutcome:
        max_attempts = self._config.max_attempts
        attempts_left = max_attempts
        attempt = 0
        while True:
            attempt += 1
            logger.debug("Running operation attempt=%s/%s", attempt, max_attempts)
            try:
                value = operation()
            except Exception as exc:
                if is_stop(exc):
                    logger.debug("Operation requested stop attempt=%s", attempt)
                    return ExecutionOutcome(state=BudgetState.STOPPED, attempts=attempt)
                attempts_left -= 1
                if attempts_left == 0:
                    logger.debug("Error budget exhausted attempts=%s", attempt)
                    return ExecutionOutcome(
                        state=BudgetState.EXHAUSTED,
                        attempts=attempt,
                        error=exc,
                    )
            else:
                return ExecutionOutcome(state=BudgetState.SUCCEEDED, attempts=attempt, value=value)
            self._wait()

    def _wait(self) -> None:
        # Blocks the calling thread only; no lock is held while waiting.
        if self._config.delay_seconds > 0:
            self._sleep(self._config.delay_seconds)


def new_constant_executor(
    config: BudgetConfig | Mapping[str, object] | None = None,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> ConstantExecutor:
    return ConstantExecutor(config, sleep=sleep)
