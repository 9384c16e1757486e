"""Error budget configuration and validation."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from errorbudget.errors import InvalidConfigError

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_DELAY_SECONDS = 0.0

_FIELD_HINTS = {
    "max_attempts": "Use an integer of at least 1.",
    "delay_seconds": "Use a finite number of seconds, 0 or greater.",
}


class BudgetConfig(BaseModel):
    """Attempt budget and the pause taken after every failed attempt.

    ``max_attempts`` is the total number of times an operation may be invoked,
    the first call included. A budget of 3 with a delay of 5 seconds runs as:
    fail, wait 5s, fail, wait 5s, fail, give up.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, strict=True)
    delay_seconds: float = DEFAULT_DELAY_SECONDS

    @field_validator("max_attempts")
    @classmethod
    def _validate_max_attempts(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"max_attempts must be at least 1, got {value}")
        return value

    @field_validator("delay_seconds", mode="before")
    @classmethod
    def _coerce_delay(cls, value: object) -> object:
        if isinstance(value, timedelta):
            return value.total_seconds()
        if isinstance(value, bool):
            raise ValueError("delay_seconds must be a number of seconds, got a bool")
        return value

    @field_validator("delay_seconds")
    @classmethod
    def _validate_delay(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError(f"delay_seconds must be finite, got {value}")
        if value < 0:
            raise ValueError(f"delay_seconds must not be negative, got {value}")
        return value


def _first_invalid_field(exc: ValidationError) -> tuple[str, str]:
    errors = exc.errors()
    if not errors:
        return "", str(exc)
    first = errors[0]
    location = first.get("loc") or ("",)
    message = str(first.get("msg", "invalid value"))
    if message.startswith("Value error, "):
        message = message[len("Value error, ") :]
    return str(location[0]), message


def validate_config(config: BudgetConfig | Mapping[str, object] | None = None) -> BudgetConfig:
    """Return a validated, immutable :class:`BudgetConfig`.

    Accepts an existing model, a mapping of field values or ``None`` for the
    defaults. Raises :class:`InvalidConfigError` naming the offending field.
    """
    if config is None:
        return BudgetConfig()
    if isinstance(config, BudgetConfig):
        # Re-validate: model_construct() bypasses the validators.
        payload: Mapping[str, object] = config.model_dump()
    elif isinstance(config, Mapping):
        payload = config
    else:
        raise InvalidConfigError(
            f"Unsupported budget config type: {type(config).__name__}",
            hint="Pass a BudgetConfig or a mapping of its fields.",
        )
    try:
        return BudgetConfig.model_validate(dict(payload))
    except ValidationError as exc:
        field, message = _first_invalid_field(exc)
        raise InvalidConfigError(
            f"Invalid budget config: {message}",
            hint=_FIELD_HINTS.get(field, f"Remove the unknown field '{field}'."),
            field=field,
        ) from exc
