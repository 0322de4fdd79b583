"""Runtime settings: defaults, overridable from the environment (and from the CLI flags on top of that)."""

import logging
import os
from typing import Mapping, Optional, Self

from pydantic import BaseModel, ValidationError, field_validator

from src.core.exceptions import InvalidConfigError

DEFAULT_QUEUE_CAPACITY = 5
DEFAULT_STACK_CAPACITY = 3

ENV_PREFIX = "PIECE_RESERVE_"


class Settings(BaseModel):
    queue_capacity: int = DEFAULT_QUEUE_CAPACITY
    stack_capacity: int = DEFAULT_STACK_CAPACITY
    seed: Optional[int] = None
    log_level: str = "INFO"

    @field_validator("queue_capacity", "stack_capacity")
    @classmethod
    def validate_capacity(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"capacity must be at least 1, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Read PIECE_RESERVE_* variables. Missing ones fall back to the defaults."""
        environ = os.environ if environ is None else environ
        values = {
            name: environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in environ
        }
        return cls.build(**values)

    @classmethod
    def build(cls, **values: object) -> Self:
        """Construct settings, converting pydantic's validation error into our own exception."""
        try:
            return cls.model_validate(values)
        except ValidationError as err:
            raise InvalidConfigError(str(err)) from err

    def override(self, **values: object) -> Self:
        """New settings with the non-None values replaced (used for CLI flags)."""
        updates = {key: value for key, value in values.items() if value is not None}
        return self.build(**(self.model_dump() | updates))
