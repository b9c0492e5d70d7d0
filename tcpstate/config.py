"""
Runtime settings, loaded from ``TCPSTATE_*`` environment variables.
"""

import logging
import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

ENV_PREFIX = "TCPSTATE_"


class Settings(BaseModel):
    """Settings for the trace and logging of a connection run."""

    model_config = ConfigDict(frozen=True)

    log_level: str = Field(
        "WARNING",
        description="Logging level name for the tcpstate loggers",
    )
    trace_format: Literal["text", "json"] = Field(
        "text",
        description="Trace line format: plain text or JSON lines",
    )
    announce_initial_state: bool = Field(
        True,
        description="Emit the connection initialized line on creation",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Settings":
        """Build settings from the environment, with keyword overrides on top.

        Overrides set to None are ignored so unset CLI flags fall through.

        Raises:
            ConfigurationError: If a value fails validation.
        """
        env = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid tcpstate settings: {e}", original_exception=e) from e
