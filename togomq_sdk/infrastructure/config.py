"""Client configuration.

``Config`` is immutable: every ``with_*`` method validates and returns a new
instance, leaving the original untouched.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain.enums import LogLevel
from ..domain.exceptions import TogoMQError

DEFAULT_HOST = "q.togomq.io"
DEFAULT_PORT = 5123

TOKEN_ENV = "TOGOMQ_TOKEN"
HOST_ENV = "TOGOMQ_HOST"
PORT_ENV = "TOGOMQ_PORT"
LOG_LEVEL_ENV = "TOGOMQ_LOG_LEVEL"


class Config(BaseModel):
    """Strongly-typed configuration for the TogoMQ client.

    Invalid values raise a ``TogoMQError`` of kind ``CONFIGURATION`` wrapping
    the underlying pydantic ``ValidationError``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
        strict=True,
    )

    token: str = Field(..., min_length=1, description="Authentication token")
    host: str = Field(default=DEFAULT_HOST, min_length=1, description="TogoMQ server host")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="TogoMQ server port")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Log verbosity")

    def __init__(self, token: str | None = None, **data: Any) -> None:
        if token is not None:
            data["token"] = token
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise TogoMQError.configuration(_describe(e), e) from e

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: Any) -> LogLevel:
        """Accept a LogLevel or one of its string values."""
        if isinstance(v, LogLevel):
            return v
        valid = [level.value for level in LogLevel]
        if isinstance(v, str) and v in valid:
            return LogLevel(v)
        raise ValueError(f"Invalid log level {v!r}. Must be one of: {', '.join(valid)}")

    @property
    def address(self) -> str:
        """Server address in ``host:port`` form."""
        return f"{self.host}:{self.port}"

    def with_host(self, host: str) -> Config:
        return self._replace(host=host)

    def with_port(self, port: int) -> Config:
        return self._replace(port=port)

    def with_log_level(self, log_level: LogLevel | str) -> Config:
        """Return a copy with another log level (debug, info, warn, error, none)."""
        return self._replace(log_level=log_level)

    def _replace(self, **changes: Any) -> Config:
        return Config(**{**self.model_dump(), **changes})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a configuration from ``TOGOMQ_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Config with unset variables left at their defaults
        """
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {"token": env.get(TOKEN_ENV, "")}
        if host := env.get(HOST_ENV):
            data["host"] = host
        if port := env.get(PORT_ENV):
            try:
                data["port"] = int(port)
            except ValueError as e:
                raise TogoMQError.configuration(f"Invalid {PORT_ENV}: {port!r}", e) from e
        if log_level := env.get(LOG_LEVEL_ENV):
            data["log_level"] = log_level.strip().lower()
        return cls(**data)


def _describe(error: ValidationError) -> str:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
        for err in error.errors()
    )
    return f"Invalid configuration: {problems}"
