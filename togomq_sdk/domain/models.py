"""Domain models using Pydantic for validation.

``Message`` and ``SubscribeOptions`` are configured with fluent mutators that
change the instance in place and return it, so calls can be chained::

    message = Message("orders", b"{}").with_postpone(30).with_retention(7200)

This differs on purpose from :class:`~togomq_sdk.infrastructure.config.Config`,
whose ``with_*`` methods return a new instance. Values of the wrong type raise
a ``TogoMQError`` of kind ``VALIDATION``.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import TogoMQError


def _clamp_negative(v: Any) -> Any:
    if isinstance(v, int) and not isinstance(v, bool) and v < 0:
        return 0
    return v


def _describe(model: str, error: ValidationError) -> str:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or model}: {err['msg']}"
        for err in error.errors()
    )
    return f"Invalid {model}: {problems}"


class _FluentModel(BaseModel):
    """Mutable model whose validation failures surface as VALIDATION errors."""

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise TogoMQError.validation(_describe(type(self).__name__, e), e) from e

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as e:
            raise TogoMQError.validation(_describe(type(self).__name__, e), e) from e


class Message(_FluentModel):
    """A single queue entry, either outgoing or received from a subscription."""

    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "topic": "orders",
                "body": "order payload",
                "variables": {"priority": "high"},
                "postpone": 30,
                "retention": 7200,
            }
        },
    )

    topic: str = Field(..., description="Topic to publish to, or the topic a message came from")
    body: bytes | str = Field(default=b"", description="Message payload")
    variables: dict[str, str] = Field(default_factory=dict, description="Custom metadata")
    postpone: int = Field(default=0, ge=0, description="Delay in seconds before delivery")
    retention: int = Field(default=0, ge=0, description="Seconds to keep the message (0 = default)")
    uuid: str | None = Field(default=None, description="Server-assigned identifier")

    def __init__(self, topic: str, body: bytes | str = b"", **data: Any) -> None:
        super().__init__(topic=topic, body=body, **data)

    @field_validator("postpone", "retention", mode="before")
    @classmethod
    def clamp_durations(cls, v: Any) -> Any:
        """Negative durations mean "not set"."""
        return _clamp_negative(v)

    def with_variables(self, variables: Mapping[str, str]) -> "Message":
        """Replace the message variables."""
        self.variables = dict(variables)
        return self

    def with_postpone(self, seconds: int) -> "Message":
        """Delay availability of the message by ``seconds``."""
        self.postpone = seconds
        return self

    def with_retention(self, seconds: int) -> "Message":
        """Keep the message for ``seconds`` (0 uses the server default)."""
        self.retention = seconds
        return self

    def set_uuid(self, uuid: str) -> "Message":
        self.uuid = uuid
        return self

    def get_variable(self, key: str, default: str | None = None) -> str | None:
        """Get a single variable value."""
        return self.variables.get(key, default)

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes, UTF-8 encoding text payloads."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body


class SubscribeOptions(_FluentModel):
    """Subscription request: topic pattern plus advisory flow-control hints.

    ``topic`` may be a literal topic, ``*`` for all topics, or ``prefix.*``
    for a namespace.
    """

    model_config = ConfigDict(extra="forbid", strict=True, validate_assignment=True)

    topic: str = Field(..., description="Topic or wildcard pattern")
    batch: int = Field(default=0, ge=0, description="Max messages per push (0 = server default)")
    speed_per_sec: int = Field(default=0, ge=0, description="Max messages per second (0 = unlimited)")

    def __init__(self, topic: str, **data: Any) -> None:
        super().__init__(topic=topic, **data)

    @field_validator("batch", "speed_per_sec", mode="before")
    @classmethod
    def clamp_limits(cls, v: Any) -> Any:
        return _clamp_negative(v)

    def with_batch(self, batch: int) -> "SubscribeOptions":
        """Set the maximum batch size; negative values become 0."""
        self.batch = batch
        return self

    def with_speed_per_sec(self, speed_per_sec: int) -> "SubscribeOptions":
        """Set the delivery rate limit; negative values become 0."""
        self.speed_per_sec = speed_per_sec
        return self


class PublishResult(BaseModel):
    """Outcome of a publish call."""

    model_config = ConfigDict(frozen=True, strict=True)

    messages_received: int = Field(..., ge=0, description="Messages acknowledged by the server")
