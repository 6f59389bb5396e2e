"""Error taxonomy for the TogoMQ SDK.

Every failure surfaced by the SDK is a :class:`TogoMQError` tagged with an
:class:`~togomq_sdk.domain.enums.ErrorKind`, so callers branch on ``error.kind``
instead of on exception subclasses or message text.
"""

from __future__ import annotations

from .enums import ErrorKind


class TogoMQError(Exception):
    """Base exception for all TogoMQ SDK errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.STREAM,
        cause: BaseException | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.cause = cause
        self.details = details or {}
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"TogoMQError(kind={self.kind.value}, message={self.message!r})"

    @classmethod
    def connection(cls, message: str, cause: BaseException | None = None) -> TogoMQError:
        """Channel setup failed or the client is no longer usable."""
        return cls(message, ErrorKind.CONNECTION, cause)

    @classmethod
    def auth(cls, message: str, cause: BaseException | None = None) -> TogoMQError:
        """The server rejected the credentials."""
        return cls(message, ErrorKind.AUTH, cause)

    @classmethod
    def validation(cls, message: str, cause: BaseException | None = None) -> TogoMQError:
        """Malformed local input, detected before any call."""
        return cls(message, ErrorKind.VALIDATION, cause)

    @classmethod
    def publish(cls, message: str, cause: BaseException | None = None) -> TogoMQError:
        return cls(message, ErrorKind.PUBLISH, cause)

    @classmethod
    def subscribe(cls, message: str, cause: BaseException | None = None) -> TogoMQError:
        return cls(message, ErrorKind.SUBSCRIBE, cause)

    @classmethod
    def stream(cls, message: str, cause: BaseException | None = None) -> TogoMQError:
        return cls(message, ErrorKind.STREAM, cause)

    @classmethod
    def configuration(cls, message: str, cause: BaseException | None = None) -> TogoMQError:
        """An invalid configuration value was supplied."""
        return cls(message, ErrorKind.CONFIGURATION, cause)
