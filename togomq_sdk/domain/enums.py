"""Domain enumerations."""

import logging
from enum import Enum


class ErrorKind(str, Enum):
    """Stable error kinds callers can branch on."""

    CONNECTION = "CONNECTION"
    AUTH = "AUTH"
    VALIDATION = "VALIDATION"
    PUBLISH = "PUBLISH"
    SUBSCRIBE = "SUBSCRIBE"
    STREAM = "STREAM"
    CONFIGURATION = "CONFIGURATION"


class LogLevel(str, Enum):
    """Log verbosity accepted by the client configuration."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    NONE = "none"

    def to_logging_level(self) -> int:
        """Map to a stdlib logging level.

        ``none`` maps above CRITICAL so nothing is emitted.
        """
        return {
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.WARN: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
            LogLevel.NONE: logging.CRITICAL + 10,
        }[self]
