"""Logger port for SDK logging."""

from abc import ABC, abstractmethod
from typing import Any

from ..domain.enums import LogLevel


class LoggerPort(ABC):
    """Abstract interface for logging operations.

    Implementations only need :meth:`log`; the level helpers delegate to it.
    Keyword arguments are structured context attached to the record.
    """

    @abstractmethod
    def log(self, level: LogLevel, message: str, **context: Any) -> None:
        """Log ``message`` at ``level``."""
        ...

    def debug(self, message: str, **context: Any) -> None:
        self.log(LogLevel.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self.log(LogLevel.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self.log(LogLevel.WARN, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self.log(LogLevel.ERROR, message, **context)
