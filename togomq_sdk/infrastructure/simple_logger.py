"""Simple logger implementation on top of Python's standard logging."""

import json
import logging
from typing import Any

from ..domain.enums import LogLevel
from ..ports.logger import LoggerPort


class SimpleLogger(LoggerPort):
    """Logger writing ``asctime - name - levelname - message`` lines to stderr.

    Context keyword arguments are appended to the message as JSON and are
    also available to handlers as ``record.context``.
    """

    def __init__(self, name: str = "togomq_sdk", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name (default: "togomq_sdk")
            level: Verbosity; ``LogLevel.NONE`` silences the logger
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.to_logging_level())

        # Add console handler if not already present
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def log(self, level: LogLevel, message: str, **context: Any) -> None:
        if level is LogLevel.NONE:
            return
        if context:
            message = f"{message} {json.dumps(context, default=str)}"
        self._logger.log(level.to_logging_level(), message, extra={"context": context})
