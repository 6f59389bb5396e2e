"""Tests for the LoggerPort contract."""

import pytest

from tests.builders import RecordingLogger
from togomq_sdk.domain.enums import LogLevel
from togomq_sdk.ports.logger import LoggerPort


class TestLoggerPort:
    def test_cannot_instantiate_abstract_port(self):
        with pytest.raises(TypeError):
            LoggerPort()

    @pytest.mark.parametrize(
        ("method", "level"),
        [
            ("debug", LogLevel.DEBUG),
            ("info", LogLevel.INFO),
            ("warning", LogLevel.WARN),
            ("error", LogLevel.ERROR),
        ],
    )
    def test_helpers_delegate_to_log(self, method, level):
        logger = RecordingLogger()

        getattr(logger, method)("hello", topic="orders")

        assert logger.records == [(level, "hello", {"topic": "orders"})]
