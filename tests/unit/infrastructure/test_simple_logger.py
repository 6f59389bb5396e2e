"""Tests for the SimpleLogger implementation."""

import logging
from unittest.mock import Mock, patch

from togomq_sdk.domain.enums import LogLevel
from togomq_sdk.infrastructure.simple_logger import SimpleLogger
from togomq_sdk.ports.logger import LoggerPort


class TestSimpleLogger:
    """Test cases for SimpleLogger."""

    def test_implements_logger_port(self):
        assert isinstance(SimpleLogger(), LoggerPort)

    def test_initialization_default_values(self):
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_get_logger.return_value = mock_logger

            SimpleLogger()

            mock_get_logger.assert_called_once_with("togomq_sdk")
            mock_logger.setLevel.assert_called_once_with(logging.INFO)

    def test_level_from_config(self):
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_get_logger.return_value = mock_logger

            SimpleLogger(name="custom", level=LogLevel.WARN)

            mock_get_logger.assert_called_once_with("custom")
            mock_logger.setLevel.assert_called_once_with(logging.WARNING)

    def test_handler_added_when_none_exist(self):
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.handlers = []
            mock_get_logger.return_value = mock_logger

            with patch("logging.StreamHandler") as mock_handler_class:
                mock_handler = Mock()
                mock_handler_class.return_value = mock_handler

                SimpleLogger()

                mock_logger.addHandler.assert_called_once_with(mock_handler)
                mock_handler.setFormatter.assert_called_once()

    def test_handler_not_added_when_exists(self):
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.handlers = [Mock()]
            mock_get_logger.return_value = mock_logger

            with patch("logging.StreamHandler") as mock_handler_class:
                SimpleLogger()

                mock_handler_class.assert_not_called()
                mock_logger.addHandler.assert_not_called()

    def test_context_rendered_as_json(self):
        logger = SimpleLogger()
        logger._logger = Mock()

        logger.info("Published", count=2, topic="orders")

        logger._logger.log.assert_called_once_with(
            logging.INFO,
            'Published {"count": 2, "topic": "orders"}',
            extra={"context": {"count": 2, "topic": "orders"}},
        )

    def test_message_without_context(self):
        logger = SimpleLogger()
        logger._logger = Mock()

        logger.debug("Closing")

        logger._logger.log.assert_called_once_with(logging.DEBUG, "Closing", extra={"context": {}})

    def test_none_level_never_logged(self):
        logger = SimpleLogger()
        logger._logger = Mock()

        logger.log(LogLevel.NONE, "ignored")

        logger._logger.log.assert_not_called()

    def test_silenced_logger_emits_nothing(self, caplog):
        logger = SimpleLogger(name="togomq_sdk.silent", level=LogLevel.NONE)

        with caplog.at_level(logging.DEBUG):
            logger.error("should not appear")

        assert "should not appear" not in caplog.text
