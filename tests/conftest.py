"""Pytest configuration and shared fixtures."""

import pytest

from tests.builders import FakeConnection, RecordingLogger
from togomq_sdk.domain.enums import LogLevel
from togomq_sdk.infrastructure.config import Config


@pytest.fixture
def config():
    """Configuration for a local test server."""
    return Config("test-token", host="localhost", port=5123, log_level=LogLevel.DEBUG)


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def connection():
    return FakeConnection()
