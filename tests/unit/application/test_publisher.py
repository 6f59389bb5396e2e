"""Tests for the BatchPublisher use case."""

import grpc
import pytest

from tests.builders import FakeConnection, FakeRpcError
from togomq_sdk.application.publisher import BatchPublisher
from togomq_sdk.domain.enums import ErrorKind, LogLevel
from togomq_sdk.domain.exceptions import TogoMQError
from togomq_sdk.domain.models import Message, PublishResult


@pytest.fixture
def publisher(connection, logger):
    return BatchPublisher(connection, logger)


class TestPublishSuccess:
    def test_returns_count_reported_by_server(self, logger):
        connection = FakeConnection(messages_received=1)
        publisher = BatchPublisher(connection, logger)

        result = publisher.publish([Message("a", "1"), Message("b", "2")])

        assert result == PublishResult(messages_received=1)

    def test_single_call_for_whole_batch(self, publisher, connection):
        publisher.publish([Message("a"), Message("b"), Message("c")])

        assert len(connection.published) == 1
        assert [m.topic for m in connection.published[0].messages] == ["a", "b", "c"]

    def test_request_carries_message_fields(self, publisher, connection):
        message = (
            Message("orders", "payload")
            .with_variables({"priority": "high"})
            .with_postpone(30)
            .with_retention(7200)
        )

        publisher.publish([message])

        item = connection.published[0].messages[0]
        assert item.topic == "orders"
        assert item.body == b"payload"
        assert dict(item.variables) == {"priority": "high"}
        assert item.postpone == 30
        assert item.retention == 7200

    def test_accepts_any_iterable(self, publisher, connection):
        result = publisher.publish(Message(topic) for topic in ("a", "b"))

        assert result.messages_received == 2

    def test_logs_batch(self, publisher, logger):
        publisher.publish([Message("a")])

        assert "Publishing batch of messages" in logger.messages(LogLevel.DEBUG)
        assert "Successfully published messages" in logger.messages(LogLevel.INFO)


class TestPublishValidation:
    """Validation happens before any network call."""

    def test_empty_batch(self, publisher, connection):
        with pytest.raises(TogoMQError, match="cannot be empty") as exc_info:
            publisher.publish([])

        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert connection.published == []

    def test_empty_topic_sends_nothing(self, publisher, connection):
        with pytest.raises(TogoMQError, match="topic is required") as exc_info:
            publisher.publish([Message("valid"), Message("")])

        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert connection.published == []

    def test_non_message_items(self, publisher, connection):
        with pytest.raises(TogoMQError) as exc_info:
            publisher.publish([Message("a"), {"topic": "b"}])

        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert connection.published == []

    @pytest.mark.parametrize("messages", [None, 42])
    def test_non_iterable_batch(self, publisher, connection, messages):
        with pytest.raises(TogoMQError, match="iterable of Message") as exc_info:
            publisher.publish(messages)

        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert isinstance(exc_info.value.cause, TypeError)
        assert connection.published == []


class TestPublishFailures:
    def test_failed_status_is_publish_error(self, logger):
        cause = FakeRpcError(grpc.StatusCode.INTERNAL, "queue unavailable")
        publisher = BatchPublisher(FakeConnection(pub_error=cause), logger)

        with pytest.raises(TogoMQError) as exc_info:
            publisher.publish([Message("a")])

        error = exc_info.value
        assert error.kind is ErrorKind.PUBLISH
        assert "queue unavailable" in error.message
        assert error.cause is cause
        assert error.__cause__ is cause

    def test_rejected_token_is_auth_error(self, logger):
        cause = FakeRpcError(grpc.StatusCode.UNAUTHENTICATED, "invalid token")
        publisher = BatchPublisher(FakeConnection(pub_error=cause), logger)

        with pytest.raises(TogoMQError) as exc_info:
            publisher.publish([Message("a")])

        assert exc_info.value.kind is ErrorKind.AUTH
        assert exc_info.value.cause is cause

    def test_unexpected_failure_is_wrapped(self, logger):
        cause = RuntimeError("socket exploded")
        publisher = BatchPublisher(FakeConnection(pub_error=cause), logger)

        with pytest.raises(TogoMQError, match="socket exploded") as exc_info:
            publisher.publish([Message("a")])

        assert exc_info.value.kind is ErrorKind.PUBLISH
        assert exc_info.value.cause is cause

    def test_closed_connection_error_passes_through(self, logger):
        closed = TogoMQError.connection("Connection is closed")
        publisher = BatchPublisher(FakeConnection(pub_error=closed), logger)

        with pytest.raises(TogoMQError) as exc_info:
            publisher.publish([Message("a")])

        assert exc_info.value is closed
