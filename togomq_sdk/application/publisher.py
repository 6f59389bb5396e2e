"""Batch publishing use case."""

from collections.abc import Iterable

from ..domain.enums import ErrorKind
from ..domain.exceptions import TogoMQError
from ..domain.models import Message, PublishResult
from ..infrastructure import wire
from ..infrastructure.error_mapper import map_transport_error
from ..ports.connection import ConnectionPort
from ..ports.logger import LoggerPort


class BatchPublisher:
    """Validates a batch of messages and submits it in one ``Pub`` call."""

    def __init__(self, connection: ConnectionPort, logger: LoggerPort):
        self._connection = connection
        self._logger = logger

    def publish(self, messages: Iterable[Message]) -> PublishResult:
        """Publish all ``messages`` atomically.

        Args:
            messages: Non-empty ordered sequence of messages

        Returns:
            PublishResult with the count reported by the server

        Raises:
            TogoMQError: VALIDATION before any call if the batch is empty or a
                message has no topic; PUBLISH (or AUTH) if the call fails
        """
        try:
            batch = list(messages)
        except TypeError as e:
            raise TogoMQError.validation("Messages must be an iterable of Message", e) from e
        self._validate(batch)

        self._logger.debug("Publishing batch of messages", count=len(batch))
        try:
            request = wire.build_pub_request(batch)
            response = self._connection.publish(request)
        except TogoMQError:
            raise
        except Exception as e:
            raise map_transport_error(e, ErrorKind.PUBLISH, "publish messages") from e

        result = PublishResult(messages_received=int(response.messages_received))
        self._logger.info("Successfully published messages", received=result.messages_received)
        return result

    @staticmethod
    def _validate(batch: list[Message]) -> None:
        if not batch:
            raise TogoMQError.validation("Messages cannot be empty")
        for message in batch:
            if not isinstance(message, Message):
                raise TogoMQError.validation("All items must be Message instances")
            if not message.topic:
                raise TogoMQError.validation("Message topic is required")
