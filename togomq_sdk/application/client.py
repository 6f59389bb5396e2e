"""TogoMQ client facade for publishing and subscribing."""

from __future__ import annotations

import itertools
from collections.abc import Iterable

from ..domain.exceptions import TogoMQError
from ..domain.models import Message, PublishResult, SubscribeOptions
from ..infrastructure.config import Config
from ..infrastructure.grpc_connection import GrpcConnection
from ..infrastructure.simple_logger import SimpleLogger
from ..ports.connection import ConnectionPort
from ..ports.logger import LoggerPort
from .publisher import BatchPublisher
from .subscription import SubscriptionStream

_client_ids = itertools.count(1)


class Client:
    """Client owning one connection to a TogoMQ server.

    The connection is shared by every call made through the client and is
    released by :meth:`close` (or by leaving a ``with`` block). Calls are
    blocking and must not be issued concurrently from several threads
    without external locking.

    Example:
        >>> with Client(Config("my-token")) as client:
        ...     client.publish([Message("orders", b"{}")])
        ...     with client.subscribe(SubscribeOptions("orders.*")) as stream:
        ...         for message in stream:
        ...             print(message.topic, message.body)
    """

    def __init__(
        self,
        config: Config,
        connection: ConnectionPort | None = None,
        logger: LoggerPort | None = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration
            connection: Connection to use. If not provided, a TLS gRPC
                connection to ``config.address`` is created.
            logger: Logger to use. Defaults to a SimpleLogger named
                ``togomq_sdk.client.<n>`` at ``config.log_level``.

        Raises:
            TogoMQError: CONNECTION if the channel cannot be set up
        """
        self._config = config
        # One child logger per client; levels are independent
        self._logger = logger or SimpleLogger(
            name=f"togomq_sdk.client.{next(_client_ids)}", level=config.log_level
        )
        self._logger.info("Initializing TogoMQ client", host=config.host, port=config.port)

        try:
            self._connection = connection or GrpcConnection(config)
        except Exception as e:
            raise TogoMQError.connection(f"Failed to initialize TogoMQ client: {e}", e) from e

        self._publisher = BatchPublisher(self._connection, self._logger)
        self._closed = False
        self._logger.debug("TogoMQ client initialized successfully")

    @property
    def config(self) -> Config:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def publish(self, messages: Iterable[Message]) -> PublishResult:
        """Publish a batch of messages in one call.

        See :meth:`BatchPublisher.publish`. A failed call raises PUBLISH, or
        AUTH when the server rejects the token; ``details["status"]`` holds
        the gRPC status name either way.
        """
        self._ensure_open()
        return self._publisher.publish(messages)

    def subscribe(self, options: SubscribeOptions) -> SubscriptionStream:
        """Subscribe to a topic or wildcard pattern.

        Returns:
            A closeable iterator yielding messages as they arrive

        Raises:
            TogoMQError: VALIDATION for an empty topic; SUBSCRIBE, or AUTH
                when the server rejects the token
        """
        self._ensure_open()
        return SubscriptionStream.open(self._connection, options, self._logger)

    def close(self) -> None:
        """Close the client connection. Further calls raise CONNECTION errors."""
        if self._closed:
            return
        self._logger.debug("Closing TogoMQ client")
        self._closed = True
        self._connection.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise TogoMQError.connection("Client is closed")
