"""Streaming subscription use case.

A subscription is a pull-driven iterator. Each ``next()`` blocks until the
server pushes data; server batches are flattened into one ordered sequence of
messages. Stopping early (``close()``, leaving a ``with`` block, or dropping
the iterator after ``break``) cancels the underlying call without raising.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator

from ..domain.enums import ErrorKind
from ..domain.exceptions import TogoMQError
from ..domain.models import Message, SubscribeOptions
from ..infrastructure import wire
from ..infrastructure.error_mapper import map_transport_error
from ..ports.connection import ConnectionPort, StreamingCall
from ..ports.logger import LoggerPort


class SubscriptionStream(Iterator[Message]):
    """Closeable iterator over the messages of one ``Sub`` call."""

    def __init__(self, call: StreamingCall, logger: LoggerPort):
        self._call = call
        self._logger = logger
        self._cancelled = threading.Event()
        self._finished = threading.Event()
        # The generator must not reference self, so dropping the stream finalizes it
        self._messages = _read_messages(call, logger, self._cancelled, self._finished)

    @classmethod
    def open(
        cls, connection: ConnectionPort, options: SubscribeOptions, logger: LoggerPort
    ) -> SubscriptionStream:
        """Validate ``options`` and open the streaming call.

        Raises:
            TogoMQError: VALIDATION if the topic is empty (no call is made);
                SUBSCRIBE (or AUTH) if the call cannot be opened
        """
        if not options.topic:
            raise TogoMQError.validation("Topic is required for subscription")

        logger.info(
            "Starting subscription",
            topic=options.topic,
            batch=options.batch,
            speed_per_sec=options.speed_per_sec,
        )
        try:
            call = connection.subscribe(wire.build_sub_request(options))
        except TogoMQError:
            raise
        except Exception as e:
            raise map_transport_error(e, ErrorKind.SUBSCRIBE, "open subscription") from e

        logger.debug("Subscription stream started")
        return cls(call, logger)

    @property
    def closed(self) -> bool:
        """True once the stream was cancelled, ended by the server, or failed."""
        return self._cancelled.is_set() or self._finished.is_set()

    def __iter__(self) -> SubscriptionStream:
        return self

    def __next__(self) -> Message:
        return next(self._messages)

    def cancel(self) -> None:
        """Cancel the underlying call.

        Safe to call from another thread: a consumer blocked in ``next()``
        wakes up and its iteration ends cleanly.
        """
        if self._cancelled.is_set():
            return
        self._cancelled.set()
        self._call.cancel()

    def close(self) -> None:
        """Cancel the call and finish the iterator. Must run on the consuming thread."""
        self.cancel()
        self._messages.close()

    def __enter__(self) -> SubscriptionStream:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _read_messages(
    call: StreamingCall,
    logger: LoggerPort,
    cancelled: threading.Event,
    finished: threading.Event,
) -> Iterator[Message]:
    try:
        for response in call:
            for item in response.messages:
                message = wire.from_wire(item)
                logger.debug("Received message", topic=message.topic, uuid=message.uuid)
                yield message
    except Exception as e:
        if cancelled.is_set():
            logger.debug("Subscription cancelled")
            return
        logger.error("Subscription error", error=str(e))
        raise map_transport_error(e, ErrorKind.SUBSCRIBE, "read subscription stream") from e
    else:
        logger.info("Subscription stream ended")
    finally:
        finished.set()
        call.cancel()
