"""Connection port - contract for the RPC channel used by the SDK."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, Protocol


class StreamingCall(Protocol):
    """A server-streaming call: iterable of responses that can be cancelled."""

    def __iter__(self) -> Iterator[Any]: ...

    def cancel(self) -> bool: ...


class ConnectionPort(ABC):
    """Abstract interface over the ``mq.v1.MqService`` RPC channel.

    A connection owns the channel and the authentication metadata. It supports
    sequential reuse; concurrent calls need external synchronization.
    """

    @abstractmethod
    def publish(self, request: Any) -> Any:
        """Issue a unary ``Pub`` call and return the ``PubResponse``."""
        ...

    @abstractmethod
    def subscribe(self, request: Any) -> StreamingCall:
        """Open a server-streaming ``Sub`` call."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the underlying channel."""
        ...

    @property
    @abstractmethod
    def is_closed(self) -> bool:
        """Whether :meth:`close` has been called."""
        ...
