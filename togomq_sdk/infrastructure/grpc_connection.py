"""gRPC adapter - concrete implementation of ConnectionPort."""

from __future__ import annotations

import grpc

from ..domain.exceptions import TogoMQError
from ..ports.connection import ConnectionPort, StreamingCall
from . import wire
from .config import Config


class GrpcConnection(ConnectionPort):
    """TLS gRPC channel to ``mq.v1.MqService`` with bearer-token metadata."""

    def __init__(self, config: Config, credentials: grpc.ChannelCredentials | None = None):
        """Create the channel.

        Args:
            config: Client configuration (address and token)
            credentials: Channel credentials. Defaults to system TLS roots.
        """
        self._config = config
        self._metadata = (("authorization", f"Bearer {config.token}"),)
        self._channel = grpc.secure_channel(
            config.address, credentials or grpc.ssl_channel_credentials()
        )
        self._pub = self._channel.unary_unary(
            wire.PUB_METHOD,
            request_serializer=wire.PubRequest.SerializeToString,
            response_deserializer=wire.PubResponse.FromString,
        )
        self._sub = self._channel.unary_stream(
            wire.SUB_METHOD,
            request_serializer=wire.SubRequest.SerializeToString,
            response_deserializer=wire.SubResponse.FromString,
        )
        self._closed = False

    @property
    def metadata(self) -> tuple[tuple[str, str], ...]:
        """Call metadata attached to every RPC."""
        return self._metadata

    @property
    def is_closed(self) -> bool:
        return self._closed

    def publish(self, request):
        """Blocking ``Pub`` call; non-OK statuses raise ``grpc.RpcError``."""
        self._ensure_open()
        response, _call = self._pub.with_call(request, metadata=self._metadata)
        return response

    def subscribe(self, request) -> StreamingCall:
        self._ensure_open()
        return self._sub(request, metadata=self._metadata)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._channel.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise TogoMQError.connection(f"Connection to {self._config.address} is closed")
