"""Infrastructure adapters: gRPC connection, wire schema, config and logging."""

from .config import Config
from .error_mapper import map_transport_error
from .grpc_connection import GrpcConnection
from .simple_logger import SimpleLogger

__all__ = ["Config", "GrpcConnection", "SimpleLogger", "map_transport_error"]
