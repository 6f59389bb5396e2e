"""Ports (interfaces) for the TogoMQ SDK."""

from .connection import ConnectionPort, StreamingCall
from .logger import LoggerPort

__all__ = ["ConnectionPort", "LoggerPort", "StreamingCall"]
