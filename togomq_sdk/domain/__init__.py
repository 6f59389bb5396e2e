"""Domain layer: value objects, enums and the error taxonomy."""

from .enums import ErrorKind, LogLevel
from .exceptions import TogoMQError
from .models import Message, PublishResult, SubscribeOptions

__all__ = [
    "ErrorKind",
    "LogLevel",
    "Message",
    "PublishResult",
    "SubscribeOptions",
    "TogoMQError",
]
