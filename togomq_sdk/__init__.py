"""TogoMQ SDK - publish and subscribe to TogoMQ topics over gRPC."""

from .application.client import Client
from .application.subscription import SubscriptionStream
from .domain.enums import ErrorKind, LogLevel
from .domain.exceptions import TogoMQError
from .domain.models import Message, PublishResult, SubscribeOptions
from .infrastructure.config import Config

__all__ = [
    "Client",
    "Config",
    "ErrorKind",
    "LogLevel",
    "Message",
    "PublishResult",
    "SubscribeOptions",
    "SubscriptionStream",
    "TogoMQError",
]
__version__ = "0.1.0"
