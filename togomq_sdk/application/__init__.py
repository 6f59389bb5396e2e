"""Application layer: client facade and publish/subscribe use cases."""

from .client import Client
from .publisher import BatchPublisher
from .subscription import SubscriptionStream

__all__ = ["BatchPublisher", "Client", "SubscriptionStream"]
