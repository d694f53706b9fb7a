"""Testing fakes – in-memory broker and drivers."""
from maxretry.testing.fakes.broker import (
    DeliveryRecord,
    InMemoryBroker,
    InMemoryDelivery,
    InMemoryErrorSink,
    MessageAlreadyProcessedError,
    StoredMessage,
    UnroutableError,
)
from maxretry.testing.fakes.clock import FakeClock
from maxretry.testing.fakes.consumer import InMemoryConsumer

__all__ = [
    "DeliveryRecord",
    "FakeClock",
    "InMemoryBroker",
    "InMemoryConsumer",
    "InMemoryDelivery",
    "InMemoryErrorSink",
    "MessageAlreadyProcessedError",
    "StoredMessage",
    "UnroutableError",
]
