"""Testing support – an in-memory broker for exercising retry flows.

Usage::

    from maxretry.testing import InMemoryConsumer

    consumer = InMemoryConsumer.create(handler, RetryPolicy(error_queue_name="orders-error"))
    consumer.produce(Message(payload=b"..."))
    await consumer.run_until_settled()
"""

from maxretry.testing.fakes import (
    FakeClock,
    InMemoryBroker,
    InMemoryConsumer,
    InMemoryDelivery,
    InMemoryErrorSink,
    MessageAlreadyProcessedError,
)

__all__ = [
    "FakeClock",
    "InMemoryBroker",
    "InMemoryConsumer",
    "InMemoryDelivery",
    "InMemoryErrorSink",
    "MessageAlreadyProcessedError",
]
