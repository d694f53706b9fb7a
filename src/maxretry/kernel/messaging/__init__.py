"""Kernel messaging – message model, retry counter, queue topology."""
from maxretry.kernel.messaging.headers import (
    X_DEATH,
    X_FAILURE_REASON,
    X_ORIGINAL_QUEUE,
    X_RETRY_COUNT,
    RetryCounter,
)
from maxretry.kernel.messaging.message import (
    Delivery,
    ErrorSink,
    HandlerResult,
    Message,
    MessageBus,
    MessageId,
    RouteDecision,
)
from maxretry.kernel.messaging.topology import QueueTopology

__all__ = [
    "Delivery",
    "ErrorSink",
    "HandlerResult",
    "Message",
    "MessageBus",
    "MessageId",
    "QueueTopology",
    "RetryCounter",
    "RouteDecision",
    "X_DEATH",
    "X_FAILURE_REASON",
    "X_ORIGINAL_QUEUE",
    "X_RETRY_COUNT",
]
