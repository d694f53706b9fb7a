"""Kernel messaging – message primitives and bus ports."""
from __future__ import annotations

import abc
import dataclasses
from enum import Enum
from typing import Any, Protocol, TypeAlias
from uuid import uuid4

MessageId: TypeAlias = str


class RouteDecision(str, Enum):
    """Where a failed message goes next."""

    REQUEUE = "requeue"
    ERROR = "error"


class HandlerResult(str, Enum):
    """Explicit outcome a handler may return instead of raising."""

    ACK = "ack"
    REJECT = "reject"


class Delivery(Protocol):
    """Port: one broker delivery, shaped like ``aio_pika.IncomingMessage``."""

    body: bytes
    headers: dict[str, Any]
    message_id: str | None
    routing_key: str | None
    delivery_tag: int | None
    redelivered: bool | None

    async def ack(self, multiple: bool = False) -> None: ...
    async def reject(self, requeue: bool = False) -> None: ...


@dataclasses.dataclass(frozen=True)
class Message:
    """Typed view of a delivery handed to the user handler."""

    payload: bytes = b""
    headers: dict[str, Any] = dataclasses.field(default_factory=dict)
    retry_count: int = 0
    original_queue: str = ""
    message_id: MessageId = dataclasses.field(default_factory=lambda: str(uuid4()))
    routing_key: str = ""
    delivery_tag: int | None = None
    redelivered: bool = False

    def __post_init__(self) -> None:
        if self.retry_count < 0:
            raise ValueError(f"retry_count must be >= 0, got {self.retry_count}")

    @classmethod
    def from_delivery(cls, delivery: Delivery, *, queue: str, retry_count: int) -> "Message":
        return cls(
            payload=bytes(delivery.body),
            headers=dict(delivery.headers or {}),
            retry_count=retry_count,
            original_queue=queue,
            message_id=delivery.message_id or str(uuid4()),
            routing_key=delivery.routing_key or "",
            delivery_tag=delivery.delivery_tag,
            redelivered=bool(delivery.redelivered),
        )


class MessageBus(abc.ABC):
    """Port: publish messages onto the primary queue."""

    @abc.abstractmethod
    async def publish(self, message: Message) -> None: ...

    @abc.abstractmethod
    async def publish_batch(self, messages: list[Message]) -> None: ...


class ErrorSink(abc.ABC):
    """Port: terminal placement of a message that exhausted its retries."""

    @abc.abstractmethod
    async def publish(self, message: Message, headers: dict[str, Any]) -> None:
        """Place *message* in the error queue with *headers*.

        Raises :class:`~maxretry.kernel.errors.ErrorQueueUnavailableError`
        when the error queue cannot accept it.
        """
        ...


__all__ = [
    "Delivery",
    "ErrorSink",
    "HandlerResult",
    "Message",
    "MessageBus",
    "MessageId",
    "RouteDecision",
]
