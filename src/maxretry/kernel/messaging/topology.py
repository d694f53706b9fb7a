"""Kernel messaging – QueueTopology.

Three queues wired together by dead-letter routing::

    <name>  --reject-->  <name>-retry exchange  -->  <name>-retry queue
       ^                                                   |
       |                                          x-message-ttl expiry
       +------  <name>-retry-requeue exchange  <-----------+

    <name>-error exchange  -->  <name>-error queue   (terminal)

All exchanges are fanout so dead-lettered messages keep their original
routing key without it affecting where they land.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from maxretry.kernel.errors import TopologyError

X_DEAD_LETTER_EXCHANGE = "x-dead-letter-exchange"
X_MESSAGE_TTL = "x-message-ttl"

FANOUT = "fanout"


@dataclasses.dataclass(frozen=True)
class QueueTopology:
    """Names and declaration arguments of the primary/retry/error queues."""

    primary: str
    retry: str
    error: str
    retry_delay_ms: int
    requeue_suffix: str = "-requeue"

    @classmethod
    def from_base_name(
        cls,
        name: str,
        *,
        retry_delay: float,
        retry_suffix: str = "-retry",
        error_suffix: str = "-error",
    ) -> "QueueTopology":
        topology = cls(
            primary=name,
            retry=f"{name}{retry_suffix}",
            error=f"{name}{error_suffix}",
            retry_delay_ms=int(round(retry_delay * 1000)),
        )
        topology.validate()
        return topology

    @property
    def retry_exchange(self) -> str:
        return self.retry

    @property
    def requeue_exchange(self) -> str:
        return f"{self.retry}{self.requeue_suffix}"

    @property
    def error_exchange(self) -> str:
        return self.error

    def validate(self) -> None:
        names = {
            "primary": self.primary,
            "retry": self.retry,
            "error": self.error,
        }
        for role, value in names.items():
            if not value or not value.strip():
                raise TopologyError(f"{role} queue name must not be empty")
        if len(set(names.values())) != len(names):
            raise TopologyError(
                "primary, retry and error queue names must be distinct",
                detail=names,
            )
        if self.requeue_exchange in names.values():
            raise TopologyError(
                f"requeue exchange '{self.requeue_exchange}' collides with a queue name"
            )
        if self.retry_delay_ms <= 0:
            raise TopologyError(
                f"retry delay must be positive, got {self.retry_delay_ms}ms"
            )

    def primary_arguments(self) -> dict[str, Any]:
        return {X_DEAD_LETTER_EXCHANGE: self.retry_exchange}

    def retry_arguments(self) -> dict[str, Any]:
        return {
            X_DEAD_LETTER_EXCHANGE: self.requeue_exchange,
            X_MESSAGE_TTL: self.retry_delay_ms,
        }

    def error_arguments(self) -> dict[str, Any]:
        return {}

    def exchanges(self) -> list[str]:
        return [self.retry_exchange, self.requeue_exchange, self.error_exchange]

    def queues(self) -> list[tuple[str, dict[str, Any]]]:
        """``(queue, arguments)`` in declaration order."""
        return [
            (self.primary, self.primary_arguments()),
            (self.retry, self.retry_arguments()),
            (self.error, self.error_arguments()),
        ]

    def bindings(self) -> list[tuple[str, str]]:
        """``(exchange, queue)`` pairs."""
        return [
            (self.retry_exchange, self.retry),
            (self.requeue_exchange, self.primary),
            (self.error_exchange, self.error),
        ]


__all__ = ["FANOUT", "QueueTopology", "X_DEAD_LETTER_EXCHANGE", "X_MESSAGE_TTL"]
