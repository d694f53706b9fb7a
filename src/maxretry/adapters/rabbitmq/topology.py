"""RabbitMQ adapter – declare the primary/retry/error topology."""
from __future__ import annotations

from typing import Any

from maxretry.adapters.rabbitmq import _loader
from maxretry.kernel.errors import TopologyError
from maxretry.kernel.messaging import QueueTopology
from maxretry.observability.logging import get_logger

logger = get_logger(__name__)


async def declare_topology(channel: Any, topology: QueueTopology, *, durable: bool = True) -> dict[str, Any]:
    """Declare exchanges, queues and bindings; return queues by name.

    Re-declaring an existing queue with different arguments (for example a
    primary queue created earlier without a dead-letter exchange) fails with
    ``PRECONDITION_FAILED`` on the broker and is surfaced as
    :class:`~maxretry.kernel.errors.TopologyError`.
    """
    aio_pika = _loader.require_aio_pika()
    topology.validate()

    exchanges: dict[str, Any] = {}
    queues: dict[str, Any] = {}
    try:
        for name in topology.exchanges():
            exchanges[name] = await channel.declare_exchange(
                name, aio_pika.ExchangeType.FANOUT, durable=durable
            )
        for name, arguments in topology.queues():
            queues[name] = await channel.declare_queue(
                name, durable=durable, arguments=arguments
            )
        for exchange, queue in topology.bindings():
            await queues[queue].bind(exchanges[exchange])
    except Exception as exc:
        raise TopologyError(
            f"Failed to declare topology for '{topology.primary}': {exc}",
            detail={"primary": topology.primary, "retry": topology.retry, "error": topology.error},
            cause=exc,
        ) from exc

    logger.info(
        "topology.declared",
        primary=topology.primary,
        retry=topology.retry,
        error=topology.error,
        retry_delay_ms=topology.retry_delay_ms,
    )
    return queues


__all__ = ["declare_topology"]
