"""RabbitMQ adapter – RabbitMQWorker."""
from __future__ import annotations

from typing import Any

from maxretry.adapters.rabbitmq import _loader
from maxretry.adapters.rabbitmq.error_sink import RabbitMQErrorSink
from maxretry.adapters.rabbitmq.topology import declare_topology
from maxretry.config.settings import MaxRetrySettings
from maxretry.consumer import ConsumerHarness, Handler, WorkerPool
from maxretry.kernel.messaging import QueueTopology
from maxretry.observability.logging import get_logger
from maxretry.resilience.reconnect import ReconnectPolicy

logger = get_logger(__name__)


class RabbitMQWorker:
    """Consume a primary queue with bounded, broker-delayed retries.

    ``connect()`` declares the topology before any consumer starts, so a
    broken topology stops the worker before it accepts a single delivery.
    ``run()`` starts ``settings.workers`` consumers, each on its own channel
    with ``basic.qos(prefetch_count=settings.prefetch)``.

    Usage::

        settings = EnvSettingsLoader().load(MaxRetrySettings)
        async with RabbitMQWorker(settings, handle_order) as worker:
            await worker.run()
    """

    def __init__(
        self,
        settings: MaxRetrySettings,
        handler: Handler,
        reconnect_policy: ReconnectPolicy | None = None,
    ) -> None:
        _loader.require_aio_pika()
        self._settings = settings
        self._handler = handler
        self._topology = settings.to_topology()
        self._policy = settings.to_retry_policy()
        self._reconnect = reconnect_policy or ReconnectPolicy(
            max_attempts=settings.connect_attempts
        )
        self._connection: Any = None
        self._pool: WorkerPool | None = None

    @property
    def topology(self) -> QueueTopology:
        return self._topology

    async def connect(self) -> None:
        aio_pika = _loader.require_aio_pika()
        url = self._settings.amqp_url
        logger.info("worker.connecting", settings=self._settings.redacted())
        self._connection = await self._reconnect.connect(
            url, lambda: aio_pika.connect_robust(url)
        )
        channel = await self._connection.channel()
        try:
            await declare_topology(channel, self._topology, durable=self._settings.durable)
        finally:
            await channel.close()

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.stop()
        if self._connection:
            await self._connection.close()
            self._connection = None

    async def __aenter__(self) -> "RabbitMQWorker":
        await self.connect()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    async def run(self) -> None:
        if self._connection is None:
            await self.connect()
        self._pool = WorkerPool(self._settings.workers, self._consume)
        await self._pool.run()

    async def stop(self) -> None:
        if self._pool is not None:
            await self._pool.stop()

    async def _consume(self, index: int) -> None:
        channel = await self._connection.channel(
            publisher_confirms=True, on_return_raises=True
        )
        try:
            await channel.set_qos(prefetch_count=self._settings.prefetch)
            queue = await channel.declare_queue(
                self._topology.primary,
                durable=self._settings.durable,
                arguments=self._topology.primary_arguments(),
            )
            harness = ConsumerHarness(
                self._handler,
                self._topology,
                self._policy,
                RabbitMQErrorSink(channel, self._topology),
                max_threads=self._settings.prefetch,
            )
            logger.info(
                "worker.consuming",
                worker=index,
                queue=self._topology.primary,
                prefetch=self._settings.prefetch,
            )
            try:
                async with queue.iterator() as deliveries:
                    async for delivery in deliveries:
                        await harness.handle(delivery)
            finally:
                harness.close()
        finally:
            await channel.close()


__all__ = ["RabbitMQWorker"]
