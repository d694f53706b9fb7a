"""RabbitMQ adapter – RabbitMQErrorSink."""
from __future__ import annotations

from typing import Any

from maxretry.adapters.rabbitmq import _loader
from maxretry.kernel.errors import ErrorQueueUnavailableError
from maxretry.kernel.messaging import ErrorSink, Message, QueueTopology


class RabbitMQErrorSink(ErrorSink):
    """Publish exhausted messages to the error exchange.

    The channel should be opened with publisher confirms and
    ``on_return_raises=True`` so an unroutable or nacked publish raises
    instead of vanishing.
    """

    def __init__(self, channel: Any, topology: QueueTopology) -> None:
        self._channel = channel
        self._topology = topology
        self._exchange: Any = None

    async def _get_exchange(self) -> Any:
        if self._exchange is None:
            self._exchange = await self._channel.get_exchange(
                self._topology.error_exchange, ensure=False
            )
        return self._exchange

    async def publish(self, message: Message, headers: dict[str, Any]) -> None:
        aio_pika = _loader.require_aio_pika()
        try:
            exchange = await self._get_exchange()
            await exchange.publish(
                aio_pika.Message(
                    body=message.payload,
                    headers=headers,
                    message_id=message.message_id,
                    delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
                ),
                routing_key=self._topology.error,
                mandatory=True,
            )
        except Exception as exc:
            raise ErrorQueueUnavailableError(self._topology.error, cause=exc) from exc


__all__ = ["RabbitMQErrorSink"]
