"""RabbitMQ adapter – deferred aio-pika import."""
from __future__ import annotations

from typing import Any


def require_aio_pika() -> Any:
    try:
        import aio_pika  # type: ignore[import-untyped]
        return aio_pika
    except ImportError as exc:
        raise ImportError("Install 'maxretry[rabbitmq]' (aio-pika) to use this adapter") from exc


__all__ = ["require_aio_pika"]
