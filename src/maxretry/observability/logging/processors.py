"""Observability – get_logger helper and delivery context binding."""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


@contextmanager
def delivery_context(**fields: Any) -> Iterator[None]:
    """Bind *fields* (queue, message_id, ...) to every log line in the block."""
    with structlog.contextvars.bound_contextvars(**fields):
        yield


__all__ = ["delivery_context", "get_logger"]
