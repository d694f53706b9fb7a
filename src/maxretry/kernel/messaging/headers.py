"""Kernel messaging – retry counter header schema.

The retry count travels untyped inside AMQP headers. ``RetryCounter`` gives
it a strict schema: a non-negative integer, with every absent or malformed
value read as ``0``.

Two sources are consulted, in order:

1. ``x-death`` – maintained by the broker each time a message is
   dead-lettered. The entry for the retry queue with reason ``expired`` counts
   completed trips through the retry queue.
2. ``x-retry-count`` – written by this library on copies it publishes itself
   (error queue copies).
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

X_DEATH = "x-death"
X_RETRY_COUNT = "x-retry-count"
X_FAILURE_REASON = "x-failure-reason"
X_ORIGINAL_QUEUE = "x-original-queue"

EXPIRED = "expired"


def _text(value: Any) -> str | None:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", "replace")
    if isinstance(value, str):
        return value
    return None


def coerce_count(value: Any) -> int | None:
    """Return *value* as a non-negative ``int`` or ``None`` when malformed."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float):
        return int(value) if value.is_integer() and value >= 0 else None
    text = _text(value)
    if text is None:
        return None
    try:
        count = int(text.strip())
    except ValueError:
        return None
    return count if count >= 0 else None


class RetryCounter:
    """Typed accessor for the per-message retry counter."""

    def __init__(self, retry_queue: str) -> None:
        self.retry_queue = retry_queue

    def read(self, headers: Mapping[str, Any] | None) -> int:
        """Return the number of retries already completed (``>= 0``)."""
        if not headers:
            return 0

        deaths = headers.get(X_DEATH)
        if isinstance(deaths, (list, tuple)):
            for entry in deaths:
                if not isinstance(entry, Mapping):
                    continue
                if _text(entry.get("queue")) != self.retry_queue:
                    continue
                if _text(entry.get("reason")) != EXPIRED:
                    continue
                count = coerce_count(entry.get("count"))
                if count is not None:
                    return count
                break

        count = coerce_count(headers.get(X_RETRY_COUNT))
        return count if count is not None else 0

    @staticmethod
    def write(headers: Mapping[str, Any] | None, count: int) -> dict[str, Any]:
        """Return a copy of *headers* carrying ``x-retry-count = count``."""
        if count < 0:
            raise ValueError(f"retry count must be >= 0, got {count}")
        updated = dict(headers or {})
        updated[X_RETRY_COUNT] = count
        return updated


__all__ = [
    "EXPIRED",
    "RetryCounter",
    "X_DEATH",
    "X_FAILURE_REASON",
    "X_ORIGINAL_QUEUE",
    "X_RETRY_COUNT",
    "coerce_count",
]
