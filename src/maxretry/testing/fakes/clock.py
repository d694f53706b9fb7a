"""Testing fakes – FakeClock driving broker TTL expiry."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

EPOCH = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class FakeClock:
    """Manually advanced clock; time only moves when a test calls :meth:`advance`.

    :class:`~maxretry.testing.InMemoryBroker` stamps every enqueued message
    with :meth:`timestamp` and compares it against the queue's
    ``x-message-ttl``, so advancing this clock is what releases messages
    from the retry queue.
    """

    def __init__(self, start: datetime = EPOCH) -> None:
        if start.tzinfo is None:
            raise ValueError("FakeClock needs a timezone-aware start")
        self._now = start

    def now(self) -> datetime:
        return self._now

    def timestamp(self) -> float:
        return self._now.timestamp()

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("a clock cannot go backwards")
        self._now += timedelta(seconds=seconds)


__all__ = ["EPOCH", "FakeClock"]
