"""Unit tests for FakeClock."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from maxretry.testing import FakeClock, InMemoryBroker


class TestFakeClock:
    def test_starts_at_known_instant(self) -> None:
        assert FakeClock().now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_custom_start(self) -> None:
        start = datetime(2030, 6, 1, tzinfo=UTC)
        assert FakeClock(start).timestamp() == start.timestamp()

    def test_naive_start_rejected(self) -> None:
        with pytest.raises(ValueError):
            FakeClock(datetime(2030, 6, 1))

    def test_advance_moves_forward(self) -> None:
        clock = FakeClock()
        before = clock.timestamp()
        clock.advance(2.5)
        assert clock.timestamp() - before == pytest.approx(2.5)

    def test_cannot_go_backwards(self) -> None:
        with pytest.raises(ValueError):
            FakeClock().advance(-1)

    def test_instances_are_independent(self) -> None:
        a, b = FakeClock(), FakeClock()
        a.advance(10)
        assert b.now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_broker_uses_supplied_clock(self) -> None:
        clock = FakeClock()
        broker = InMemoryBroker(clock)
        broker.advance(30)
        assert clock.now() == datetime(2026, 1, 1, 12, 0, 30, tzinfo=UTC)
