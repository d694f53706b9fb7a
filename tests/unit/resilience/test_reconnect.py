"""Unit tests for ReconnectPolicy (tenacity-backed)."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest
import tenacity

from maxretry.kernel.errors import BrokerConnectionError
from maxretry.resilience.reconnect import ReconnectPolicy


def _policy(attempts: int) -> ReconnectPolicy:
    return ReconnectPolicy(max_attempts=attempts, wait=tenacity.wait_none())


class TestReconnectPolicy:
    def test_success_first_try(self) -> None:
        connect = AsyncMock(return_value="conn")
        assert asyncio.run(_policy(3).connect("amqp://x", connect)) == "conn"
        connect.assert_awaited_once()

    def test_retries_then_succeeds(self) -> None:
        connect = AsyncMock(side_effect=[ConnectionError("refused"), OSError("reset"), "conn"])
        assert asyncio.run(_policy(3).connect("amqp://x", connect)) == "conn"
        assert connect.await_count == 3

    def test_exhausted_raises_broker_connection_error(self) -> None:
        connect = AsyncMock(side_effect=ConnectionError("refused"))
        with pytest.raises(BrokerConnectionError) as exc_info:
            asyncio.run(_policy(2).connect("amqp://x", connect))
        assert exc_info.value.url == "amqp://x"
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert connect.await_count == 2

    def test_non_retryable_propagates_immediately(self) -> None:
        connect = AsyncMock(side_effect=ValueError("bad url"))
        with pytest.raises(ValueError):
            asyncio.run(_policy(5).connect("amqp://x", connect))
        connect.assert_awaited_once()

    def test_invalid_attempts(self) -> None:
        with pytest.raises(ValueError):
            ReconnectPolicy(max_attempts=0)
