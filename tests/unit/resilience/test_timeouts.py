"""Unit tests for TimeoutPolicy."""

from __future__ import annotations

import asyncio

import pytest

from maxretry.kernel.errors import ProcessingTimeoutError
from maxretry.resilience.timeouts import TimeoutPolicy


class TestTimeoutPolicy:
    def test_returns_result_within_bound(self) -> None:
        async def work() -> int:
            return 42

        assert asyncio.run(TimeoutPolicy(1.0).execute(work)) == 42

    def test_raises_processing_timeout(self) -> None:
        async def slow() -> None:
            await asyncio.sleep(1)

        with pytest.raises(ProcessingTimeoutError) as exc_info:
            asyncio.run(TimeoutPolicy(0.01).execute(slow))
        assert exc_info.value.timeout_seconds == 0.01

    def test_none_disables_bound(self) -> None:
        async def work() -> str:
            await asyncio.sleep(0)
            return "done"

        assert asyncio.run(TimeoutPolicy(None).execute(work)) == "done"

    def test_other_errors_propagate(self) -> None:
        async def broken() -> None:
            raise KeyError("x")

        with pytest.raises(KeyError):
            asyncio.run(TimeoutPolicy(1.0).execute(broken))
