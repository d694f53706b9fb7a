"""Resilience – TimeoutPolicy."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, Callable, TypeVar

from maxretry.kernel.errors import ProcessingTimeoutError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    """Bound an awaitable by ``timeout_seconds`` (``None`` means unbounded)."""
    timeout_seconds: float | None

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        if self.timeout_seconds is None:
            return await func()
        try:
            return await asyncio.wait_for(func(), timeout=self.timeout_seconds)
        except TimeoutError as exc:
            raise ProcessingTimeoutError(
                f"Processing timed out after {self.timeout_seconds}s",
                timeout_seconds=self.timeout_seconds,
            ) from exc


__all__ = ["TimeoutPolicy"]
