"""Resilience – ReconnectPolicy for opening broker connections.

Backed by ``tenacity``. Only the initial connect is retried here; once
connected, ``aio_pika.connect_robust`` handles reconnection itself.
"""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, TypeVar

import tenacity

from maxretry.kernel.errors import BrokerConnectionError

T = TypeVar("T")
logger = logging.getLogger(__name__)


class ReconnectPolicy:
    """Retry an async connect call with exponential backoff.

    Parameters
    ----------
    max_attempts:
        Maximum number of connect attempts (including the first one).
    wait:
        A ``tenacity`` wait strategy. Defaults to
        ``wait_exponential(multiplier=0.5, max=10)``.
    retry_on:
        Exception types that trigger another attempt.
    """

    def __init__(
        self,
        max_attempts: int = 5,
        wait: Any = None,
        retry_on: tuple[type[BaseException], ...] = (OSError, ConnectionError),
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.max_attempts = max_attempts
        self._wait = wait if wait is not None else tenacity.wait_exponential(multiplier=0.5, max=10)
        self._retry_on = retry_on

    def _build_async_retrying(self) -> tenacity.AsyncRetrying:
        return tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self.max_attempts),
            wait=self._wait,
            retry=tenacity.retry_if_exception_type(self._retry_on),
            before_sleep=tenacity.before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    async def connect(self, url: str, func: Callable[[], Awaitable[T]]) -> T:
        """Run *func* until it succeeds or attempts run out.

        Exhaustion of a retryable failure raises
        :class:`~maxretry.kernel.errors.BrokerConnectionError`.
        """
        try:
            async for attempt in self._build_async_retrying():
                with attempt:
                    result = await func()
        except self._retry_on as exc:
            raise BrokerConnectionError(url, cause=exc) from exc
        return result  # type: ignore[possibly-undefined]


__all__ = ["ReconnectPolicy"]
