"""Consumer – WorkerPool running N independent consumers."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from maxretry.observability.logging import get_logger

logger = get_logger(__name__)


class WorkerPool:
    """Run *workers* copies of ``consume(index)`` concurrently.

    Consumers share nothing but the broker. The first consumer that fails
    stops the whole pool and its exception is re-raised from :meth:`run`;
    :meth:`stop` cancels every consumer and makes :meth:`run` return.
    """

    def __init__(self, workers: int, consume: Callable[[int], Awaitable[None]]) -> None:
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self.workers = workers
        self._consume = consume
        self._tasks: list[asyncio.Task[None]] = []
        self._stopping = False

    @property
    def running(self) -> int:
        return sum(1 for t in self._tasks if not t.done())

    async def run(self) -> None:
        self._stopping = False
        self._tasks = [
            asyncio.create_task(self._guard(i), name=f"maxretry-worker-{i}")
            for i in range(self.workers)
        ]
        logger.info("worker_pool.started", workers=self.workers)
        try:
            done, _ = await asyncio.wait(self._tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            await self._cancel_all()

        for task in done:
            if task.cancelled():
                continue
            exc = task.exception()
            if exc is not None and not self._stopping:
                logger.error("worker_pool.worker_failed", worker=task.get_name(), error=str(exc))
                raise exc
        logger.info("worker_pool.stopped", workers=self.workers)

    async def _guard(self, index: int) -> None:
        try:
            await self._consume(index)
        except asyncio.CancelledError as exc:
            task = asyncio.current_task()
            if self._stopping or (task is not None and task.cancelling()):
                raise
            raise RuntimeError(f"Consumer {index} stopped on a stray CancelledError") from exc

    async def stop(self) -> None:
        self._stopping = True
        await self._cancel_all()

    async def _cancel_all(self) -> None:
        pending = [t for t in self._tasks if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)


__all__ = ["WorkerPool"]
