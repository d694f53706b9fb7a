"""Consumer – ConsumerHarness.

Runs the user handler for one delivery and settles it exactly once:

* success            -> ``ack``
* failure, budget    -> ``reject(requeue=False)``; the primary queue's
                        dead-letter exchange moves it to the retry queue
* failure, exhausted -> copy published to the error exchange, then ``ack``

Failures include handler exceptions, an explicit
:attr:`~maxretry.kernel.messaging.HandlerResult.REJECT`, timeouts and
cancellation. None of them propagate past :meth:`ConsumerHarness.handle`.
The only error that does is
:class:`~maxretry.kernel.errors.ErrorQueueUnavailableError`, after the
delivery has been put back on the primary queue.

Synchronous handlers run on a thread pool owned by the harness. The time
bound starts when a thread picks the message up, so a handler thread that
outlives its timeout delays later messages but never charges them an
attempt.
"""
from __future__ import annotations

import asyncio
import inspect
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Any, Awaitable, Callable, Union

from maxretry.kernel.errors import (
    BaseError,
    ErrorQueueUnavailableError,
    ProcessingError,
    TopologyError,
)
from maxretry.kernel.messaging import (
    X_FAILURE_REASON,
    X_ORIGINAL_QUEUE,
    Delivery,
    ErrorSink,
    HandlerResult,
    Message,
    QueueTopology,
    RetryCounter,
    RouteDecision,
)
from maxretry.observability.logging import delivery_context, get_logger
from maxretry.resilience.maxretry import DispatchPolicy, RetryPolicy
from maxretry.resilience.timeouts import TimeoutPolicy

Handler = Callable[[Message], Union[Awaitable[Any], Any]]

_MAX_REASON_LENGTH = 1024


class Disposition(str, Enum):
    """Terminal outcome of one delivery."""

    ACKED = "acked"
    RETRIED = "retried"
    ERRORED = "errored"


def describe_failure(exc: BaseException) -> str:
    if isinstance(exc, BaseError):
        text = str(exc)
    else:
        text = f"{type(exc).__name__}: {exc}"
    return text[:_MAX_REASON_LENGTH]


def _is_async(handler: Handler) -> bool:
    return inspect.iscoroutinefunction(handler) or inspect.iscoroutinefunction(
        getattr(handler, "__call__", None)
    )


class ConsumerHarness:
    """Wrap a handler with bounded retry, timeout and error-queue placement.

    One harness serves one channel. Harnesses share the immutable
    :class:`RetryPolicy` and :class:`QueueTopology` but nothing mutable.
    ``max_threads`` bounds the pool used for synchronous handlers; the
    RabbitMQ worker sizes it to the channel prefetch.
    """

    def __init__(
        self,
        handler: Handler,
        topology: QueueTopology,
        policy: RetryPolicy,
        error_sink: ErrorSink,
        *,
        max_threads: int = 1,
    ) -> None:
        if policy.error_queue_name != topology.error:
            raise TopologyError(
                f"Retry policy error queue '{policy.error_queue_name}' does not match "
                f"topology error queue '{topology.error}'"
            )
        if max_threads < 1:
            raise ValueError("max_threads must be >= 1")
        self._handler = handler
        self._topology = topology
        self._policy = policy
        self._error_sink = error_sink
        self._counter = RetryCounter(topology.retry)
        self._dispatch = DispatchPolicy(policy, self._counter)
        self._timeout = TimeoutPolicy(policy.timeout)
        self._executor: ThreadPoolExecutor | None = None
        if not _is_async(handler):
            self._executor = ThreadPoolExecutor(
                max_workers=max_threads, thread_name_prefix=f"maxretry-{topology.primary}"
            )
        self._log = get_logger(__name__)

    @property
    def topology(self) -> QueueTopology:
        return self._topology

    def close(self) -> None:
        """Release the handler thread pool; running handlers finish on their own."""
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)

    async def handle(self, delivery: Delivery) -> Disposition:
        retry_count = self._counter.read(delivery.headers)
        message = Message.from_delivery(
            delivery, queue=self._topology.primary, retry_count=retry_count
        )
        with delivery_context(
            queue=self._topology.primary,
            message_id=message.message_id,
            retry_count=retry_count,
        ):
            try:
                failure = await self._process(message)
            except asyncio.CancelledError:
                task = asyncio.current_task()
                if task is not None and task.cancelling():
                    await self._fail(delivery, message, ProcessingError("Processing cancelled"))
                    raise
                # raised by the handler itself, not a cancellation of this task
                failure = ProcessingError("Handler raised CancelledError")

            if failure is None:
                await delivery.ack()
                self._log.debug("message.acked")
                return Disposition.ACKED
            return await self._fail(delivery, message, failure)

    async def _process(self, message: Message) -> BaseException | None:
        try:
            result = await self._invoke(message)
        except Exception as exc:  # noqa: BLE001 – every handler failure becomes a rejection
            return exc
        if result is HandlerResult.REJECT:
            return ProcessingError("Handler rejected the message")
        return None

    async def _invoke(self, message: Message) -> Any:
        if self._executor is None:
            return await self._timeout.execute(lambda: self._handler(message))

        loop = asyncio.get_running_loop()
        started = asyncio.Event()

        def run() -> Any:
            loop.call_soon_threadsafe(started.set)
            return self._handler(message)

        future = loop.run_in_executor(self._executor, run)
        try:
            await started.wait()
        except asyncio.CancelledError:
            future.cancel()
            raise
        result = await self._timeout.execute(lambda: future)
        if inspect.isawaitable(result):
            return await result
        return result

    async def _fail(
        self, delivery: Delivery, message: Message, failure: BaseException
    ) -> Disposition:
        dispatch = self._dispatch.on_failure(message)
        reason = describe_failure(failure)

        if dispatch.decision is RouteDecision.REQUEUE:
            await delivery.reject(requeue=False)
            self._log.warning(
                "message.retry_scheduled",
                attempt=message.retry_count + 1,
                next_retry_count=dispatch.retry_count,
                max_retries=self._policy.max_retries,
                retry_delay=self._policy.retry_delay,
                reason=reason,
            )
            return Disposition.RETRIED

        headers = dict(dispatch.headers)
        headers[X_FAILURE_REASON] = reason
        headers[X_ORIGINAL_QUEUE] = message.original_queue
        try:
            await self._error_sink.publish(message, headers)
        except Exception as exc:
            unavailable = (
                exc
                if isinstance(exc, ErrorQueueUnavailableError)
                else ErrorQueueUnavailableError(self._topology.error, cause=exc)
            )
            self._log.critical(
                "error_queue.unavailable",
                error_queue=self._topology.error,
                error=str(unavailable),
            )
            try:
                await delivery.reject(requeue=True)
            except Exception as reject_exc:  # noqa: BLE001 – the broker redelivers unacked messages
                self._log.error("message.requeue_failed", error=str(reject_exc))
            raise unavailable

        await delivery.ack()
        self._log.error(
            "message.dead_lettered",
            error_queue=self._topology.error,
            max_retries=self._policy.max_retries,
            reason=reason,
        )
        return Disposition.ERRORED


__all__ = ["Disposition", "ConsumerHarness", "Handler", "describe_failure"]
