"""Resilience – DispatchPolicy: retry queue or error queue."""
from __future__ import annotations

import dataclasses
from typing import Any

from maxretry.kernel.messaging import Message, RetryCounter, RouteDecision
from maxretry.resilience.maxretry.policy import RetryPolicy


@dataclasses.dataclass(frozen=True)
class Dispatch:
    """Outcome of :meth:`DispatchPolicy.on_failure`."""

    decision: RouteDecision
    retry_count: int
    headers: dict[str, Any]


class DispatchPolicy:
    """Decide where a failed message goes, based on its retry count.

    The policy only decides. It never publishes or moves a message; the
    consumer harness turns the decision into a broker operation.
    """

    def __init__(self, policy: RetryPolicy, counter: RetryCounter) -> None:
        self._policy = policy
        self._counter = counter

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def on_failure(self, message: Message) -> Dispatch:
        retry_count = message.retry_count
        if retry_count < self._policy.max_retries:
            next_count = retry_count + 1
            return Dispatch(
                decision=RouteDecision.REQUEUE,
                retry_count=next_count,
                headers=self._counter.write(message.headers, next_count),
            )
        return Dispatch(
            decision=RouteDecision.ERROR,
            retry_count=retry_count,
            headers=self._counter.write(message.headers, retry_count),
        )


__all__ = ["Dispatch", "DispatchPolicy"]
