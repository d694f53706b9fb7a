"""Resilience – RetryPolicy for broker-driven redelivery."""
from __future__ import annotations

import dataclasses

from maxretry.kernel.errors import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry budget shared by every consumer of one worker.

    Parameters
    ----------
    max_retries:
        Retries allowed after the first attempt. A message is delivered at
        most ``max_retries + 1`` times before landing in the error queue.
    retry_delay:
        Seconds a failed message waits in the retry queue.
    error_queue_name:
        Terminal queue for messages that exhausted their budget.
    timeout:
        Seconds a single processing attempt may take; ``None`` disables
        the bound.
    """

    max_retries: int = 5
    retry_delay: float = 60.0
    error_queue_name: str = ""
    timeout: float | None = 60.0

    def __post_init__(self) -> None:
        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int):
            raise InvalidSettingValueError("max_retries", self.max_retries, "must be an integer")
        if self.max_retries <= 0:
            raise InvalidSettingValueError("max_retries", self.max_retries, "must be > 0")
        if self.retry_delay <= 0:
            raise InvalidSettingValueError("retry_delay", self.retry_delay, "must be > 0")
        if not self.error_queue_name:
            raise InvalidSettingValueError(
                "error_queue_name", self.error_queue_name, "must not be empty"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be > 0 or None")

    @property
    def retry_delay_ms(self) -> int:
        return int(round(self.retry_delay * 1000))

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1


__all__ = ["RetryPolicy"]
