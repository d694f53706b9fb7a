"""Resilience – retry budget, dispatch, processing timeouts, reconnects."""

from maxretry.resilience.maxretry import Dispatch, DispatchPolicy, RetryPolicy
from maxretry.resilience.reconnect import ReconnectPolicy
from maxretry.resilience.timeouts import TimeoutPolicy

__all__ = [
    "Dispatch",
    "DispatchPolicy",
    "ReconnectPolicy",
    "RetryPolicy",
    "TimeoutPolicy",
]
