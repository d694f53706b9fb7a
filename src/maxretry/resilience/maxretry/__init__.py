"""Resilience – bounded broker redelivery with an error queue."""
from maxretry.resilience.maxretry.dispatch import Dispatch, DispatchPolicy
from maxretry.resilience.maxretry.policy import RetryPolicy

__all__ = ["Dispatch", "DispatchPolicy", "RetryPolicy"]
