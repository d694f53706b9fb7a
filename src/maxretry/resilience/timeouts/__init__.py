"""Resilience – processing time bound."""
from maxretry.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
