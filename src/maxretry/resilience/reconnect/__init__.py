"""Resilience – broker connection retry."""
from maxretry.resilience.reconnect.policy import ReconnectPolicy

__all__ = ["ReconnectPolicy"]
