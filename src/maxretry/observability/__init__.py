"""Observability – structured logging."""
from maxretry.observability.logging import JsonLoggerFactory, delivery_context, get_logger

__all__ = ["JsonLoggerFactory", "delivery_context", "get_logger"]
