"""Observability – structured logging helpers."""
from maxretry.observability.logging.factory import JsonLoggerFactory
from maxretry.observability.logging.processors import delivery_context, get_logger

__all__ = ["JsonLoggerFactory", "delivery_context", "get_logger"]
