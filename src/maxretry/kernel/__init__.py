"""Kernel – errors and the message model shared by every layer."""
