"""Application-layer errors – bad configuration and failed processing."""

from __future__ import annotations

from typing import Any

from maxretry.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Failure inside maxretry or the user handler, not the broker."""

    default_code = "application_error"


class ConfigError(ApplicationError):
    """Worker settings could not be loaded or are inconsistent.

    Raised before any connection is opened, so a misconfigured worker never
    touches the queues.
    """

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. ``max_retries=0`` or ``ack=False``."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class ProcessingError(ApplicationError):
    """The user handler failed or explicitly rejected the message."""

    default_code = "processing_failed"


class ProcessingTimeoutError(ProcessingError):
    """The user handler did not return within its time bound."""

    default_code = "processing_timeout"

    def __init__(
        self,
        message: str = "Processing timed out",
        *,
        timeout_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.timeout_seconds = timeout_seconds


__all__ = [
    "ApplicationError",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ProcessingError",
    "ProcessingTimeoutError",
]
