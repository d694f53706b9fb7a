"""Config – 12-factor settings and loaders."""

from maxretry.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    MaxRetrySettings,
    Settings,
    SettingsLoader,
)
from maxretry.kernel.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MaxRetrySettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
