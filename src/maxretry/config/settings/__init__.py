"""Config settings – 12-factor env-based configuration."""
from maxretry.config.settings.base import Settings
from maxretry.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from maxretry.config.settings.maxretry import MaxRetrySettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "MaxRetrySettings", "Settings", "SettingsLoader"]
