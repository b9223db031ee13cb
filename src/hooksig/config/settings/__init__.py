"""Config settings – 12-factor env-based configuration."""
from hooksig.config.settings.base import Settings
from hooksig.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from hooksig.config.settings.observability import LoggingSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggingSettings",
    "Settings",
    "SettingsLoader",
]
