"""Config – 12-factor settings and loaders."""

from hooksig.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggingSettings,
    Settings,
    SettingsLoader,
)
from hooksig.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
