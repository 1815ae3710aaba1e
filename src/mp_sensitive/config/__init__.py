"""Configuration – settings dataclasses, loaders and config errors."""
from mp_sensitive.config.settings import EnvSettingsLoader, LoggingSettings, Settings, SettingsLoader
from mp_sensitive.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
