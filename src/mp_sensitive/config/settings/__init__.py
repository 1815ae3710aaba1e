"""Config settings – 12-factor env-based configuration."""
from mp_sensitive.config.settings.base import LoggingSettings, Settings
from mp_sensitive.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
