"""Config validation errors.

Messages name the setting and the expectation it failed, never the value
read from the environment.
"""
from __future__ import annotations

from mp_sensitive.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be loaded or is invalid."""

    default_code = "config_error"

    @property
    def setting(self) -> str | None:
        """Name of the offending setting, when one is known."""
        return self.detail.get("setting")


class MissingRequiredSettingError(ConfigError):
    """A setting without a default is absent from the environment."""

    default_code = "missing_required_setting"

    def __init__(self, setting: str) -> None:
        super().__init__(f"Required setting {setting} is not set", detail={"setting": setting})


class InvalidSettingValueError(ConfigError):
    """A setting is present but outside what the library accepts."""

    default_code = "invalid_setting_value"

    def __init__(self, setting: str, expected: str) -> None:
        super().__init__(
            f"Setting {setting} is invalid: expected {expected}",
            detail={"setting": setting, "expected": expected},
        )


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
