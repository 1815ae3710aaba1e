"""Config settings – Settings base class and LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_sensitive.config.validation import InvalidSettingValueError

_LOG_FORMATS = ("json", "console")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggingSettings(Settings):
    """How the library's structlog output is rendered.

    Loaded from ``MP_SENSITIVE_LOG_LEVEL`` and ``MP_SENSITIVE_LOG_FORMAT``.
    """

    _prefix: ClassVar[str] = "MP_SENSITIVE"

    log_level: str = "INFO"
    log_format: str = "json"

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        self.log_format = self.log_format.lower()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidSettingValueError("log_level", "a standard logging level name")
        if self.log_format not in _LOG_FORMATS:
            raise InvalidSettingValueError("log_format", " or ".join(_LOG_FORMATS))

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


__all__ = ["LoggingSettings", "Settings"]
