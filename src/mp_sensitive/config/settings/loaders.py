"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from mp_sensitive.config.settings.base import Settings
from mp_sensitive.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables named ``PREFIX_FIELD``.

    Values reach the settings class as stripped text; an empty variable
    counts as unset. Normalising and checking values is left to the
    settings class itself (``Settings._validate``).

    Args:
        environ: Mapping to read from instead of ``os.environ``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    @staticmethod
    def env_key(settings_class: type[Settings], field_name: str) -> str:
        """Environment variable holding *field_name* of *settings_class*."""
        prefix = settings_class._prefix
        return f"{prefix}_{field_name}".upper() if prefix else field_name.upper()

    def load(self, settings_class: type[T]) -> T:
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = self.env_key(settings_class, field.name)
            raw = self._environ.get(key, "").strip()
            if raw:
                values[field.name] = raw
            elif (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(key)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}", cause=exc) from exc


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
