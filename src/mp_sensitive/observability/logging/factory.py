"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from mp_sensitive.config.settings import EnvSettingsLoader, LoggingSettings
from mp_sensitive.observability.logging.processors import SensitiveValueProcessor


class JsonLoggerFactory:
    """Configure structlog over the stdlib root logger."""

    @staticmethod
    def configure(settings: LoggingSettings | None = None) -> None:
        """Install structlog processors and a root handler.

        When *settings* is omitted they are loaded from the environment
        (``MP_SENSITIVE_LOG_LEVEL``, ``MP_SENSITIVE_LOG_FORMAT``).
        """
        if settings is None:
            settings = EnvSettingsLoader().load(LoggingSettings)

        shared_processors: list[Any] = [
            SensitiveValueProcessor(),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(settings.level)


__all__ = ["JsonLoggerFactory"]
