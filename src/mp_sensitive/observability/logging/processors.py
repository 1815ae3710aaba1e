"""Observability – structlog processors and get_logger helper.

``SensitiveValueProcessor`` — renders Sensitive containers found in log
events through their default (redacted) text.
``get_logger(name)`` — returns a bound structlog logger.
"""
from __future__ import annotations

from typing import Any

import structlog


class SensitiveValueProcessor:
    """structlog processor that replaces containers with their default text.

    Walks the event dict, including nested dicts, lists and tuples, so a
    renderer that serialises values itself (``JSONRenderer`` falls back to
    ``repr``) only ever sees the redacted form.

    Usage::

        import structlog
        from mp_sensitive.observability.logging import SensitiveValueProcessor

        structlog.configure(processors=[SensitiveValueProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from mp_sensitive.kernel.sensitive.container import Sensitive

        return {key: self._scrub(value, Sensitive) for key, value in event_dict.items()}

    def _scrub(self, value: Any, sensitive_type: type) -> Any:
        if isinstance(value, sensitive_type):
            return value.default_text()
        if isinstance(value, dict):
            return {k: self._scrub(v, sensitive_type) for k, v in value.items()}
        if isinstance(value, list):
            return [self._scrub(v, sensitive_type) for v in value]
        if isinstance(value, tuple):
            return tuple(self._scrub(v, sensitive_type) for v in value)
        return value


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["SensitiveValueProcessor", "get_logger"]
