"""Observability – structured logging helpers."""
from mp_sensitive.observability.logging.factory import JsonLoggerFactory
from mp_sensitive.observability.logging.processors import SensitiveValueProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveValueProcessor",
    "get_logger",
]
