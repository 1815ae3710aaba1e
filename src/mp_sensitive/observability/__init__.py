"""Observability – structured logging."""
from mp_sensitive.observability.logging import JsonLoggerFactory, SensitiveValueProcessor, get_logger

__all__ = ["JsonLoggerFactory", "SensitiveValueProcessor", "get_logger"]
