"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError               (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidArgumentError   (also a ValueError)
    │   └── NullValueError
    └── ApplicationError          (application.py)
"""

from mp_sensitive.kernel.errors.application import ApplicationError
from mp_sensitive.kernel.errors.base import BaseError
from mp_sensitive.kernel.errors.domain import (
    DomainError,
    InvalidArgumentError,
    NullValueError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
    "NullValueError",
    "ValidationError",
]
