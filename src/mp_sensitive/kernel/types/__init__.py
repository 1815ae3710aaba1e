"""Kernel value types – public re-export surface.

Modules:
  tin.py — Segment, UsTIN, SSN, EIN, create_tin
"""

from mp_sensitive.kernel.types.tin import (
    DELIMITER,
    EIN,
    SSN,
    InvalidTINError,
    Segment,
    UsTIN,
    create_tin,
)

__all__ = [
    "DELIMITER",
    "EIN",
    "InvalidTINError",
    "SSN",
    "Segment",
    "UsTIN",
    "create_tin",
]
