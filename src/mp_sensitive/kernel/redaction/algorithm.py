"""Redaction count – how many redactable units to hide."""

from __future__ import annotations

from mp_sensitive.kernel.errors.domain import InvalidArgumentError


def redactions(precision: int, count: int) -> int:
    """Return how many of *count* redactable units to hide for *precision*.

    * ``precision < 0`` – default disclosure, hide half rounding up.
    * ``0 <= precision < count`` – show the last *precision* units.
    * ``precision >= count`` – show everything.

    Every redactor delegates here so the half-default and the clamping stay
    identical across strategies.

    Raises
    ------
    InvalidArgumentError
        When *count* is negative.
    """
    if count < 0:
        raise InvalidArgumentError(
            f"Redactable count must not be negative, got {count}",
            detail={"count": count},
        )
    if precision < 0:
        return (count + 1) // 2
    if precision < count:
        return count - precision
    return 0


__all__ = ["redactions"]
