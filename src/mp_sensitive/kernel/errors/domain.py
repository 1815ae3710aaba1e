"""Domain errors – invalid inputs and unavailable values."""

from __future__ import annotations

from typing import Any

from mp_sensitive.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidArgumentError(ValidationError, ValueError):
    """An argument is malformed or outside the accepted grammar or range.

    Also a :class:`ValueError` so callers using plain Python conventions
    (``format()`` with a bad spec, for instance) can catch it as such.
    """

    default_code = "invalid_argument"


class NullValueError(DomainError):
    """A value source cannot supply its value.

    Containers treat this as an absent value and render it as empty text.
    """

    default_code = "null_value"


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "NullValueError",
    "ValidationError",
]
