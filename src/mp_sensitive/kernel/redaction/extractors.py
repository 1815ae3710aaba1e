"""Extractors – turn a raw contained value into text.

Every extractor treats an absent (``None``) value as empty text.
"""

from __future__ import annotations

from typing import Any, Callable, Final, Iterable

Extractor = Callable[[Any], str]

DEFAULT_DELIMITER: Final = "-"


def join(segments: Iterable[str] | None, delimiter: str | None = None) -> str:
    """Concatenate *segments* in order.

    When *delimiter* is given it is inserted between consecutive segments,
    never before the first or after the last.
    """
    if segments is None:
        return ""
    return (delimiter or "").join(segments)


def empty() -> Extractor:
    return lambda raw: ""


def string() -> Extractor:
    """Extract ``str(raw)``."""
    return lambda raw: "" if raw is None else str(raw)


def identity() -> Extractor:
    """Extract text values as they are; anything else goes through ``str``."""
    return lambda raw: raw if isinstance(raw, str) else ("" if raw is None else str(raw))


def concatenate() -> Extractor:
    """Extract a segment sequence joined without a delimiter."""
    return lambda raw: join(raw)


def delimit(delimiter: str = DEFAULT_DELIMITER) -> Extractor:
    """Extract a segment sequence joined with *delimiter*."""
    return lambda raw: join(raw, delimiter)


__all__ = [
    "DEFAULT_DELIMITER",
    "Extractor",
    "concatenate",
    "delimit",
    "empty",
    "identity",
    "join",
    "string",
]
