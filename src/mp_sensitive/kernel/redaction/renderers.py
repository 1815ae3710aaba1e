"""Render strategies – ``(value, precision) -> text``.

A renderer composes an extractor (raw value to text) with a redactor. It
never sees the alternate flag: a container holds a primary and an alternate
renderer and picks one per call.

Usage::

    ssn_renderer = renderers.simple(extractors.identity(), redactors.mask("-"))
    ssn_renderer("123-45-6789", 4)            # '###-##-6789'

    segments = renderers.joined(renderers.masked())
    segments(("123", "45", "6789"), -1)       # '#####6789'
"""

from __future__ import annotations

from typing import Any, Callable, Final

from mp_sensitive.kernel.redaction import extractors, redactors
from mp_sensitive.kernel.redaction.extractors import Extractor
from mp_sensitive.kernel.redaction.redactors import (
    DEFAULT_REPLACEMENT,
    CharPredicate,
    Redactor,
)

Renderer = Callable[[Any, int], str]


def _empty(value: Any, precision: int) -> str:  # noqa: ARG001
    return ""


EMPTY: Final[Renderer] = _empty


def empty() -> Renderer:
    """Renderer that discloses nothing, whatever the value or precision."""
    return EMPTY


def simple(extractor: Extractor, redactor: Redactor) -> Renderer:
    """Extract text from the value, then redact it."""
    return lambda value, precision: redactor(precision, extractor(value))


def unredacted(extractor: Extractor | None = None) -> Renderer:
    """Full disclosure; precision is ignored."""
    return simple(extractor or extractors.string(), redactors.PASS_THROUGH)


def truncated() -> Renderer:
    return simple(extractors.string(), redactors.truncated())


def masked(replacement: str = DEFAULT_REPLACEMENT) -> Renderer:
    return simple(extractors.string(), redactors.masked(replacement))


def masked_where(predicate: CharPredicate, replacement: str = DEFAULT_REPLACEMENT) -> Renderer:
    return simple(extractors.string(), redactors.masked_where(predicate, replacement))


def joined(renderer: Renderer, delimiter: str | None = None) -> Renderer:
    """Adapt a text renderer to a segment sequence.

    Segments are joined (with *delimiter* between them, if given) before
    *renderer* is applied to the joined text.
    """
    return lambda segments, precision: renderer(extractors.join(segments, delimiter), precision)


__all__ = [
    "EMPTY",
    "Renderer",
    "empty",
    "joined",
    "masked",
    "masked_where",
    "simple",
    "truncated",
    "unredacted",
]
