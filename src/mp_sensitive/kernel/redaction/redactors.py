"""Redactor strategies – ``(precision, text) -> text``.

A redactor decides which units of a text are shown, masked or deleted for a
requested precision. All redactors are stateless and safe to share; build
them once (module or class level) and reuse them for every render call.

Two families live here:

* per-character strategies: :func:`truncated`, :func:`masked`,
  :func:`masked_where`;
* the pattern engine :func:`redact`, with its builders :func:`truncate`,
  :func:`truncate_matching`, :func:`mask` and :func:`mask_matching`.

Examples::

    masked()(-1, "secret")                          # '###ret'
    masked_where(str.isdigit)(4, "123-45-6789")     # '###-##-6789'
    truncate("-", "/")(1, "te/st")                  # '/t'
    redact("_|", r"[0-9]")(-1, "123-45/6")          # '_|_|_|-45/6'
"""

from __future__ import annotations

import re
from typing import Callable, Final, Optional

from mp_sensitive.kernel.errors.domain import InvalidArgumentError
from mp_sensitive.kernel.redaction.algorithm import redactions
from mp_sensitive.kernel.redaction.extractors import DEFAULT_DELIMITER

Redactor = Callable[[int, Optional[str]], str]
CharPredicate = Callable[[str], bool]

DEFAULT_REPLACEMENT: Final = "#"

# Every single character, newlines included.
_ANY_UNIT: Final = re.compile(r".", re.DOTALL)


def _require_unit(replacement: str) -> str:
    if not isinstance(replacement, str) or len(replacement) != 1:
        raise InvalidArgumentError("Mask replacement must be exactly one character")
    return replacement


def pass_through(precision: int, text: str | None) -> str:  # noqa: ARG001
    """Return *text* unchanged."""
    return text or ""


PASS_THROUGH: Final[Redactor] = pass_through


def truncated() -> Redactor:
    """Drop leading characters, keeping the trailing ones the precision allows."""

    def _truncated(precision: int, text: str | None) -> str:
        if not text:
            return ""
        return text[redactions(precision, len(text)):]

    return _truncated


def masked(replacement: str = DEFAULT_REPLACEMENT) -> Redactor:
    """Replace leading characters with *replacement*, one for one."""
    unit = _require_unit(replacement)

    def _masked(precision: int, text: str | None) -> str:
        if not text:
            return ""
        n = redactions(precision, len(text))
        return unit * n + text[n:]

    return _masked


def masked_where(predicate: CharPredicate, replacement: str = DEFAULT_REPLACEMENT) -> Redactor:
    """Mask only the characters matching *predicate*.

    Precision counts matching characters; the first *n* matches are replaced
    and every other character, delimiters included, keeps its position.
    """
    unit = _require_unit(replacement)

    def _masked_where(precision: int, text: str | None) -> str:
        if not text:
            return ""
        remaining = redactions(precision, sum(1 for ch in text if predicate(ch)))
        if remaining == 0:
            return text
        out: list[str] = []
        for ch in text:
            if remaining and predicate(ch):
                out.append(unit)
                remaining -= 1
            else:
                out.append(ch)
        return "".join(out)

    return _masked_where


def redact(replacement: str, redactable: str | re.Pattern[str] | None = None) -> Redactor:
    """Build a redactor over the regions matched by *redactable*.

    The text is viewed as alternating non-redactable and redactable
    segments. Matches are counted (leftmost, non-overlapping), compared with
    the requested precision, and that many leading matches are replaced by
    *replacement* (inserted literally). An empty replacement deletes, a
    single character masks. Without a pattern every character is redactable.
    """
    pattern = re.compile(redactable) if redactable else _ANY_UNIT

    def _redact(precision: int, text: str | None) -> str:
        if not text:
            return ""
        spans = [m.span() for m in pattern.finditer(text)]
        n = redactions(precision, len(spans))
        if n == 0:
            return text
        out: list[str] = []
        last = 0
        for start, end in spans[:n]:
            out.append(text[last:start])
            out.append(replacement)
            last = end
        out.append(text[last:])
        return "".join(out)

    return _redact


def _redactable(allowable: tuple[str, ...]) -> str | None:
    """Regex matching any single character except the *allowable* ones."""
    if not allowable:
        return None
    return "[^" + "".join(re.escape(ch) for ch in allowable) + "]"


def truncate(*allowable: str) -> Redactor:
    """Delete characters other than *allowable* as the precision requires.

    ``truncate("-", "/")`` keeps every ``-`` and ``/`` in place.
    """
    return redact("", _redactable(allowable))


def truncate_matching(redactable: str | re.Pattern[str]) -> Redactor:
    """Delete matches of *redactable*, e.g. ``truncate_matching(r"\\d")``."""
    return redact("", redactable)


def mask(*allowable: str, replacement: str = DEFAULT_REPLACEMENT) -> Redactor:
    """Mask characters other than *allowable* with *replacement*."""
    return redact(_require_unit(replacement), _redactable(allowable))


def mask_matching(redactable: str | re.Pattern[str], replacement: str = DEFAULT_REPLACEMENT) -> Redactor:
    """Mask matches of *redactable* with *replacement*, one per match."""
    return redact(_require_unit(replacement), redactable)


DEFAULT_MASK: Final[Redactor] = mask(DEFAULT_DELIMITER)


__all__ = [
    "CharPredicate",
    "DEFAULT_MASK",
    "DEFAULT_REPLACEMENT",
    "PASS_THROUGH",
    "Redactor",
    "mask",
    "mask_matching",
    "masked",
    "masked_where",
    "pass_through",
    "redact",
    "truncate",
    "truncate_matching",
    "truncated",
]
