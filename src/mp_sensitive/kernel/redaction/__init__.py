"""Redaction engine – public re-export surface.

Modules:
  algorithm.py  — redactions(precision, count)
  extractors.py — raw value to text, segment joiner
  redactors.py  — (precision, text) -> text strategies
  renderers.py  — (value, precision) -> text compositions
"""

from mp_sensitive.kernel.redaction import extractors, redactors, renderers
from mp_sensitive.kernel.redaction.algorithm import redactions
from mp_sensitive.kernel.redaction.extractors import DEFAULT_DELIMITER, Extractor, join
from mp_sensitive.kernel.redaction.redactors import DEFAULT_REPLACEMENT, Redactor
from mp_sensitive.kernel.redaction.renderers import Renderer

__all__ = [
    "DEFAULT_DELIMITER",
    "DEFAULT_REPLACEMENT",
    "Extractor",
    "Redactor",
    "Renderer",
    "extractors",
    "join",
    "redactions",
    "redactors",
    "renderers",
]
