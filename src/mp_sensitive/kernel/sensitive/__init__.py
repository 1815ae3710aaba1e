"""Sensitive containers – public re-export surface.

Modules:
  container.py — Sensitive
  segmented.py — Segmented
  source.py    — ValueSource, DoNotSerialize, Deferred
  directive.py — FormatDirective
"""

from mp_sensitive.kernel.sensitive.container import Sensitive
from mp_sensitive.kernel.sensitive.directive import FormatDirective
from mp_sensitive.kernel.sensitive.segmented import Segmented
from mp_sensitive.kernel.sensitive.source import Deferred, DoNotSerialize, ValueSource

__all__ = [
    "Deferred",
    "DoNotSerialize",
    "FormatDirective",
    "Segmented",
    "Sensitive",
    "ValueSource",
]
