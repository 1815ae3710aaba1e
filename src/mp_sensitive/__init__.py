"""
mp_sensitive – Redacting containers for values that must not be disclosed.

Import path convention::

    from mp_sensitive.kernel.sensitive import Sensitive, Segmented
    from mp_sensitive.kernel.redaction import redactors, renderers
    from mp_sensitive.kernel.types import SSN, EIN, create_tin
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
