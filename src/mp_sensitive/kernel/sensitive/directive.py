"""Minimal decoder for the format spec handed to ``Sensitive.__format__``.

Grammar::

    [flags][width][.precision][type]

    flags      any of  '#' (alternate form)
                       '<' or '-' (left-justify)
                       '>' (right-justify, the default)
    type       's' (default) or 'S' (upper-case)

So ``f"{ssn:#.4}"`` asks for the alternate form showing four units and
``f"{ssn:-13}"`` pads the default form to thirteen characters on the right.
"""

from __future__ import annotations

import dataclasses
import re
from typing import Final

from mp_sensitive.kernel.errors.domain import InvalidArgumentError

_SPEC: Final = re.compile(
    r"(?P<flags>[#<>\-]*)(?P<width>\d+)?(?:\.(?P<precision>\d+))?(?P<type>[sS])?"
)


@dataclasses.dataclass(frozen=True, slots=True)
class FormatDirective:
    """Decoded rendering parameters; ``-1`` means "not given"."""

    precision: int = -1
    alternate: bool = False
    width: int = -1
    left_justify: bool = False
    upper_case: bool = False

    def __post_init__(self) -> None:
        if self.width < -1:
            raise InvalidArgumentError(f"Width must be -1 or greater, got {self.width}")

    @classmethod
    def parse(cls, spec: str) -> FormatDirective:
        match = _SPEC.fullmatch(spec)
        if match is None:
            raise InvalidArgumentError(f"Invalid format specifier {spec!r} for a sensitive value")
        flags = match["flags"]
        left = "<" in flags or "-" in flags
        if left and ">" in flags:
            raise InvalidArgumentError(f"Conflicting alignment in format specifier {spec!r}")
        return cls(
            precision=int(match["precision"]) if match["precision"] is not None else -1,
            alternate="#" in flags,
            width=int(match["width"]) if match["width"] is not None else -1,
            left_justify=left,
            upper_case=match["type"] == "S",
        )


__all__ = ["FormatDirective"]
