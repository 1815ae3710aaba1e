"""US Taxpayer Identification Numbers (SSN/ITIN and EIN).

Both are nine digits split into fixed-width segments. By default they render
with the leading digits masked and no delimiters; the alternate form keeps
the delimiters in place::

    ssn = SSN("123-45-6789")
    f"{ssn}"        # '#####6789'
    f"{ssn:#}"      # '###-##-6789'
    f"{ssn:.0}"     # '#########'
    f"{ssn:#.9}"    # '123-45-6789'
"""

from __future__ import annotations

import dataclasses
import re
from typing import ClassVar, Final

from mp_sensitive.kernel.errors.domain import InvalidArgumentError
from mp_sensitive.kernel.redaction import renderers
from mp_sensitive.kernel.sensitive.segmented import Segmented
from mp_sensitive.observability.logging.processors import get_logger

logger = get_logger(__name__)

DELIMITER: Final = "-"


class InvalidTINError(InvalidArgumentError):
    """A TIN cannot be parsed or a segment is invalid."""

    default_code = "invalid_tin"


@dataclasses.dataclass(frozen=True, slots=True)
class Segment:
    """A named, fixed-width group of digits within a TIN."""

    name: str
    length: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidArgumentError("Segment name must not be blank")
        if not 1 <= self.length <= 9:
            raise InvalidArgumentError("Segment length must be in the range 1-9")

    @property
    def maximum(self) -> int:
        return 10 ** self.length - 1

    @property
    def regex(self) -> str:
        """Named capture group matching exactly this segment."""
        return f"(?P<{self.name}>[0-9]{{{self.length}}})"

    def validate(self, value: str | int | None) -> str:
        """Return the canonical text of *value* for this segment.

        Integers must lie in ``1..maximum`` and are zero-padded; text must be
        exactly ``length`` ASCII digits.
        """
        if value is None:
            raise InvalidTINError(f"Segment {self.name} cannot be None")
        if isinstance(value, int) and not isinstance(value, bool):
            if not 1 <= value <= self.maximum:
                raise InvalidTINError(
                    f"Invalid {self.name}: expected range 1-{self.maximum}"
                )
            return f"{value:0{self.length}d}"
        if not isinstance(value, str):
            raise InvalidTINError(f"Invalid {self.name} segment: expected {self.length} digits")
        if not re.fullmatch(f"[0-9]{{{self.length}}}", value):
            raise InvalidTINError(
                f"Invalid {self.name} segment: expected {self.length} digits (length: {len(value)})"
            )
        return value


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class UsTIN(
    Segmented,
    renderer=renderers.joined(renderers.masked()),
    alt_renderer=renderers.joined(renderers.masked_where(_is_digit), DELIMITER),
):
    """Base for US TINs: validates segments, renders masked.

    Concrete types declare ``SEGMENTS``; they are built either from one
    string (with or without delimiters) or from one value per segment.
    """

    __slots__ = ()

    SEGMENTS: ClassVar[tuple[Segment, ...]] = ()
    _pattern: ClassVar[re.Pattern[str]]

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)  # type: ignore[arg-type]
        if cls.SEGMENTS:
            cls._pattern = re.compile(f"{DELIMITER}?".join(s.regex for s in cls.SEGMENTS))

    def __init__(self, *parts: str | int) -> None:
        if not type(self).SEGMENTS:
            raise TypeError(f"{type(self).__name__} declares no segments")
        if len(parts) == 1:
            segments = type(self).parse(parts[0])
        else:
            segments = type(self).validate_segments(*parts)
        super().__init__(*segments)

    @classmethod
    def validate_segments(cls, *parts: str | int | None) -> tuple[str, ...]:
        if len(parts) != len(cls.SEGMENTS):
            raise InvalidTINError("Missing or too many TIN segments")
        return tuple(segment.validate(part) for segment, part in zip(cls.SEGMENTS, parts))

    @classmethod
    def parse(cls, raw: str | int | None) -> tuple[str, ...]:
        """Split a formatted TIN into its segments."""
        if raw is None:
            raise InvalidTINError(f"{cls.__name__} value cannot be None")
        if not isinstance(raw, str):
            raise InvalidTINError(f"{cls.__name__} must be parsed from text")
        match = cls._pattern.fullmatch(raw)
        if match is None:
            raise InvalidTINError(f"Invalid {cls.__name__} format")
        return tuple(match[segment.name] for segment in cls.SEGMENTS)

    @property
    def issuer(self) -> str:
        """ISO 3166 country code of the issuing authority."""
        return "US"

    @classmethod
    def _coerce(cls, value: object) -> object:
        if isinstance(value, str):
            return cls(value)
        return super()._coerce(value)


class SSN(UsTIN):
    """Social Security Number (or ITIN): ``AAA-GG-SSSS``."""

    __slots__ = ()

    SEGMENTS = (Segment("area", 3), Segment("group", 2), Segment("serial", 4))


class EIN(UsTIN):
    """Employer Identification Number: ``CC-SSSSSSS``."""

    __slots__ = ()

    SEGMENTS = (Segment("campus", 2), Segment("serial", 7))


def create_tin(raw: str | None, prefer_ein: bool = False) -> UsTIN:
    """Build an SSN or EIN from a formatted string, picked by its length.

    Nine undelimited digits are ambiguous; they make an SSN unless
    *prefer_ein* is set.
    """
    if raw is None:
        raise InvalidTINError("Cannot create a TIN from None")
    if not isinstance(raw, str):
        raise InvalidTINError(f"Cannot create a TIN from {type(raw).__name__}, expected text")
    length = len(raw)
    if length == 0:
        raise InvalidTINError("Cannot parse empty TIN")
    if length == 9:
        tin_type: type[UsTIN] = EIN if prefer_ein else SSN
    elif length == 10:
        tin_type = EIN
    elif length == 11:
        tin_type = SSN
    else:
        raise InvalidTINError(f"Cannot identify TIN format (length: {length})")
    logger.debug("tin.created", kind=tin_type.__name__, length=length)
    return tin_type(raw)


__all__ = [
    "DELIMITER",
    "EIN",
    "InvalidTINError",
    "SSN",
    "Segment",
    "UsTIN",
    "create_tin",
]
