"""Segmented container – an ordered, fixed set of text segments."""

from __future__ import annotations

from typing import Any

from mp_sensitive.kernel.errors.domain import InvalidArgumentError
from mp_sensitive.kernel.redaction.renderers import Renderer
from mp_sensitive.kernel.sensitive.container import Sensitive


def _validated(segments: tuple[Any, ...]) -> tuple[str, ...]:
    for index, segment in enumerate(segments):
        if segment is None:
            raise InvalidArgumentError(f"Segment {index} cannot be None")
        if not isinstance(segment, str):
            raise InvalidArgumentError(
                f"Segment {index} must be text, got {type(segment).__name__}"
            )
    return segments


class Segmented(Sensitive[tuple[str, ...]]):
    """Sensitive value made of ordered text segments (parts of an identifier).

    Segments are validated at construction: ``None`` or non-text segments
    raise :class:`InvalidArgumentError`, rendering never does. Renderers
    receive the segment tuple; :func:`renderers.joined` adapts text
    renderers to it.
    """

    __slots__ = ()

    def __init__(
        self,
        *segments: str,
        renderer: Renderer | None = None,
        alt_renderer: Renderer | None = None,
    ) -> None:
        super().__init__(_validated(segments), renderer=renderer, alt_renderer=alt_renderer)

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return cls(*value)
        return super()._coerce(value)


__all__ = ["Segmented"]
