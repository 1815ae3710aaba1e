"""Sensitive container – a value that only ever leaves as redacted text."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Generic, TypeVar

from mp_sensitive.kernel.errors.domain import InvalidArgumentError, NullValueError
from mp_sensitive.kernel.redaction import renderers
from mp_sensitive.kernel.redaction.renderers import Renderer
from mp_sensitive.kernel.sensitive.directive import FormatDirective
from mp_sensitive.kernel.sensitive.source import Deferred, DoNotSerialize, ValueSource
from mp_sensitive.observability.logging.processors import get_logger

T = TypeVar("T")
S = TypeVar("S", bound="Sensitive[Any]")

logger = get_logger(__name__)


class Sensitive(Generic[T]):
    """Container protecting a value from being rendered as plain text.

    The raw value is never exposed; every textual form goes through a
    renderer. The default renderer discloses nothing, so ``str()``,
    ``repr()``, f-strings and ``%s`` all yield empty text unless a renderer
    is declared.

    Renderers are declared as data, once per type, through class keywords::

        class CardNumber(
            Sensitive[str],
            renderer=renderers.simple(extractors.identity(), redactors.mask("-")),
            alt_renderer=renderers.unredacted(),
        ):
            __slots__ = ()

        card = CardNumber("4111-1111-1111-1111")
        f"{card}"      # '####-####-1111-1111'
        f"{card:.4}"   # '####-####-####-1111'
        f"{card:#}"    # '4111-1111-1111-1111'

    A class declaring ``renderer`` without ``alt_renderer`` uses its primary
    renderer for the alternate form too. Instance keywords override the class
    declaration.

    Equality and hashing compare the raw values of containers of the same
    concrete type, never their rendered text: two equal containers may render
    differently when built with different renderers.

    Instances are immutable. Renderers must be pure so that they can be
    shared between all instances and threads.
    """

    __slots__ = ("_source", "_renderer", "_alt_renderer")

    _renderers: ClassVar[tuple[Renderer, Renderer | None]] = (renderers.EMPTY, None)

    def __init_subclass__(
        cls,
        *,
        renderer: Renderer | None = None,
        alt_renderer: Renderer | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if renderer is not None:
            cls._renderers = (renderer, alt_renderer)
        elif alt_renderer is not None:
            cls._renderers = (cls._renderers[0], alt_renderer)

    def __init__(
        self,
        value: T | None = None,
        *,
        source: ValueSource[T] | None = None,
        renderer: Renderer | None = None,
        alt_renderer: Renderer | None = None,
    ) -> None:
        if source is None:
            if value is None:
                raise InvalidArgumentError(f"{type(self).__name__} value cannot be None")
            source = DoNotSerialize(value)
        elif value is not None:
            raise InvalidArgumentError("Provide either a value or a source, not both")

        class_renderer, class_alt = type(self)._renderers
        primary = renderer or class_renderer
        alternate = alt_renderer or (None if renderer else class_alt) or primary

        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_renderer", primary)
        object.__setattr__(self, "_alt_renderer", alternate)

    @classmethod
    def deferred(cls: type[S], supplier: Callable[[], Any], **kwargs: Any) -> S:
        """Build a container whose value is fetched on first render.

        Subclass constructors are bypassed; *supplier* is trusted to yield a
        value of the shape the subclass expects.
        """
        instance = cls.__new__(cls)
        Sensitive.__init__(instance, source=Deferred(supplier), **kwargs)
        return instance

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _retrieve(self) -> T | None:
        try:
            return self._source.get()
        except Exception as exc:
            cause = exc.cause if isinstance(exc, NullValueError) and exc.cause else exc
            logger.warning(
                "sensitive.value_unavailable",
                container=type(self).__name__,
                code=getattr(exc, "code", "source_error"),
                error=type(cause).__name__,
            )
            return None

    def render(
        self,
        precision: int = -1,
        alternate: bool = False,
        width: int = -1,
        left_justify: bool = False,
        upper_case: bool = False,
    ) -> str:
        """Render the value with redaction, then apply residual formatting.

        Parameters
        ----------
        precision:
            Number of redactable units to reveal; negative asks for the
            renderer's default partial disclosure.
        alternate:
            Use the alternate renderer instead of the primary one.
        width:
            Minimum width, ``-1`` for none. Padding uses spaces.
        left_justify:
            Pad on the right instead of the left.
        upper_case:
            Upper-case the redacted text.
        """
        strategy = self._alt_renderer if alternate else self._renderer
        text = strategy(self._retrieve(), precision)
        if upper_case:
            text = text.upper()
        if width > len(text):
            text = text.ljust(width) if left_justify else text.rjust(width)
        return text

    def default_text(self) -> str:
        """The safe, unexamined string form (what a log line would show)."""
        return self.render()

    def __str__(self) -> str:
        return self.default_text()

    def __format__(self, format_spec: str) -> str:
        directive = FormatDirective.parse(format_spec)
        return self.render(
            precision=directive.precision,
            alternate=directive.alternate,
            width=directive.width,
            left_justify=directive.left_justify,
            upper_case=directive.upper_case,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.default_text()!r}>"

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Sensitive):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return bool(self._retrieve() == other._retrieve())

    def __hash__(self) -> int:
        return hash(self._retrieve())

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self: S) -> S:
        return self

    def __deepcopy__(self: S, memo: dict[int, Any]) -> S:
        return self

    # ------------------------------------------------------------------
    # pydantic v2 integration (optional dependency)
    # ------------------------------------------------------------------

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        if isinstance(value, cls):
            return value
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: Any,
    ) -> Any:
        """Validate raw input into the container; serialise to default text."""
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(str, when_used="always"),
        )


__all__ = ["Sensitive"]
