"""Value sources – how a container obtains its raw value.

A source is any object with a ``get()`` method that returns the raw value,
``None`` when it is absent, or raises :class:`NullValueError` when it cannot
be supplied. Sources must be idempotent: every call returns a value equal to
the first one. Whether a source can be persisted is a capability of the
source, not of the container rendering it.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Protocol, TypeVar

from mp_sensitive.kernel.errors.domain import NullValueError

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ValueSource(Protocol[T_co]):
    """Port: supply the raw value of a container."""

    def get(self) -> T_co | None: ...


class _RefusesSerialization:
    """Sources holding raw values directly refuse pickling."""

    __slots__ = ()

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise TypeError(f"cannot pickle {type(self).__name__!r} object")

    def __copy__(self) -> Any:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(...)"


class DoNotSerialize(_RefusesSerialization, Generic[T]):
    """Hold a value in memory only.

    Pickling raises :class:`TypeError`, so the raw value cannot leak through
    ``pickle``, ``copy.deepcopy`` or caches built on them.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T | None) -> None:
        self._value = value

    def get(self) -> T | None:
        return self._value


class Deferred(_RefusesSerialization, Generic[T]):
    """Retrieve the value lazily from *supplier* and memoise the first result.

    Concurrent first calls may invoke *supplier* more than once; it must be
    idempotent. Any error raised by *supplier* is reported as
    :class:`NullValueError` (the original exception is kept as ``cause``) and
    is not memoised, so a later call retries.
    """

    __slots__ = ("_supplier", "_value", "_resolved")

    def __init__(self, supplier: Callable[[], T | None]) -> None:
        self._supplier = supplier
        self._value: T | None = None
        self._resolved = False

    def get(self) -> T | None:
        if not self._resolved:
            try:
                value = self._supplier()
            except NullValueError:
                raise
            except Exception as exc:
                raise NullValueError(
                    f"{type(self).__name__} supplier failed",
                    cause=exc,
                ) from exc
            self._value = value
            self._resolved = True
        return self._value


__all__ = ["Deferred", "DoNotSerialize", "ValueSource"]
