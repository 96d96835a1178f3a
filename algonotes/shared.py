"""A copy-on-write handle that lets many owners share one value."""

from __future__ import annotations

import copy
from types import TracebackType
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class _Holder(Generic[T]):
    """The shared value with its count of owners."""

    __slots__ = ("value", "refs", "shareable")

    def __init__(self, value: T) -> None:
        self.value: Optional[T] = value
        self.refs = 1
        self.shareable = True


class SharedValue(Generic[T]):
    """A reference-counted handle; writing through a shared handle copies first."""

    def __init__(self, value: T) -> None:
        self._holder: Optional[_Holder[T]] = _Holder(value)

    @classmethod
    def _attach(cls, holder: _Holder[T]) -> SharedValue[T]:
        handle = cls.__new__(cls)
        handle._holder = holder
        holder.refs += 1
        return handle

    def _live(self) -> _Holder[T]:
        if self._holder is None:
            raise RuntimeError("value has been released")
        return self._holder

    def _value(self) -> T:
        value = self._live().value
        assert value is not None or self._live().refs > 0
        return value  # type: ignore[return-value]

    def share(self) -> SharedValue[T]:
        """A new handle on the same value, or on a copy if it is unshareable."""
        holder = self._live()
        if holder.shareable:
            return self._attach(holder)
        return SharedValue(copy.deepcopy(self._value()))

    def read(self) -> T:
        """The value, for reading only."""
        return self._value()

    def modify(self) -> T:
        """The value, for writing; a shared value is copied for this handle first."""
        holder = self._live()
        if holder.refs > 1:
            fresh = _Holder(copy.deepcopy(self._value()))
            holder.refs -= 1
            self._holder = fresh
        return self._value()

    def mark_unshareable(self) -> None:
        """Make later shares take copies instead of sharing this value."""
        self._live().shareable = False

    def is_shared(self) -> bool:
        """Whether more than one handle owns the value."""
        return self._live().refs > 1

    def release(self) -> None:
        """Give up this handle; the value is dropped with its last owner."""
        holder = self._live()
        holder.refs -= 1
        if holder.refs == 0:
            holder.value = None
        self._holder = None

    def __enter__(self) -> SharedValue[T]:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._holder is not None:
            self.release()