"""Printing values by a type string, and tuples compared element by element."""

from __future__ import annotations

import sys
from typing import Any, Iterator


def _render(types: str, args: tuple[Any, ...]) -> list[str]:
    """Format each argument by its type letter; unknown letters are skipped."""
    values = iter(args)
    rendered: list[str] = []
    for letter in types:
        if letter not in "ifcs":
            continue
        try:
            value = next(values)
        except StopIteration:
            raise ValueError(
                f"type string {types!r} needs more than {len(args)} values"
            ) from None
        if letter == "i":
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"'i' expects an int, got {value!r}")
            rendered.append(str(value))
        elif letter == "f":
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"'f' expects a number, got {value!r}")
            rendered.append(f"{float(value):f}")
        elif letter == "c":
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"'c' expects a single character, got {value!r}")
            rendered.append(value)
        else:
            rendered.append(str(value))
    return rendered


def format_values(types: str, *args: Any) -> str:
    """Values formatted by the letters i, f, c and s, each followed by a space."""
    return "".join(f"{item} " for item in _render(types, args))


def print_values(types: str, *args: Any) -> None:
    """Write the formatted values on one line, without a newline."""
    sys.stdout.write(format_values(types, *args))


def println_values(types: str, *args: Any) -> None:
    """Write each formatted value on a line of its own."""
    sys.stdout.write("".join(f"{item}\n" for item in _render(types, args)))


class OrderedTuple:
    """A fixed sequence of values ordered by comparing them left to right."""

    __slots__ = ("_values",)

    def __init__(self, *values: Any) -> None:
        self._values = values

    @staticmethod
    def compare(lhs: OrderedTuple, rhs: OrderedTuple) -> int:
        """-1, 0 or 1 as ``lhs`` orders before, with or after ``rhs``."""
        if len(lhs) != len(rhs):
            raise TypeError(
                f"cannot compare tuples of length {len(lhs)} and {len(rhs)}"
            )
        for left, right in zip(lhs, rhs):
            if left < right:
                return -1
            if left > right:
                return 1
        return 0

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Any:
        return self._values[index]

    def __repr__(self) -> str:
        return f"OrderedTuple{self._values!r}"

    def __hash__(self) -> int:
        return hash(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedTuple):
            return NotImplemented
        return self.compare(self, other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, OrderedTuple):
            return NotImplemented
        return self.compare(self, other) != 0

    def __lt__(self, other: OrderedTuple) -> bool:
        if not isinstance(other, OrderedTuple):
            return NotImplemented
        return self.compare(self, other) < 0

    def __le__(self, other: OrderedTuple) -> bool:
        if not isinstance(other, OrderedTuple):
            return NotImplemented
        return self.compare(self, other) <= 0

    def __gt__(self, other: OrderedTuple) -> bool:
        if not isinstance(other, OrderedTuple):
            return NotImplemented
        return self.compare(self, other) > 0

    def __ge__(self, other: OrderedTuple) -> bool:
        if not isinstance(other, OrderedTuple):
            return NotImplemented
        return self.compare(self, other) >= 0