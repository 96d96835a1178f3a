"""Integer problems: digits, Roman numerals, powers and bit tricks."""

from __future__ import annotations

import re
from math import comb
from typing import Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ROMAN_PLACES = (
    ("", "M", "MM", "MMM"),
    ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM"),
    ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC"),
    ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX"),
)
_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ATOI_PATTERN = re.compile(r" *([+-]?)([0-9]*)")
_DECIMAL = frozenset("0123456789")
_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000


def _in_int32(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def is_palindrome_number(x: int) -> bool:
    """Whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def reverse_integer(x: int) -> int:
    """Reverse the digits of ``x``, keeping its sign; 0 if it leaves 32-bit range."""
    reversed_abs = int(str(abs(x))[::-1])
    result = -reversed_abs if x < 0 else reversed_abs
    return result if _in_int32(result) else 0


def my_atoi(text: str) -> int:
    """Parse a leading signed integer after spaces, clamped to 32-bit range."""
    match = _ATOI_PATTERN.match(text)
    assert match is not None
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    return max(INT_MIN, min(INT_MAX, value))


def int_to_roman(num: int) -> str:
    """Roman numeral for ``num`` in 0..3999; zero gives ''."""
    if not 0 <= num <= 3999:
        raise ValueError(f"number out of range 0..3999: {num}")
    thousands, rest = divmod(num, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, ones = divmod(rest, 10)
    places = (thousands, hundreds, tens, ones)
    return "".join(table[digit] for table, digit in zip(_ROMAN_PLACES, places))


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; a smaller symbol before a larger one subtracts."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral symbol: {exc.args[0]!r}") from None
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total


def divide(dividend: int, divisor: int) -> int:
    """Quotient truncated towards zero, clamped at the 32-bit maximum."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return min(quotient, INT_MAX)


def multiply_strings(num1: str, num2: str) -> str:
    """Product of two non-negative decimal strings, as a decimal string."""
    for num in (num1, num2):
        if not num or any(ch not in _DECIMAL for ch in num):
            raise ValueError(f"not a decimal number: {num!r}")
    return str(int(num1) * int(num2))


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time; 0 for n <= 0."""
    if n <= 0:
        return 0
    a, b = 1, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


def unique_paths(m: int, n: int) -> int:
    """Monotone paths from the top-left to the bottom-right of an m x n grid."""
    if m < 1 or n < 1:
        raise ValueError(f"grid sides must be positive, got {m} x {n}")
    return comb(m + n - 2, m - 1)


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as most-significant-first decimal digits."""
    result = list(digits)
    for i in reversed(range(len(result))):
        if result[i] < 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1] + result


def title_to_number(title: str) -> int:
    """Column number of a spreadsheet column title such as 'A' or 'AB'."""
    if not title:
        raise ValueError("column title must not be empty")
    number = 0
    for ch in title:
        if not "A" <= ch <= "Z":
            raise ValueError(f"invalid column letter {ch!r}")
        number = number * 26 + (ord(ch) - ord("A") + 1)
    return number


def hamming_weight(n: int) -> int:
    """Number of set bits in the non-negative integer ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return bin(n).count("1")


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def add_digits(num: int) -> int:
    """Repeatedly sum the digits of ``num`` until a single digit remains."""
    if num < 0:
        raise ValueError(f"num must not be negative, got {num}")
    return 0 if num == 0 else 1 + (num - 1) % 9


def is_ugly(num: int) -> bool:
    """Whether ``num`` is positive and has no prime factor other than 2, 3 and 5."""
    if num <= 0:
        return False
    for factor in (2, 3, 5):
        while num % factor == 0:
            num //= factor
    return num == 1


def can_win_nim(n: int) -> bool:
    """Whether the first player wins Nim with ``n`` stones, taking one to three."""
    return n % 4 != 0


def is_power_of_three(n: int) -> bool:
    """Whether ``n`` is a positive power of three."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def is_power_of_four(num: int) -> bool:
    """Whether ``num`` is a positive power of four."""
    return num > 0 and num & (num - 1) == 0 and (num - 1) % 3 == 0


def get_sum(a: int, b: int) -> int:
    """Sum of two 32-bit integers by carry propagation, wrapping on overflow."""
    a &= _MASK32
    b &= _MASK32
    while b:
        a, b = (a ^ b) & _MASK32, ((a & b) << 1) & _MASK32
    return a - (1 << 32) if a & _SIGN32 else a


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for _ in range(max(num_rows, 0)):
        if not rows:
            rows.append([1])
            continue
        prev = rows[-1]
        rows.append([1] + [a + b for a, b in zip(prev, prev[1:])] + [1])
    return rows