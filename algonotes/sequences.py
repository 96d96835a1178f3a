"""Integer sequences: Fibonacci numbers and a numbered table of primes."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

DEFAULT_FIBONACCI_COUNT = 30
DEFAULT_PRIME_LIMIT = 499


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    previous, value = 0, 0
    for step in range(n):
        previous, value = value, (value + previous if step else 1)
    return value


def primes_up_to(limit: int) -> list[int]:
    """All primes from 2 up to and including ``limit``, in increasing order."""
    if limit < 2:
        return []
    is_prime = [True] * (limit + 1)
    is_prime[0] = is_prime[1] = False
    for candidate in range(2, int(limit**0.5) + 1):
        if is_prime[candidate]:
            is_prime[candidate * candidate :: candidate] = [False] * len(
                range(candidate * candidate, limit + 1, candidate)
            )
    return [number for number, prime in enumerate(is_prime) if prime]


def prime_table(limit: int) -> str:
    """A numbered table of the primes up to ``limit``, one ' No.k : p' per line."""
    return "".join(
        f" No.{index} : {prime}\n"
        for index, prime in enumerate(primes_up_to(limit), start=1)
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the Fibonacci numbers and the table of primes."""
    parser = argparse.ArgumentParser(description="Print integer sequences.")
    parser.add_argument(
        "sequence",
        nargs="?",
        choices=("fibonacci", "primes", "all"),
        default="all",
    )
    parser.add_argument("--count", type=int, default=DEFAULT_FIBONACCI_COUNT)
    parser.add_argument("--limit", type=int, default=DEFAULT_PRIME_LIMIT)
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must not be negative")
    if args.sequence in ("fibonacci", "all"):
        for n in range(1, args.count + 1):
            print(fibonacci(n))
    if args.sequence in ("primes", "all"):
        sys.stdout.write(prime_table(args.limit))
    return 0