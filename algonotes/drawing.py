"""Text pictures: Sierpinski triangles and digit diamonds."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

DIAMOND_SIZES = (0, 1, 4, 7, 9)
SIERPINSKI_ORDERS = range(6)


def sierpinski(n: int) -> str:
    """A Sierpinski triangle of order ``n`` drawn with '/' and '\\', one row per line."""
    if n < 0:
        raise ValueError(f"order must not be negative, got {n}")
    width, height = 2 << n, 1 << n
    canvas = [[" "] * width for _ in range(height)]

    def draw(level: int, x: int, y: int) -> None:
        if level == 0:
            canvas[y][x : x + 2] = ["/", "\\"]
            return
        half = 1 << (level - 1)
        draw(level - 1, x, y)
        draw(level - 1, x + (1 << level), y)
        draw(level - 1, x + half, y - half)

    draw(n, 0, height - 1)
    return "".join("".join(row) + "\n" for row in canvas)


def diamond_digit(n: int) -> str:
    """A diamond whose row for digit i holds 2i-1 copies of i, widest at ``n``."""
    if not 0 <= n <= 9:
        raise ValueError(f"size must be in 0..9, got {n}")
    order = [*range(1, n + 1), *range(n - 1, 0, -1)]
    return "".join(
        " " * (2 * (n - i)) + " ".join(str(i) * (2 * i - 1)) + "\n" for i in order
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the sample pictures."""
    parser = argparse.ArgumentParser(description="Draw text pictures.")
    parser.add_argument(
        "figure",
        nargs="?",
        choices=("sierpinski", "diamond", "all"),
        default="all",
    )
    args = parser.parse_args(argv)
    if args.figure in ("sierpinski", "all"):
        for order in SIERPINSKI_ORDERS:
            print(f"\nn == {order}:\n")
            sys.stdout.write(sierpinski(order))
    if args.figure in ("diamond", "all"):
        for size in DIAMOND_SIZES:
            sys.stdout.write(diamond_digit(size))
    return 0