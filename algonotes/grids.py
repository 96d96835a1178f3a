"""Problems on two-dimensional grids: matrices, sudoku and word search."""

from __future__ import annotations

from typing import Optional

DIGITS = "123456789"
EMPTY = "."


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def spiral_order(matrix: list[list[int]]) -> list[int]:
    """Return the elements of the matrix in clockwise spiral order."""
    if not matrix:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    out: list[int] = []
    while True:
        out.extend(matrix[top][left : right + 1])
        top += 1
        if top > bottom:
            break
        out.extend(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        if right < left:
            break
        out.extend(matrix[bottom][c] for c in range(right, left - 1, -1))
        bottom -= 1
        if bottom < top:
            break
        out.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
        left += 1
        if left > right:
            break
    return out


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0


def _box(i: int, j: int) -> int:
    return i // 3 * 3 + j // 3


def _check_cell(cell: str) -> None:
    if cell != EMPTY and (len(cell) != 1 or cell not in DIGITS):
        raise ValueError(f"invalid sudoku cell {cell!r}")


def is_valid_sudoku(board: list[list[str]]) -> bool:
    """Whether no digit repeats in any row, column or 3x3 box."""
    seen: set[tuple[str, int, str]] = set()
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            _check_cell(cell)
            if cell == EMPTY:
                continue
            keys = (("row", i, cell), ("col", j, cell), ("box", _box(i, j), cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the empty cells in place; return False and leave them empty if impossible."""
    rows: list[set[str]] = [set() for _ in range(9)]
    cols: list[set[str]] = [set() for _ in range(9)]
    boxes: list[set[str]] = [set() for _ in range(9)]
    empties: list[tuple[int, int]] = []
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            _check_cell(cell)
            if cell == EMPTY:
                empties.append((i, j))
            else:
                rows[i].add(cell)
                cols[j].add(cell)
                boxes[_box(i, j)].add(cell)

    def place(index: int) -> bool:
        if index == len(empties):
            return True
        i, j = empties[index]
        b = _box(i, j)
        for digit in DIGITS:
            if digit in rows[i] or digit in cols[j] or digit in boxes[b]:
                continue
            board[i][j] = digit
            rows[i].add(digit)
            cols[j].add(digit)
            boxes[b].add(digit)
            if place(index + 1):
                return True
            rows[i].discard(digit)
            cols[j].discard(digit)
            boxes[b].discard(digit)
        board[i][j] = EMPTY
        return False

    return place(0)


def word_exists(board: list[list[str]], word: str) -> bool:
    """Whether ``word`` can be traced through adjacent cells, each used once."""
    if not word:
        return True
    if not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    last = len(word) - 1

    def search(i: int, j: int, k: int) -> bool:
        cell: Optional[str] = board[i][j]
        if cell != word[k]:
            return False
        if k == last:
            return True
        board[i][j] = None  # type: ignore[call-overload]
        try:
            neighbours = ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1))
            return any(
                search(r, c, k + 1)
                for r, c in neighbours
                if 0 <= r < rows and 0 <= c < cols
            )
        finally:
            board[i][j] = cell  # type: ignore[call-overload]

    return any(search(i, j, 0) for i in range(rows) for j in range(cols))