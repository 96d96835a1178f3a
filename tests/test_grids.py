import copy

import pytest

from algonotes.grids import (
    is_valid_sudoku,
    rotate_image,
    set_zeroes,
    solve_sudoku,
    spiral_order,
    word_exists,
)

PUZZLE = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]

WORD_BOARD = [list("ABCE"), list("SFCS"), list("ADEE")]


def board_from(rows):
    return [list(row) for row in rows]


def square(n):
    return [[i * n + j for j in range(n)] for i in range(n)]


def test_rotate_four_times_is_identity():
    matrix = square(4)
    for _ in range(4):
        rotate_image(matrix)
    assert matrix == square(4)


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_rotate_moves_cells_clockwise(n):
    original = square(n)
    matrix = square(n)
    rotate_image(matrix)
    assert all(
        matrix[i][j] == original[n - 1 - j][i] for i in range(n) for j in range(n)
    )
    assert matrix[0] == [row[0] for row in reversed(original)]


def test_rotate_non_square_raises():
    with pytest.raises(ValueError):
        rotate_image([[1, 2, 3], [4, 5, 6]])


def test_spiral_example():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@pytest.mark.parametrize("rows, cols", [(3, 4), (4, 3), (1, 5), (5, 1), (2, 2)])
def test_spiral_visits_every_cell_once(rows, cols):
    matrix = [[i * cols + j for j in range(cols)] for i in range(rows)]
    spiral = spiral_order(matrix)
    assert sorted(spiral) == [v for row in matrix for v in row]
    assert spiral[:cols] == matrix[0]


def test_spiral_empty():
    assert spiral_order([]) == []
    assert spiral_order([[]]) == []


@pytest.mark.parametrize(
    "matrix",
    [
        [[1, 1, 1], [1, 0, 1], [1, 1, 1]],
        [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]],
        [[1, 2], [3, 4]],
    ],
)
def test_set_zeroes(matrix):
    original = copy.deepcopy(matrix)
    zero_rows = {i for i, row in enumerate(original) if 0 in row}
    zero_cols = {j for row in original for j, v in enumerate(row) if v == 0}
    set_zeroes(matrix)
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if i in zero_rows or j in zero_cols:
                assert value == 0
            else:
                assert value == original[i][j]


def test_puzzle_is_valid():
    assert is_valid_sudoku(board_from(PUZZLE))


@pytest.mark.parametrize(
    "i, j, digit",
    [(0, 2, "5"), (2, 0, "5"), (1, 1, "5")],
)
def test_duplicate_makes_board_invalid(i, j, digit):
    board = board_from(PUZZLE)
    board[i][j] = digit
    assert not is_valid_sudoku(board)


def test_invalid_cell_raises():
    board = board_from(PUZZLE)
    board[0][2] = "x"
    with pytest.raises(ValueError):
        is_valid_sudoku(board)
    with pytest.raises(ValueError):
        solve_sudoku(board)


def test_solve_sudoku():
    board = board_from(PUZZLE)
    assert solve_sudoku(board)
    assert is_valid_sudoku(board)
    for row in board:
        assert sorted(row) == list("123456789")
    for given, row in zip(PUZZLE, board):
        assert all(g == "." or g == c for g, c in zip(given, row))


def test_unsolvable_sudoku_left_unchanged():
    rows = ["12345678.", "........9"] + ["........."] * 7
    board = board_from(rows)
    assert is_valid_sudoku(board)
    assert not solve_sudoku(board)
    assert board == board_from(rows)


@pytest.mark.parametrize(
    "word, expected",
    [("ABCCED", True), ("SEE", True), ("ABCB", False), ("A", True), ("Z", False)],
)
def test_word_exists(word, expected):
    board = copy.deepcopy(WORD_BOARD)
    assert word_exists(board, word) is expected
    assert board == WORD_BOARD


def test_word_exists_empty_inputs():
    assert word_exists(copy.deepcopy(WORD_BOARD), "")
    assert not word_exists([], "A")
    assert not word_exists([[]], "A")


def test_word_cannot_reuse_cell():
    assert not word_exists([["A", "B"]], "ABA")