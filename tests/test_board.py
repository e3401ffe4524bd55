import random

import numpy as np
import pytest

from connectn.game.board import Board
from connectn.utils import (Token, Direction, DIRECTION_VECTORS, ColumnFullError,
                            ColumnOutOfRangeError, IllegalMoveError, ConfigurationError)


def assert_gravity(board):
    for col in range(board.cols):
        column = [board.cell(row, col) for row in range(board.rows)]
        filled = [value != Token.EMPTY for value in column]
        # Once a filled cell appears (reading top down) everything below is filled
        first = filled.index(True) if True in filled else board.rows
        assert all(filled[first:])


def test_empty_board_has_all_columns_available(board):
    assert board.available_columns() == list(range(7))
    assert not board.is_full()
    assert board.last_move is None


def test_drop_lands_on_bottom_and_stacks(board):
    assert board.drop(3, Token.ONE) == 5
    assert board.drop(3, Token.TWO) == 4
    assert board.cell(5, 3) == Token.ONE
    assert board.cell(4, 3) == Token.TWO
    assert board.last_move == (4, 3)
    assert board.move_count == 2


def test_drop_into_full_column_fails_without_mutation(board):
    for i in range(board.rows):
        board.drop(0, Token.ONE if i % 2 == 0 else Token.TWO)

    before = board.get_state()
    with pytest.raises(ColumnFullError) as excinfo:
        board.drop(0, Token.ONE)

    assert excinfo.value.column == 0
    assert isinstance(excinfo.value, IllegalMoveError)
    assert np.array_equal(board.grid, before)
    assert board.move_count == board.rows


@pytest.mark.parametrize("column", [-1, 7, 100])
def test_drop_out_of_range(board, column):
    with pytest.raises(ColumnOutOfRangeError):
        board.drop(column, Token.ONE)
    assert board.move_count == 0


def test_drop_empty_token_rejected(board):
    with pytest.raises(ValueError):
        board.drop(0, Token.EMPTY)


def test_full_column_disappears_from_available(board):
    for _ in range(board.rows):
        board.drop(4, Token.TWO)

    assert board.is_column_full(4)
    assert board.available_columns() == [0, 1, 2, 3, 5, 6]


def test_first_available_and_last_filled_rows(board):
    assert board.first_available_row(2) == 5
    assert board.last_filled_row(2) is None

    board.drop(2, Token.ONE)
    board.drop(2, Token.TWO)
    assert board.first_available_row(2) == 3
    assert board.last_filled_row(2) == 4

    for _ in range(4):
        board.drop(2, Token.ONE)
    assert board.first_available_row(2) is None
    assert board.last_filled_row(2) == 0


def test_random_drops_keep_gravity():
    rng = random.Random(7)
    board = Board(5, 6, 4)
    token = Token.ONE
    while board.available_columns():
        board.drop(rng.choice(board.available_columns()), token)
        token = token.other()
        assert_gravity(board)
    assert board.is_full()


def test_reset_restores_fresh_board(board):
    for column in [3, 3, 2, 4, 6, 0]:
        board.drop(column, Token.ONE)
    board.reset()

    assert board == Board(6, 7, 4)
    assert board.last_move is None
    assert board.move_count == 0


def test_copy_is_independent(board):
    board.drop(1, Token.ONE)
    clone = board.copy()
    clone.drop(1, Token.TWO)

    assert board.cell(4, 1) == Token.EMPTY
    assert clone.cell(4, 1) == Token.TWO
    assert clone.last_move == (4, 1)
    assert board.last_move == (5, 1)
    assert board != clone


def test_horizontal_line_is_ordered_left_to_right(board):
    line = board.line_through(5, 3, *DIRECTION_VECTORS[Direction.HORIZONTAL])
    assert [(p.row, p.col) for p in line] == [(5, c) for c in range(7)]


def test_vertical_line_is_ordered_bottom_to_top(board):
    board.drop(0, Token.ONE)
    line = board.line_through(2, 0, *DIRECTION_VECTORS[Direction.VERTICAL])
    assert [(p.row, p.col) for p in line] == [(r, 0) for r in range(5, -1, -1)]
    assert line[0].value == Token.ONE
    assert all(p.value == Token.EMPTY for p in line[1:])


def test_diagonal_lines(board):
    up = board.line_through(3, 2, *DIRECTION_VECTORS[Direction.DIAGONAL_UP])
    assert [(p.row, p.col) for p in up] == [(5, 0), (4, 1), (3, 2), (2, 3), (1, 4), (0, 5)]

    down = board.line_through(2, 2, *DIRECTION_VECTORS[Direction.DIAGONAL_DOWN])
    assert [(p.row, p.col) for p in down] == [(i, i) for i in range(6)]


def test_line_through_corner_pivot(board):
    line = board.line_through(0, 6, *DIRECTION_VECTORS[Direction.DIAGONAL_DOWN])
    assert [(p.row, p.col) for p in line] == [(0, 6)]


@pytest.mark.parametrize("direction", list(Direction))
def test_lines_cover_every_cell_once(direction):
    board = Board(4, 6, 3)
    cells = [(p.row, p.col) for line in board.lines(direction) for p in line]
    assert sorted(cells) == [(r, c) for r in range(4) for c in range(6)]


@pytest.mark.parametrize("rows,cols,connect_n", [
    (0, 7, 4),
    (6, -1, 4),
    (6, 7, 0),
    (6, 7, 8),
    (3, 3, 4),
])
def test_invalid_dimensions(rows, cols, connect_n):
    with pytest.raises(ConfigurationError):
        Board(rows, cols, connect_n)


def test_connect_length_may_match_longest_side():
    board = Board(6, 7, 7)
    assert board.connect_n == 7


def test_render_shows_tokens_and_column_numbers(board):
    board.drop(0, Token.ONE)
    board.drop(1, Token.TWO)
    text = board.render()
    lines = text.splitlines()

    assert lines[-1].split() == [str(c) for c in range(7)]
    assert lines[-3].split()[1:3] == ["X", "O"]
    assert str(board) == text
