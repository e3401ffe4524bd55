"""
board.py - Board representation for connect-N games

This module implements the Board class: a fixed-size grid of tokens that obey
gravity, with token insertion, column queries and extraction of the straight
lines (rows, columns, diagonals) running through any cell.
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np

from connectn.debug import debug
from connectn.utils import (ROWS, COLS, CONNECT_N, Token, Direction, DIRECTION_VECTORS,
                            BoardPosition, ColumnFullError, ColumnOutOfRangeError,
                            validate_dimensions, render_board_ascii)


class Board:
    """
    Represents a connect-N game board.

    Row 0 is the top row; tokens dropped into a column settle in the lowest
    empty row. The board knows nothing about turn order.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS, connect_n: int = CONNECT_N):
        """
        Initialize an empty board.

        Args:
            rows: Board height
            cols: Board width
            connect_n: Number of tokens in a line needed to win

        Raises:
            ConfigurationError: if the dimensions are invalid
        """
        validate_dimensions(rows, cols, connect_n)
        self.rows = int(rows)
        self.cols = int(cols)
        self.connect_n = int(connect_n)
        debug.debug(f"Initializing {self.rows}x{self.cols} board, connect {self.connect_n}", "board")
        self.reset()

    def reset(self):
        """Clear every cell; dimensions are unchanged."""
        self.grid = np.full((self.rows, self.cols), Token.EMPTY.value, dtype=np.int8)
        self.last_move: Optional[Tuple[int, int]] = None
        self.move_count = 0

    def copy(self) -> 'Board':
        """
        Create a deep copy of the board.

        Returns:
            A new Board instance with the same state
        """
        new_board = Board.__new__(Board)
        new_board.rows = self.rows
        new_board.cols = self.cols
        new_board.connect_n = self.connect_n
        new_board.grid = self.grid.copy()
        new_board.last_move = self.last_move
        new_board.move_count = self.move_count
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.rows == other.rows and self.cols == other.cols
                and self.connect_n == other.connect_n
                and np.array_equal(self.grid, other.grid))

    __hash__ = None

    def cell(self, row: int, col: int) -> Token:
        """Token stored at (row, col)."""
        return Token(int(self.grid[row, col]))

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if a position is within the board boundaries."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_column(self, column: int) -> None:
        if not (0 <= column < self.cols):
            raise ColumnOutOfRangeError(column, self.cols)

    def is_column_full(self, column: int) -> bool:
        """True iff the topmost cell of the column holds a token."""
        self._check_column(column)
        return bool(self.grid[0, column] != Token.EMPTY.value)

    def is_full(self) -> bool:
        return not bool(np.any(self.grid[0] == Token.EMPTY.value))

    def available_columns(self) -> List[int]:
        """
        Columns that can still take a token.

        Returns:
            Non-full column indices in ascending order
        """
        return [col for col in range(self.cols) if self.grid[0, col] == Token.EMPTY.value]

    def first_available_row(self, column: int) -> Optional[int]:
        """Lowest empty row in a column, None if the column is full."""
        self._check_column(column)
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == Token.EMPTY.value:
                return row
        return None

    def last_filled_row(self, column: int) -> Optional[int]:
        """Topmost filled row in a column, None if the column is empty."""
        self._check_column(column)
        for row in range(self.rows):
            if self.grid[row, column] != Token.EMPTY.value:
                return row
        return None

    def drop(self, column: int, token: Token) -> int:
        """
        Drop a token into a column.

        Args:
            column: The column to place the token in (0-indexed)
            token: Token.ONE or Token.TWO

        Returns:
            The row the token landed in

        Raises:
            ColumnOutOfRangeError: if the column is not on the board
            ColumnFullError: if the column has no empty cell
        """
        if token == Token.EMPTY:
            raise ValueError("Cannot drop an empty token")

        row = self.first_available_row(column)
        if row is None:
            raise ColumnFullError(column)

        self.grid[row, column] = token.value
        self.last_move = (row, column)
        self.move_count += 1
        if debug.is_tracing():
            debug.trace(f"Placed {token.name} at ({row}, {column})", "board")
        return row

    def line_through(self, row: int, col: int, d_row: int, d_col: int) -> List[BoardPosition]:
        """
        Get the full line of cells through a pivot point.

        Walks outward from the pivot along (-d_row, -d_col) and (d_row, d_col)
        until leaving the board.

        Args:
            row: Pivot row
            col: Pivot column
            d_row: Row step of the direction
            d_col: Column step of the direction

        Returns:
            Positions ordered end to end: negative side (reversed), pivot, positive side
        """
        if (d_row, d_col) == (0, 0):
            raise ValueError("Direction vector must be non-zero")

        negative = []
        r, c = row - d_row, col - d_col
        while self.in_bounds(r, c):
            negative.append(BoardPosition(r, c, self.cell(r, c)))
            r -= d_row
            c -= d_col

        positive = []
        r, c = row + d_row, col + d_col
        while self.in_bounds(r, c):
            positive.append(BoardPosition(r, c, self.cell(r, c)))
            r += d_row
            c += d_col

        negative.reverse()
        return negative + [BoardPosition(row, col, self.cell(row, col))] + positive

    def lines(self, direction: Direction) -> Iterator[List[BoardPosition]]:
        """
        Iterate over every full line of the board in one direction.

        Each line starts at a cell whose predecessor along the direction is
        off the board, so every cell appears in exactly one line.
        """
        d_row, d_col = DIRECTION_VECTORS[direction]
        for row in range(self.rows):
            for col in range(self.cols):
                if not self.in_bounds(row - d_row, col - d_col):
                    yield self.line_through(row, col, d_row, d_col)

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array of Token values
        """
        return self.grid.copy()

    def render(self, glyphs=None) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid, glyphs)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, connect_n={self.connect_n})"
