"""
utils.py - Constants, enumerations and helpers shared across the engine

This module provides the default game constants, the cell/result/direction
enumerations, the exception hierarchy and the ASCII board renderer used
throughout the connect-N implementation.
"""

from enum import Enum, auto
from typing import Dict, NamedTuple, Optional

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

# Search constants
DEFAULT_DEPTH = 3
WIN_SCORE = 10 ** 11  # Terminal score, dominates every heuristic value


class Token(Enum):
    """Enumeration representing cell states (empty or one of the two tokens)."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Token':
        """Get the opposing token."""
        if self == Token.ONE:
            return Token.TWO
        elif self == Token.TWO:
            return Token.ONE
        return Token.EMPTY

    def __str__(self):
        if self == Token.EMPTY:
            return "."
        elif self == Token.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS


class PlayerKind(Enum):
    """Who picks a player's moves."""
    HUMAN = auto()
    COMPUTER = auto()


class Direction(Enum):
    """Enumeration representing the four line directions through a point."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Positive diagonal, bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Negative diagonal, top-left to bottom-right


# Direction vectors (row, col); row 0 is the top of the board.
# Insertion order is the order lines are checked for a win.
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (-1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
}


class BoardPosition(NamedTuple):
    """A cell on the board together with its contents."""
    row: int
    col: int
    value: Token


class ConnectNError(Exception):
    """Base class for engine errors."""


class IllegalMoveError(ConnectNError):
    """Move rejected: not the player's turn, or the game is over."""


class ColumnFullError(IllegalMoveError):
    """Drop attempted into a column with no empty cell."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class ColumnOutOfRangeError(IllegalMoveError):
    """Column index outside the board."""

    def __init__(self, column: int, cols: int):
        super().__init__(f"Column {column} out of range (0-{cols - 1})")
        self.column = column


class ConfigurationError(ConnectNError, ValueError):
    """Invalid board or player configuration."""


def validate_dimensions(rows: int, cols: int, connect_n: int) -> None:
    """
    Check board dimensions and connect length.

    Raises:
        ConfigurationError: if a dimension is not positive or connect_n
            does not fit the board in any direction
    """
    for name, value in (("rows", rows), ("cols", cols), ("connect_n", connect_n)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")

    if connect_n > max(rows, cols):
        raise ConfigurationError(
            f"connect_n={connect_n} exceeds both board dimensions ({rows}x{cols})")


def render_board_ascii(grid: np.ndarray, glyphs: Optional[Dict[Token, str]] = None) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The board grid (Token values, row 0 at the top)
        glyphs: Optional display character per token

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    rows, cols = grid.shape
    symbols = {token: str(token) for token in Token}
    if glyphs:
        symbols.update(glyphs)

    width = max(len(str(cols - 1)), max(len(s) for s in symbols.values()))
    border = "+" + "-" * (cols * (width + 1) + 1) + "+"

    result = [border]
    for row in range(rows):
        cells = [symbols[Token(int(grid[row, col]))].center(width) for col in range(cols)]
        result.append("| " + " ".join(cells) + " |")
    result.append(border)
    result.append("  " + " ".join(str(col).center(width) for col in range(cols)))

    return "\n".join(result)
