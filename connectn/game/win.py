"""
win.py - Line-based win detection

A win is a contiguous run of at least connect_n identical tokens on one of the
four lines through the most recently filled cell.
"""

from typing import List, Optional, Sequence

from connectn.utils import Token, DIRECTION_VECTORS, BoardPosition


def longest_run(line: Sequence[BoardPosition], token: Token) -> List[BoardPosition]:
    """
    Find the longest contiguous run of a token along a line.

    Args:
        line: Spatially ordered positions
        token: Token to look for

    Returns:
        The positions of the longest run, the earliest one if several tie;
        empty if the token never appears
    """
    best: List[BoardPosition] = []
    current: List[BoardPosition] = []

    for position in line:
        if position.value == token:
            current.append(position)
            if len(current) > len(best):
                best = list(current)
        else:
            current = []

    return best


def check_win_at(board, row: int, col: int, token: Token,
                 connect_n: Optional[int] = None) -> Optional[List[BoardPosition]]:
    """
    Check the four lines through (row, col) for a winning run.

    Lines are checked horizontal, vertical, positive diagonal, then negative
    diagonal; the first qualifying run is returned.

    Args:
        board: The board to inspect
        row: Row of the pivot cell
        col: Column of the pivot cell
        token: Token the run must consist of
        connect_n: Required run length (defaults to board.connect_n)

    Returns:
        The winning run, or None
    """
    if token == Token.EMPTY:
        return None

    needed = board.connect_n if connect_n is None else connect_n

    for d_row, d_col in DIRECTION_VECTORS.values():
        run = longest_run(board.line_through(row, col, d_row, d_col), token)
        if len(run) >= needed:
            return run

    return None
