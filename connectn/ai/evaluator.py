"""
evaluator.py - Heuristic position scoring for the minimax search

The score is used when the search stops before reaching a finished game. It
rewards centre-column tokens and classifies every connect_n-long window on
the board:

    all cells are ours                         +100
    connect_n - 1 ours and one empty           +5
    connect_n - 2 ours and two empty           +2
    one empty and none of ours (opponent's)    -4
"""

from typing import Sequence

from connectn.utils import Token, Direction, BoardPosition

CENTER_WEIGHT = 3
COMPLETE_SCORE = 100
ONE_SHORT_SCORE = 5
TWO_SHORT_SCORE = 2
OPPONENT_ONE_SHORT_PENALTY = -4


def evaluate_window(window: Sequence[BoardPosition], token: Token) -> int:
    """
    Score one window of connect_n cells for a token.

    Args:
        window: The cells of the window
        token: The token we are scoring for

    Returns:
        The window's contribution to the position score
    """
    size = len(window)
    own = sum(1 for position in window if position.value == token)
    empty = sum(1 for position in window if position.value == Token.EMPTY)

    score = 0
    if own == size:
        score += COMPLETE_SCORE
    elif own == size - 1 and empty == 1:
        score += ONE_SHORT_SCORE
    elif own == size - 2 and empty == 2:
        score += TWO_SHORT_SCORE

    if empty == 1 and own == 0:
        score += OPPONENT_ONE_SHORT_PENALTY

    return score


def score_position(board, token: Token) -> int:
    """
    Heuristic evaluation of a board from one token's point of view.

    Args:
        board: The board to evaluate
        token: The token we are evaluating for

    Returns:
        Higher is better for token
    """
    size = board.connect_n

    center = board.cols // 2
    score = CENTER_WEIGHT * int((board.grid[:, center] == token.value).sum())

    for direction in Direction:
        for line in board.lines(direction):
            for start in range(len(line) - size + 1):
                score += evaluate_window(line[start:start + size], token)

    return score
