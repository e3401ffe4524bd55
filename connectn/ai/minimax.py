"""
minimax.py - Minimax search with alpha-beta pruning for connect-N

This module provides the MinimaxSearch class which picks a column for a token
by exploring every move sequence up to a fixed depth. Finished games score
+/-WIN_SCORE from the searching token's point of view (0 for a draw) and
positions at the depth limit fall back to the heuristic evaluator.

Every branch works on its own copy of the board, so the board passed to
choose_move is never modified.
"""

import math
import random
from typing import Any, Dict, List, Optional

from connectn.ai.evaluator import score_position
from connectn.debug import debug
from connectn.game.win import check_win_at
from connectn.utils import DEFAULT_DEPTH, WIN_SCORE, Token, ConfigurationError


class MinimaxSearch:
    """
    Fixed-depth minimax search, with alpha-beta pruning unless prune=False.

    Columns are tried in ascending order and the first column reaching the
    best score is chosen. Passing a seeded random.Random as rng instead picks
    uniformly among all columns sharing the best score.
    """

    def __init__(self, depth: int = DEFAULT_DEPTH, prune: bool = True,
                 rng: Optional[random.Random] = None):
        """
        Initialize the search.

        Args:
            depth: Plies to look ahead (higher = stronger but slower)
            prune: Use alpha-beta cutoffs; results are identical either way
            rng: Random source for the root tie-break
        """
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
            raise ConfigurationError(f"Search depth must be a positive integer, got {depth!r}")

        self.depth = depth
        self.prune = prune
        self.rng = rng
        self.nodes_evaluated = 0  # For performance tracking
        self.cutoffs = 0
        self.last_info: Dict[str, Any] = {}

    def choose_move(self, board, token: Token) -> int:
        """
        Get the best column for a token.

        Args:
            board: The current game board (left untouched)
            token: The token to move for; it is the maximizing side

        Returns:
            The column index of the best move

        Raises:
            ValueError: if the board has no available column
        """
        columns = board.available_columns()
        if not columns:
            raise ValueError("No available columns to search")

        self.nodes_evaluated = 0
        self.cutoffs = 0
        debug.start_timer("minimax")

        alpha, beta = -math.inf, math.inf
        best_score = -math.inf
        best_columns: List[int] = []

        for column in columns:
            child = board.copy()
            child.drop(column, token)

            # A random tie-break needs exact scores for ties, not bounds
            window_alpha = alpha - 1 if self.rng is not None else alpha
            score = self.value(child, self.depth - 1, window_alpha, beta, False, token)
            debug.trace(f"Root column {column}: {score}", "ai")

            if score > best_score:
                best_score = score
                best_columns = [column]
            elif score == best_score:
                best_columns.append(column)

            alpha = max(alpha, best_score)

        if self.rng is not None and len(best_columns) > 1:
            best_column = self.rng.choice(best_columns)
        else:
            best_column = best_columns[0]

        elapsed = debug.end_timer("minimax", "ai") or 0.0
        self.last_info = {
            'move_col': best_column,
            'depth': self.depth,
            'nodes': self.nodes_evaluated,
            'cutoffs': self.cutoffs,
            'eval': best_score,
            'time_ms': int(elapsed * 1000),
        }
        debug.debug(f"Search for {token.name}: column {best_column}, score {best_score}, "
                    f"{self.nodes_evaluated} nodes, {self.cutoffs} cutoffs", "ai")
        return best_column

    def _terminal_score(self, board, token: Token) -> Optional[int]:
        """Score of a finished game, or None if the game goes on."""
        if board.last_move is not None:
            row, col = board.last_move
            mover = board.cell(row, col)
            if check_win_at(board, row, col, mover) is not None:
                return WIN_SCORE if mover == token else -WIN_SCORE

        if board.is_full():
            return 0

        return None

    def value(self, board, depth: int, alpha: float, beta: float,
              maximizing: bool, token: Token) -> float:
        """
        Minimax value of a position.

        Args:
            board: Position to evaluate
            depth: Remaining search depth
            alpha: Best score the maximizer can already guarantee
            beta: Best score the minimizer can already guarantee
            maximizing: True if token is to move
            token: The token we are maximizing for

        Returns:
            The backed-up score for this position
        """
        self.nodes_evaluated += 1

        terminal = self._terminal_score(board, token)
        if terminal is not None:
            return terminal

        # Depth limit reached - use heuristic evaluation
        if depth == 0:
            return score_position(board, token)

        if maximizing:
            best = -math.inf
            for column in board.available_columns():
                child = board.copy()
                child.drop(column, token)

                best = max(best, self.value(child, depth - 1, alpha, beta, False, token))
                alpha = max(alpha, best)

                if self.prune and alpha >= beta:
                    self.cutoffs += 1
                    break
            return best

        best = math.inf
        opponent = token.other()
        for column in board.available_columns():
            child = board.copy()
            child.drop(column, opponent)

            best = min(best, self.value(child, depth - 1, alpha, beta, True, token))
            beta = min(beta, best)

            if self.prune and alpha >= beta:
                self.cutoffs += 1
                break
        return best
