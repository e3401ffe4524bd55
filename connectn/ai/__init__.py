"""
connectn.ai - Computer opponent

This package provides the heuristic position evaluator and the minimax search
with alpha-beta pruning used by computer-controlled players.
"""

from connectn.ai.evaluator import evaluate_window, score_position
from connectn.ai.minimax import MinimaxSearch

__all__ = ['evaluate_window', 'score_position', 'MinimaxSearch']
