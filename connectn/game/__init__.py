"""
connectn.game - Core game mechanics

This package contains the board representation, win detection and the turn
engine that enforces move legality and reports outcomes.
"""

from connectn.game.board import Board
from connectn.game.win import longest_run, check_win_at
from connectn.game.rules import Player, Outcome, GameState

__all__ = ['Board', 'longest_run', 'check_win_at', 'Player', 'Outcome', 'GameState']
