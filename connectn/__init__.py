"""
connectn - Connect-N game engine with a minimax computer opponent

This package provides the board representation, win/draw detection and turn
engine for two-player connect-N games, plus the heuristic evaluator and the
alpha-beta minimax search that drive computer players.
"""

# Version number
__version__ = '0.1.0'
