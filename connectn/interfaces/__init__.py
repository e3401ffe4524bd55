"""
connectn.interfaces - User interfaces for the engine

This package contains the terminal interface that drives GameState and
renders its notifications.
"""

# Don't import anything here to avoid circular imports
__all__ = []
