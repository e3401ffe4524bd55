#!/usr/bin/env python3
"""
run.py - Main entry point for the connect-N engine

Examples:

    # Play against the minimax computer (depth 3)
    python run.py play

    # Let the computer open, searching 5 plies deep
    python run.py play --ai-first --depth 5

    # Two humans on a 7x8 board, connect 5
    python run.py play --opponent none --rows 7 --cols 8 --connect 5

    # Watch two computers play with full debug output
    python run.py play --opponent self --delay 0 --debug

    # Time the search on 50 sampled positions
    python run.py benchmark --depth 4 --iterations 50
"""

import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connectn.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
