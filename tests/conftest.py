import random

import pytest

from connectn.game.board import Board
from connectn.game.rules import Player
from connectn.game.win import check_win_at
from connectn.utils import Token, PlayerKind


@pytest.fixture
def board():
    return Board(6, 7, 4)


@pytest.fixture
def humans():
    return Player("Sumu", Token.ONE, "R"), Player("Andy", Token.TWO, "Y")


@pytest.fixture
def make_board():
    """Build a board from a picture, top row first ('X', 'O', '.')."""
    symbols = {'X': Token.ONE, 'O': Token.TWO, '.': Token.EMPTY}

    def _make(picture, connect_n=4):
        rows = [line.split() for line in picture.strip().splitlines()]
        board = Board(len(rows), len(rows[0]), connect_n)
        for r, line in enumerate(rows):
            for c, symbol in enumerate(line):
                board.grid[r, c] = symbols[symbol].value
        return board

    return _make


@pytest.fixture
def make_computer():
    def _make(name, token, depth=2):
        return Player(name, token, kind=PlayerKind.COMPUTER, search_depth=depth)
    return _make


def random_position(board, rng, max_moves):
    """Alternate random drops, stopping before any move that would win."""
    token = Token.ONE
    for _ in range(max_moves):
        columns = board.available_columns()
        if not columns:
            break
        column = rng.choice(columns)
        trial = board.copy()
        row = trial.drop(column, token)
        if check_win_at(trial, row, column, token):
            break
        board = trial
        token = token.other()
    return board, token


@pytest.fixture
def sample_positions():
    """Seeded random mid-game positions on small boards with the token to move."""
    rng = random.Random(2019)
    positions = []
    for rows, cols, connect_n in [(4, 4, 3), (4, 5, 3), (5, 5, 4), (5, 4, 3)]:
        for _ in range(6):
            board, token = random_position(Board(rows, cols, connect_n), rng,
                                           rng.randint(0, rows * cols // 2))
            if board.available_columns():
                positions.append((board, token))
    return positions
