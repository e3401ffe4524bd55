from connectn.game.board import Board
from connectn.game.win import longest_run, check_win_at
from connectn.utils import Token, BoardPosition


def make_line(symbols):
    values = {'X': Token.ONE, 'O': Token.TWO, '.': Token.EMPTY}
    return [BoardPosition(0, col, values[s]) for col, s in enumerate(symbols)]


def test_longest_run_absent_token():
    assert longest_run(make_line("OO.O"), Token.ONE) == []


def test_longest_run_finds_longest():
    run = longest_run(make_line("X.XXX.XX"), Token.ONE)
    assert [p.col for p in run] == [2, 3, 4]


def test_longest_run_first_seen_wins_ties():
    run = longest_run(make_line("XX.OXX"), Token.ONE)
    assert [p.col for p in run] == [0, 1]


def test_no_win_anywhere_on_empty_board():
    board = Board(6, 7, 4)
    for row in range(board.rows):
        for col in range(board.cols):
            for token in Token:
                assert check_win_at(board, row, col, token) is None


def test_horizontal_win(make_board):
    board = make_board("""
        . . . . . . .
        . . . . . . .
        . . . . . . .
        . . . . . . .
        O O O . . . .
        X X X X . . .
    """)
    run = check_win_at(board, 5, 3, Token.ONE)
    assert [(p.row, p.col) for p in run] == [(5, 0), (5, 1), (5, 2), (5, 3)]
    assert check_win_at(board, 4, 1, Token.TWO) is None


def test_vertical_win(make_board):
    board = make_board("""
        . . . . . . .
        . . . . . . .
        . . O . . . .
        . . O X . . .
        . . O X . . .
        . . O X . . .
    """)
    run = check_win_at(board, 2, 2, Token.TWO)
    assert sorted((p.row, p.col) for p in run) == [(2, 2), (3, 2), (4, 2), (5, 2)]
    # Runs are reported in line order: bottom to top
    assert run[0].row == 5


def test_diagonal_wins(make_board):
    board = make_board("""
        . . . . . . .
        . . . . . . .
        . . . X . . O
        . . X O . O X
        . X O O O X X
        X O X O X O X
    """)
    up = check_win_at(board, 3, 2, Token.ONE)
    assert [(p.row, p.col) for p in up] == [(5, 0), (4, 1), (3, 2), (2, 3)]

    board = make_board("""
        . . . . . .
        . . . . . .
        O . . . . .
        X O . . . .
        X X O . . .
        O X X O . .
    """)
    down = check_win_at(board, 2, 0, Token.TWO)
    assert [(p.row, p.col) for p in down] == [(2, 0), (3, 1), (4, 2), (5, 3)]


def test_horizontal_reported_before_vertical(make_board):
    board = make_board("""
        . . . . .
        . X . . .
        . X . . .
        . X . . .
        X X X X .
    """)
    run = check_win_at(board, 4, 1, Token.ONE)
    assert {p.row for p in run} == {4}


def test_connect_length_override(make_board):
    board = make_board("""
        . . . .
        X X X .
    """, connect_n=4)
    assert check_win_at(board, 1, 2, Token.ONE) is None
    assert check_win_at(board, 1, 2, Token.ONE, connect_n=3) is not None


def test_empty_token_never_wins(make_board):
    board = make_board("""
        . . .
        . . .
    """, connect_n=2)
    assert check_win_at(board, 0, 0, Token.EMPTY) is None


def test_whole_line_through_pivot_is_scanned(make_board):
    board = make_board("""
        . . . . . . .
        X X X X . . .
    """)
    run = check_win_at(board, 1, 6, Token.ONE)
    assert [p.col for p in run] == [0, 1, 2, 3]
    assert check_win_at(board, 1, 6, Token.TWO) is None
