"""
cli.py - Command-line interface for playing connect-N

This module provides a terminal front end for the engine: it renders the
board whenever a token is placed, reads human moves from stdin, paces the
computer player's moves, and benchmarks the minimax search.
"""

import argparse
import random
import sys
import time
from typing import Callable, List, Optional

from connectn.ai.minimax import MinimaxSearch
from connectn.config import GameConfig, PlayerConfig
from connectn.debug import debug, DebugLevel
from connectn.game.board import Board
from connectn.game.rules import GameState, Outcome, Player
from connectn.game.win import check_win_at
from connectn.utils import (ROWS, COLS, CONNECT_N, DEFAULT_DEPTH, Token, GameResult,
                            PlayerKind, ConnectNError)

# Special commands returned by get_human_move
QUIT = -1
RESTART = -2


class SimpleCLI:
    """Simple command-line interface for connect-N."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        """
        Initialize the CLI.

        Args:
            input_func: Reads one line of user input (prompt in, text out)
            output: Writes one line of text
        """
        self.input = input_func
        self.output = output
        self.args = None
        self.game: Optional[GameState] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect-N CLI')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        board_options = argparse.ArgumentParser(add_help=False)
        board_options.add_argument('--rows', type=int, default=ROWS, help='Board height')
        board_options.add_argument('--cols', type=int, default=COLS, help='Board width')
        board_options.add_argument('--connect', type=int, default=CONNECT_N,
                                   help='Tokens in a line needed to win')
        board_options.add_argument('--depth', type=int, default=DEFAULT_DEPTH,
                                   help='Minimax search depth of the computer player')
        board_options.add_argument('--debug', action='store_true', help='Enable debug mode')
        board_options.add_argument('--debug_level', type=str, default=None,
                                   choices=[level.name.lower() for level in DebugLevel],
                                   help='Set debug level explicitly')

        # Play command
        play_parser = subparsers.add_parser('play', parents=[board_options],
                                            help='Play a game interactively')
        play_parser.add_argument('--opponent', choices=['minimax', 'none', 'self'],
                                 default='minimax',
                                 help='minimax (computer opponent), none (two humans), '
                                      'self (computer against computer)')
        play_parser.add_argument('--ai-first', action='store_true',
                                 help='Let the computer make the first move')
        play_parser.add_argument('--delay', type=float, default=0.5,
                                 help='Seconds to wait before showing a computer move')

        # Benchmark command
        benchmark_parser = subparsers.add_parser('benchmark', parents=[board_options],
                                                 help='Benchmark the minimax search')
        benchmark_parser.add_argument('--iterations', type=int, default=20,
                                      help='Number of positions to search')
        benchmark_parser.add_argument('--seed', type=int, default=0,
                                      help='Seed for the sampled positions')

        self.args = parser.parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)

        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        try:
            if self.args.command == 'play':
                self.play_game()
            elif self.args.command == 'benchmark':
                self.benchmark()
            else:
                self.output("Please specify a command. Use --help for options.")
                return 1
        except ConnectNError as e:
            # Configuration errors surface here before any game starts
            debug.error(str(e), "cli")
            self.output(f"Error: {e}")
            return 2

        return 0

    def build_config(self) -> GameConfig:
        """Turn the play options into a game configuration."""
        args = self.args
        human = PlayerKind.HUMAN
        computer = PlayerKind.COMPUTER

        if args.opponent == 'none':
            first = PlayerConfig("Player 1", "X", human)
            second = PlayerConfig("Player 2", "O", human)
        elif args.opponent == 'self':
            first = PlayerConfig("Computer 1", "X", computer, args.depth, args.delay)
            second = PlayerConfig("Computer 2", "O", computer, args.depth, args.delay)
        elif args.ai_first:
            first = PlayerConfig("Computer", "X", computer, args.depth, args.delay)
            second = PlayerConfig("You", "O", human)
        else:
            first = PlayerConfig("You", "X", human)
            second = PlayerConfig("Computer", "O", computer, args.depth, args.delay)

        return GameConfig(args.rows, args.cols, args.connect, first, second)

    def play_game(self) -> None:
        """Play a game interactively."""
        config = self.build_config()
        # Computer moves are triggered here so they can be delayed for display
        self.game = GameState.from_config(config,
                                          on_token_placed=self.on_token_placed,
                                          on_game_over=self.on_game_over,
                                          auto_play=False)
        game = self.game

        self.output(f"Starting a new game: {config.rows}x{config.cols}, connect {config.connect_n}")
        self.output(f"{game.player_one} vs {game.player_two}")
        self.output(f"Enter a column number (0-{config.cols - 1}). 'q' to quit, 'r' to restart.")
        self.output(game.render())

        while not game.is_game_over():
            player = game.current_player

            if player.is_computer:
                self.output(f"{player.name} is thinking...")
                time.sleep(player.delay)
                game.play_computer_turn()
                continue

            move = self.get_human_move(player)
            if move is None:
                continue
            elif move == QUIT:
                self.output("Quitting game.")
                return
            elif move == RESTART:
                game.reset()
                self.output("Game restarted.")
                self.output(game.render())
                continue

            if not game.apply_move(move, player):
                self.output(f"Invalid move: column {move} is full.")

    def get_human_move(self, player: Player) -> Optional[int]:
        """
        Get a move from human player input.

        Returns:
            Column index, a special command code, or None if the input was invalid
        """
        cols = self.game.board.cols
        try:
            user_input = self.input(f"{player.name} ({player.glyph}), your move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART

        try:
            move = int(user_input)
        except ValueError:
            self.output("Invalid input. Please enter a column number or command.")
            return None

        if not (0 <= move < cols):
            self.output(f"Column must be between 0 and {cols - 1}.")
            return None

        return move

    def on_token_placed(self, column: int, row: int, token: Token) -> None:
        """Render the board after every drop."""
        player = self.game.player_for(token)
        self.output(f"{player.name} plays column {column}")
        self.output(self.game.render())

    def on_game_over(self, outcome: Outcome) -> None:
        """Announce the result."""
        self.output("Game over!")
        if outcome.result == GameResult.WON:
            cells = ", ".join(f"({p.row}, {p.col})" for p in outcome.winning_line)
            self.output(f"{outcome.winner.name} wins! Winning line: {cells}")
        else:
            self.output("It's a draw!")

    def benchmark(self) -> None:
        """Time the minimax search on sampled mid-game positions."""
        args = self.args
        rng = random.Random(args.seed)
        search = MinimaxSearch(depth=args.depth)

        self.output(f"Running benchmark: depth {args.depth}, {args.iterations} positions, "
                    f"{args.rows}x{args.cols} connect {args.connect}")

        total_time = 0.0
        total_nodes = 0
        searches = 0
        for _ in range(args.iterations):
            board = self.random_position(Board(args.rows, args.cols, args.connect), rng)
            if not board.available_columns():
                continue

            token = Token.ONE if board.move_count % 2 == 0 else Token.TWO
            with debug.timed("benchmark", "cli") as timing:
                search.choose_move(board, token)
            total_time += timing['elapsed']
            total_nodes += search.nodes_evaluated
            searches += 1

        if not searches:
            self.output("No searchable positions were sampled.")
            return

        self.output(f"Searched {searches} positions: {total_time:.6f} seconds total, "
                    f"{total_time / searches * 1000:.3f} ms per search, "
                    f"{total_nodes / searches:.1f} nodes per search")

    @staticmethod
    def random_position(board: Board, rng: random.Random, max_moves: Optional[int] = None) -> Board:
        """Play random moves on a board, stopping before anyone wins."""
        if max_moves is None:
            max_moves = rng.randint(0, board.rows * board.cols // 2)

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

        return board


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
