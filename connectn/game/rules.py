"""
rules.py - Players and turn engine for connect-N games

This module provides:
1. The Player value (name, glyph, token and human/computer kind)
2. The Outcome of a game
3. GameState, which enforces turn order, applies moves, detects wins and
   draws, and lets computer players answer automatically
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from connectn.config import GameConfig, PlayerConfig, validate_player_fields
from connectn.debug import debug
from connectn.game.board import Board
from connectn.game.win import check_win_at
from connectn.utils import (ROWS, COLS, CONNECT_N, DEFAULT_DEPTH, Token, GameResult,
                            PlayerKind, BoardPosition, IllegalMoveError, ColumnFullError,
                            ConfigurationError)


@dataclass(frozen=True)
class Player:
    """
    A participant in the game.

    The kind tag decides who picks the moves; computer players search
    search_depth plies ahead.
    """
    name: str
    token: Token
    glyph: str = ""
    kind: PlayerKind = PlayerKind.HUMAN
    search_depth: int = DEFAULT_DEPTH
    delay: float = 0.0

    def __post_init__(self):
        if self.token not in (Token.ONE, Token.TWO):
            raise ConfigurationError(f"Player token must be ONE or TWO, got {self.token}")
        validate_player_fields(self.name, self.kind, self.search_depth, self.delay)
        if not self.glyph:
            object.__setattr__(self, 'glyph', str(self.token))

    @classmethod
    def from_config(cls, config: PlayerConfig, token: Token) -> 'Player':
        return cls(name=config.name, token=token, glyph=config.glyph, kind=config.kind,
                   search_depth=config.search_depth, delay=config.delay)

    @property
    def is_computer(self) -> bool:
        return self.kind == PlayerKind.COMPUTER

    def __str__(self):
        return f"{self.name} ({self.glyph})"


@dataclass(frozen=True)
class Outcome:
    """Result of a game, with the winner and winning line when there is one."""
    result: GameResult = GameResult.IN_PROGRESS
    winner: Optional[Player] = None
    winning_line: Tuple[BoardPosition, ...] = ()

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    def __str__(self):
        if self.result == GameResult.WON:
            return f"{self.winner.name} wins"
        if self.result == GameResult.DRAW:
            return "Draw"
        return "In progress"


TokenPlacedCallback = Callable[[int, int, Token], None]
GameOverCallback = Callable[[Outcome], None]


class GameState:
    """
    Turn engine for a connect-N game.

    Illegal moves are ignored by default (apply_move returns False); pass
    strict=True to have them raised instead. When the player to move is a
    computer and auto_play is on, its move is searched and applied right away.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS, connect_n: int = CONNECT_N,
                 player_one: Optional[Player] = None, player_two: Optional[Player] = None,
                 on_token_placed: Optional[TokenPlacedCallback] = None,
                 on_game_over: Optional[GameOverCallback] = None,
                 strict: bool = False, auto_play: bool = True,
                 rng: Optional[random.Random] = None):
        """
        Initialize a new game.

        Args:
            rows: Board height
            cols: Board width
            connect_n: Tokens in a line needed to win
            player_one: First player, must hold Token.ONE
            player_two: Second player, must hold Token.TWO
            on_token_placed: Called with (column, row, token) after every drop
            on_game_over: Called with the final Outcome
            strict: Raise IllegalMoveError instead of ignoring illegal moves
            auto_play: Let computer players move as soon as it is their turn
            rng: Seeded random source for computer tie-breaks (None = first column wins)

        Raises:
            ConfigurationError: on invalid dimensions or players
        """
        player_one = player_one or Player("Player 1", Token.ONE)
        player_two = player_two or Player("Player 2", Token.TWO)
        if player_one.token != Token.ONE or player_two.token != Token.TWO:
            raise ConfigurationError("player_one must hold Token.ONE and player_two Token.TWO")

        self.board = Board(rows, cols, connect_n)
        self.player_one = player_one
        self.player_two = player_two
        self.on_token_placed = on_token_placed
        self.on_game_over = on_game_over
        self.strict = strict
        self.auto_play = auto_play

        from connectn.ai.minimax import MinimaxSearch
        self._searches: Dict[Token, MinimaxSearch] = {
            player.token: MinimaxSearch(depth=player.search_depth, rng=rng)
            for player in (player_one, player_two) if player.is_computer
        }

        debug.debug(f"Initializing GameState: {player_one} vs {player_two}", "game")
        self.reset()

    @classmethod
    def from_config(cls, config: GameConfig, **kwargs) -> 'GameState':
        """Build a game from a GameConfig; extra keyword arguments go to __init__."""
        return cls(config.rows, config.cols, config.connect_n,
                   Player.from_config(config.player_one, Token.ONE),
                   Player.from_config(config.player_two, Token.TWO),
                   **kwargs)

    def reset(self) -> None:
        """Clear the board and give the move back to player one."""
        debug.debug("Resetting game", "game")
        self.board.reset()
        self.outcome = Outcome()
        self.current_player = self.player_one

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    def is_game_over(self) -> bool:
        return self.outcome.is_game_over()

    def other_player(self, player: Player) -> Player:
        return self.player_two if player == self.player_one else self.player_one

    def player_for(self, token: Token) -> Player:
        if token == Token.ONE:
            return self.player_one
        if token == Token.TWO:
            return self.player_two
        raise ValueError(f"No player holds {token}")

    def _validate_move(self, column: int, player: Player) -> None:
        if self.outcome.is_game_over():
            raise IllegalMoveError(f"Game is already over ({self.outcome})")
        if player != self.current_player:
            raise IllegalMoveError(f"It is not {player.name}'s turn")
        # Board raises ColumnOutOfRangeError for bad indices
        if self.board.is_column_full(column):
            raise ColumnFullError(column)

    def is_legal_move(self, column: int, player: Player) -> bool:
        """
        Check if a move is legal.

        A move is legal when the game is in progress, it is the player's turn,
        the column exists and it is not full.
        """
        try:
            self._validate_move(column, player)
        except IllegalMoveError:
            return False
        return True

    def apply_move(self, column: int, player: Player) -> bool:
        """
        Play a token for a player.

        Args:
            column: Column to drop the token in (0-indexed)
            player: The player making the move

        Returns:
            True if the move was played, False if it was ignored as illegal

        Raises:
            IllegalMoveError: only in strict mode
        """
        try:
            self._validate_move(column, player)
        except IllegalMoveError as e:
            if self.strict:
                raise
            debug.debug(f"Ignoring move in column {column} by {player.name}: {e}", "game")
            return False

        self._place(column, player)
        self._continue_game()
        return True

    def play_computer_turn(self) -> Optional[int]:
        """
        Let the computer player to move pick and play its column.

        Interfaces that pace computer moves run with auto_play=False and call
        this themselves once they are ready to show the move.

        Returns:
            The column played, or None if the game is over or a human is to move
        """
        column = self._computer_move()
        if column is not None:
            self._continue_game()
        return column

    def _computer_move(self) -> Optional[int]:
        player = self.current_player
        if self.outcome.is_game_over() or not player.is_computer:
            return None

        column = self._searches[player.token].choose_move(self.board, player.token)
        debug.debug(f"{player.name} chooses column {column}", "game")
        self._place(column, player)
        return column

    def _continue_game(self) -> None:
        if not self.auto_play:
            return
        while self._computer_move() is not None:
            pass

    def _place(self, column: int, player: Player) -> None:
        row = self.board.drop(column, player.token)

        winning_line = check_win_at(self.board, row, column, player.token)
        if winning_line:
            self.outcome = Outcome(GameResult.WON, player, tuple(winning_line))
            debug.info(f"{player.name} wins after move at ({row}, {column})", "game")
        elif self.board.is_full():
            self.outcome = Outcome(GameResult.DRAW)
            debug.info("Game ends in a draw", "game")
        else:
            self.current_player = self.other_player(player)
            debug.trace(f"Switching to {self.current_player.name}", "game")

        if self.on_token_placed is not None:
            self.on_token_placed(column, row, player.token)

        if self.outcome.is_game_over() and self.on_game_over is not None:
            self.on_game_over(self.outcome)

    def render(self) -> str:
        """
        Render the game as a string.

        Returns:
            String representation of the board using the players' glyphs
        """
        glyphs = {Token.ONE: self.player_one.glyph, Token.TWO: self.player_two.glyph}
        return self.board.render(glyphs)

    def __str__(self) -> str:
        return self.render()
