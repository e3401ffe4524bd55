"""
config.py - Game configuration objects

A GameConfig fully describes a game at creation time: board height and width,
connect length and the two player descriptors. Everything is validated up
front so an invalid configuration never produces a partial game.
"""

from dataclasses import dataclass, field

from connectn.utils import (ROWS, COLS, CONNECT_N, DEFAULT_DEPTH, PlayerKind,
                            ConfigurationError, validate_dimensions)


def validate_player_fields(name: str, kind: PlayerKind, search_depth: int, delay: float) -> None:
    """Shared checks for player descriptors."""
    if not isinstance(kind, PlayerKind):
        raise ConfigurationError(f"Unknown player kind: {kind!r}")
    if not name:
        raise ConfigurationError("Player name must not be empty")
    if kind == PlayerKind.COMPUTER:
        if isinstance(search_depth, bool) or not isinstance(search_depth, int) or search_depth < 1:
            raise ConfigurationError(f"search_depth must be a positive integer, got {search_depth!r}")
    if delay < 0:
        raise ConfigurationError(f"delay must not be negative, got {delay!r}")


@dataclass(frozen=True)
class PlayerConfig:
    """
    Descriptor of one player before tokens are assigned.

    Attributes:
        name: Display name
        glyph: Display character (defaults to the token symbol)
        kind: Human or computer controlled
        search_depth: Minimax depth, used by computer players only
        delay: Seconds the interface waits before showing a computer move
    """
    name: str
    glyph: str = ""
    kind: PlayerKind = PlayerKind.HUMAN
    search_depth: int = DEFAULT_DEPTH
    delay: float = 0.0

    def __post_init__(self):
        validate_player_fields(self.name, self.kind, self.search_depth, self.delay)

    @property
    def is_computer(self) -> bool:
        return self.kind == PlayerKind.COMPUTER


@dataclass(frozen=True)
class GameConfig:
    """Board dimensions, connect length and the two players (player_one moves first)."""
    rows: int = ROWS
    cols: int = COLS
    connect_n: int = CONNECT_N
    player_one: PlayerConfig = field(default_factory=lambda: PlayerConfig("Player 1"))
    player_two: PlayerConfig = field(default_factory=lambda: PlayerConfig("Player 2"))

    def __post_init__(self):
        validate_dimensions(self.rows, self.cols, self.connect_n)
        if self.player_one.glyph and self.player_one.glyph == self.player_two.glyph:
            raise ConfigurationError(f"Both players use the glyph {self.player_one.glyph!r}")
