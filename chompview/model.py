"""Game state as seen by the view: board cells and player statistics."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_PLAYERS = 9


@dataclass
class Player:
    """One player's position and statistics."""

    name: str
    score: int = 0
    valid_moves: int = 0
    invalid_moves: int = 0
    x: int = 0
    y: int = 0
    is_blocked: bool = False


@dataclass
class GameState:
    """A snapshot of the board and its players.

    ``board`` is stored row by row. A positive cell holds an uncollected
    reward; a cell of zero or below has been taken by the player whose
    index is its negation.
    """

    width: int
    height: int
    board: list[int]
    players: list[Player] = field(default_factory=list)
    ended: bool = False

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("board dimensions must not be negative")
        if len(self.board) != self.width * self.height:
            raise ValueError(
                f"board holds {len(self.board)} cells, expected "
                f"{self.width * self.height}"
            )
        if len(self.players) > MAX_PLAYERS:
            raise ValueError(f"at most {MAX_PLAYERS} players are supported")

    @property
    def players_count(self) -> int:
        return len(self.players)

    def cell(self, col: int, row: int) -> int:
        """Return the value of the board cell at ``(col, row)``."""
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"cell ({col}, {row}) is outside the board")
        return self.board[row * self.width + col]

    def player_at(self, col: int, row: int) -> int | None:
        """Return the index of the first player standing on a cell, or None."""
        return next(
            (
                index
                for index, player in enumerate(self.players)
                if player.x == col and player.y == row
            ),
            None,
        )