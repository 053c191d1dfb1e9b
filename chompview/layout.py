"""Themes, display helpers and board placement for the view."""

from __future__ import annotations

from dataclasses import dataclass

from .model import MAX_PLAYERS, GameState

COLOR_PAIR_OFFSET = 1
COLOR_BOARD = 10
COLOR_EMPTY = 11

CELL_WIDTH = 3
PANEL_HEIGHT = 5
PLAYER_PREFIX = "player-"

PLAYER_COLORS = (
    "red", "green", "yellow", "blue", "magenta", "cyan", "white", "red", "green",
)

PAIR_COLORS: dict[int, tuple[str, str]] = {
    **{
        index + COLOR_PAIR_OFFSET: (color, "black")
        for index, color in enumerate(PLAYER_COLORS)
    },
    COLOR_BOARD: ("white", "black"),
    COLOR_EMPTY: ("black", "black"),
}


@dataclass(frozen=True)
class PlayerTheme:
    """The head drawn at a player's position and the flag left on its trail."""

    head: str
    flag: str


PLAYER_THEMES = (
    PlayerTheme("🍚", "🇰🇷"),
    PlayerTheme("🐉", "🇨🇳"),
    PlayerTheme("🍕", "🇮🇹"),
    PlayerTheme("☕", "🇬🇧"),
    PlayerTheme("⚽", "🇧🇷"),
    PlayerTheme("🦜", "🇨🇷"),
    PlayerTheme("🧉", "🇦🇷"),
    PlayerTheme("🍺", "🇩🇪"),
    PlayerTheme("🐂", "🇪🇸"),
    PlayerTheme("🥐", "🇫🇷"),
)


def theme_for(index: int) -> PlayerTheme:
    """Return the theme of the player with the given index."""
    return PLAYER_THEMES[index % MAX_PLAYERS]


def player_color(index: int) -> int:
    """Return the colour pair used for a player."""
    return index + COLOR_PAIR_OFFSET


def display_name(name: str) -> str:
    """Strip the ``player-`` prefix from a name, if present."""
    return name[len(PLAYER_PREFIX):] if name.startswith(PLAYER_PREFIX) else name


def sort_players_by_score(state: GameState) -> list[int]:
    """Return player indices ordered from highest to lowest score.

    Uses exchange sorting, so players with equal scores may come out in
    an order other than their index order.
    """
    scores = [player.score for player in state.players]
    order = list(range(len(scores)))
    for i in range(len(order) - 1):
        for j in range(i + 1, len(order)):
            if scores[order[j]] > scores[order[i]]:
                order[i], order[j] = order[j], order[i]
    return order


@dataclass(frozen=True)
class Layout:
    """Where the board sits inside the terminal."""

    term_rows: int
    term_cols: int
    board_rows: int
    board_x_offset: int
    board_y_offset: int


def compute_layout(term_rows: int, term_cols: int, board_width: int, board_height: int) -> Layout:
    """Centre a board in the area of the terminal above the player panels."""
    if min(term_rows, term_cols, board_width, board_height) < 0:
        raise ValueError("dimensions must not be negative")
    board_rows = max(term_rows - PANEL_HEIGHT, 1)
    x_offset = max((term_cols - board_width * CELL_WIDTH) // 2, 0)
    y_offset = max((board_rows - board_height) // 2, 0)
    return Layout(term_rows, term_cols, board_rows, x_offset, y_offset)