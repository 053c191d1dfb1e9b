"""Player status panels shown below the board."""

from __future__ import annotations

from wcwidth import wcswidth

from .canvas import Attr, Canvas
from .layout import COLOR_BOARD, Layout, display_name, player_color, sort_players_by_score, theme_for
from .model import GameState, Player

LEADERBOARD_LABEL = "--- LEADERBOARD ---"
LEADERBOARD_LABEL_Y = 0
PLAYER_PANEL_Y_OFFSET = 1
MIN_PANEL_WIDTH = 12


def _half(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def panel_header(player: Player) -> str:
    """Return the header text of a player's panel: name and alive state."""
    status = "DEAD" if player.is_blocked else "ALIVE"
    return f" {display_name(player.name)} [{status}] "


def _draw_border(canvas: Canvas, y: int, x: int, w: int, color: int) -> None:
    canvas.put(y, x, "+", color)
    if w > 2:
        canvas.put(y, x + 1, "=" * (w - 2), color)
    canvas.put(y, x + w - 1, "+", color)


def _draw_header(canvas: Canvas, x: int, w: int, player: Player, index: int) -> None:
    header = panel_header(player)
    start = max(x + _half(w - wcswidth(header)), x + 1)
    color = player_color(index)
    _draw_border(canvas, PLAYER_PANEL_Y_OFFSET, x, w, color)
    attrs = Attr.DIM if player.is_blocked else Attr.NONE
    canvas.put(PLAYER_PANEL_Y_OFFSET, start, header, color, attrs)


def _draw_score_row(canvas: Canvas, x: int, w: int, player: Player, index: int) -> None:
    row = PLAYER_PANEL_Y_OFFSET + 1
    color = player_color(index)
    canvas.put(row, x, "|", color)
    canvas.put(row, x + 3, theme_for(index).flag, color)
    canvas.put(row, x + 6, f"Score: {player.score:<5}", color)
    canvas.put(row, x + w - 1, "|", color)


def _draw_stats_row(canvas: Canvas, x: int, w: int, player: Player, index: int) -> None:
    row = PLAYER_PANEL_Y_OFFSET + 2
    color = player_color(index)
    canvas.put(row, x, "|", color)
    canvas.put(
        row,
        x + 2,
        f"({player.x},{player.y})  V:{player.valid_moves:<4} I:{player.invalid_moves:<4}",
        color,
    )
    canvas.put(row, x + w - 1, "|", color)


def _draw_panel(canvas: Canvas, x: int, w: int, player: Player, index: int) -> None:
    _draw_header(canvas, x, w, player, index)
    _draw_score_row(canvas, x, w, player, index)
    _draw_stats_row(canvas, x, w, player, index)
    _draw_border(canvas, PLAYER_PANEL_Y_OFFSET + 3, x, w, player_color(index))


def draw_panels(canvas: Canvas, layout: Layout, state: GameState) -> None:
    """Erase the canvas and draw one panel per player, best score first."""
    canvas.erase()
    count = state.players_count
    if count <= 0:
        return

    label_x = max((layout.term_cols - len(LEADERBOARD_LABEL)) // 2, 0)
    canvas.put(LEADERBOARD_LABEL_Y, label_x, LEADERBOARD_LABEL, COLOR_BOARD, Attr.BOLD)

    panel_w = max(layout.term_cols // count, MIN_PANEL_WIDTH)
    for pos, index in enumerate(sort_players_by_score(state)):
        x = pos * panel_w
        w = layout.term_cols - x if pos == count - 1 else panel_w
        _draw_panel(canvas, x, w, state.players[index], index)