"""The end-of-game results overlay."""

from __future__ import annotations

from dataclasses import dataclass

from wcwidth import wcswidth

from .canvas import Attr, Canvas
from .layout import COLOR_BOARD, Layout, display_name, player_color, sort_players_by_score, theme_for
from .model import GameState, Player

ENDSCREEN_WIDTH = 52
ENDSCREEN_HEIGHT_OFFSET = 8
ENDSCREEN_TITLE_Y_OFFSET = 1
ENDSCREEN_WINNER_Y_OFFSET = 2
ENDSCREEN_TABLE_Y_OFFSET = 4
ENDSCREEN_PROMPT_Y_OFFSET = 2
ENDSCREEN_TABLE_PADDING = 12

TITLE = "Game Over"
PROMPT = "Press any key to exit"


def _half(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


@dataclass(frozen=True)
class Box:
    """Position and size of the results box."""

    y: int
    x: int
    height: int
    width: int


def endscreen_box(layout: Layout, players_count: int) -> Box:
    """Centre the results box over the board area."""
    height = ENDSCREEN_HEIGHT_OFFSET + players_count
    x = max((layout.term_cols - ENDSCREEN_WIDTH) // 2, 0)
    y = max((layout.board_rows - height) // 2, 0)
    return Box(y, x, height, ENDSCREEN_WIDTH)


def _draw_box(canvas: Canvas, box: Box) -> None:
    inner = box.width - 2
    canvas.put(box.y, box.x, "┌" + "─" * inner + "┐", COLOR_BOARD)
    for r in range(1, box.height - 1):
        canvas.put(box.y + r, box.x, "│" + " " * inner + "│", COLOR_BOARD)
    canvas.put(box.y + box.height - 1, box.x, "└" + "─" * inner + "┘", COLOR_BOARD)


def _draw_centered(canvas: Canvas, y: int, box: Box, text: str, attrs: Attr) -> None:
    canvas.put(y, box.x + _half(box.width - len(text)), text, COLOR_BOARD, attrs)


def _draw_winner(canvas: Canvas, state: GameState, winner: int, y: int, box: Box) -> None:
    message = f"P{winner}: {display_name(state.players[winner].name)} wins!"
    x = max(box.x + _half(box.width - wcswidth(message)), box.x + 1)
    canvas.put(y, x, message, player_color(winner), Attr.BOLD)


def _draw_row(canvas: Canvas, y: int, x: int, player: Player, index: int) -> None:
    color = player_color(index)
    name = display_name(player.name)
    col = canvas.put(y, x, f" {index}   ", color)
    col = canvas.put(y, col, theme_for(index).flag, color)
    col = canvas.put(y, col, "    ", color)
    col = canvas.put(y, col, name, color)
    pad = ENDSCREEN_TABLE_PADDING - wcswidth(name)
    if pad > 0:
        col = canvas.put(y, col, " " * pad, color)
    canvas.put(
        y,
        col,
        f" {player.score:>5} {player.valid_moves:>5} {player.invalid_moves:>5}",
        color,
    )


def _draw_table(canvas: Canvas, state: GameState, order: list[int], y: int, x: int) -> None:
    header = f" #  {'Avatar':<7} {'Player':<12} {'Score':>5} {'Valid':>5} {'Inv':>5}"
    canvas.put(y, x, header, COLOR_BOARD, Attr.BOLD)
    for pos, index in enumerate(order):
        _draw_row(canvas, y + 1 + pos, x, state.players[index], index)


def draw_endscreen(canvas: Canvas, layout: Layout, state: GameState) -> None:
    """Draw the final ranking box over whatever the canvas holds."""
    if not state.players:
        raise ValueError("the results screen needs at least one player")
    order = sort_players_by_score(state)
    box = endscreen_box(layout, state.players_count)

    _draw_box(canvas, box)
    _draw_centered(canvas, box.y + ENDSCREEN_TITLE_Y_OFFSET, box, TITLE, Attr.BOLD)
    _draw_winner(canvas, state, order[0], box.y + ENDSCREEN_WINNER_Y_OFFSET, box)
    _draw_table(canvas, state, order, box.y + ENDSCREEN_TABLE_Y_OFFSET, box.x + 2)
    _draw_centered(
        canvas, box.y + box.height - ENDSCREEN_PROMPT_Y_OFFSET, box, PROMPT, Attr.NONE
    )