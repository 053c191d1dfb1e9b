"""Drawing of the board, its cells and the stadium around it."""

from __future__ import annotations

from dataclasses import dataclass

from .canvas import Attr, Canvas
from .layout import (
    CELL_WIDTH,
    COLOR_BOARD,
    COLOR_PAIR_OFFSET,
    Layout,
    player_color,
    theme_for,
)
from .model import GameState

CHECKERBOARD = "▒"
STADIUM_TITLE = "  CHOMP CHAMPS WORLD CUP  "
MAX_RINGS = 4

_YELLOW, _BLUE, _MAGENTA, _CYAN = 3, 4, 5, 6
RING_COLORS = (_CYAN, _MAGENTA, _BLUE, _YELLOW)


@dataclass(frozen=True)
class Ring:
    """One rectangle of the stadium border; level 0 is the innermost."""

    level: int
    x1: int
    y1: int
    x2: int
    y2: int
    color: int


def _half(value: int) -> int:
    """Halve, rounding toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def stadium_rings(layout: Layout, width: int, height: int, frame_count: int) -> list[Ring]:
    """Return the stadium rings around the board, outermost first.

    The ring colours rotate every two frames.
    """
    max_h = layout.board_x_offset // 3
    max_v = layout.board_y_offset // 2
    count = max(1, min(max_h, max_v, MAX_RINGS))
    return [
        Ring(
            level=r,
            x1=layout.board_x_offset - 2 - r * 2,
            y1=layout.board_y_offset - 1 - r,
            x2=layout.board_x_offset + width * CELL_WIDTH + r * 2,
            y2=layout.board_y_offset + height + r,
            color=RING_COLORS[(frame_count // 2 + r) % len(RING_COLORS)] + COLOR_PAIR_OFFSET,
        )
        for r in reversed(range(count))
    ]


def _draw_ring(canvas: Canvas, ring: Ring) -> None:
    for x in range(ring.x1, ring.x2 + 1):
        canvas.put(ring.y1, x, CHECKERBOARD, ring.color, Attr.BOLD)
        canvas.put(ring.y2, x, CHECKERBOARD, ring.color, Attr.BOLD)
    for y in range(ring.y1, ring.y2 + 1):
        for x in (ring.x1, ring.x1 + 1, ring.x2, ring.x2 + 1):
            canvas.put(y, x, CHECKERBOARD, ring.color, Attr.BOLD)


def _draw_title(canvas: Canvas, ring: Ring) -> None:
    tx = ring.x1 + _half(ring.x2 - ring.x1 - len(STADIUM_TITLE))
    canvas.put(ring.y1, tx, STADIUM_TITLE, ring.color, Attr.BOLD)


def _draw_cell(canvas: Canvas, state: GameState, y: int, x: int, col: int, row: int) -> None:
    value = state.cell(col, row)
    index = state.player_at(col, row)
    if index is not None:
        canvas.put(y, x, theme_for(index).head, player_color(index), Attr.BOLD)
    elif value > 0:
        canvas.put(y, x, f"{value:2d}", COLOR_BOARD)
    else:
        eater = -value
        canvas.put(y, x, theme_for(eater).flag, player_color(eater), Attr.DIM)


def draw_board(canvas: Canvas, layout: Layout, state: GameState, frame_count: int) -> None:
    """Erase the canvas and draw the stadium and every visible board cell."""
    canvas.erase()
    for ring in stadium_rings(layout, state.width, state.height, frame_count):
        _draw_ring(canvas, ring)
        if ring.level == 0:
            _draw_title(canvas, ring)

    for row in range(state.height):
        y = layout.board_y_offset + row
        if not 0 <= y < layout.board_rows:
            continue
        for col in range(state.width):
            x = layout.board_x_offset + col * CELL_WIDTH
            if x < 0 or x + CELL_WIDTH > layout.term_cols:
                continue
            _draw_cell(canvas, state, y, x, col, row)
            if col < state.width - 1:
                canvas.put(y, x + 2, " ")