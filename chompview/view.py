"""The view: keeps the canvases and draws successive game states."""

from __future__ import annotations

import shutil
import sys
from collections.abc import Iterable

from .board import draw_board
from .canvas import Canvas
from .endscreen import draw_endscreen
from .layout import PANEL_HEIGHT, compute_layout
from .model import GameState

_CLEAR = "\x1b[H\x1b[2J"


class View:
    """The board area and the panel strip of one terminal."""

    def __init__(self, board_width: int, board_height: int, term_rows: int, term_cols: int) -> None:
        self.board_width = board_width
        self.board_height = board_height
        self.frame_count = 0
        self.resize(term_rows, term_cols)

    def resize(self, term_rows: int, term_cols: int) -> None:
        """Recompute the layout and recreate the canvases for a new terminal size."""
        self.layout = compute_layout(term_rows, term_cols, self.board_width, self.board_height)
        self.board = Canvas(self.layout.board_rows, term_cols)
        self.panel = Canvas(PANEL_HEIGHT, term_cols)

    def render(self, state: GameState) -> None:
        """Draw one frame: the board and the player panels."""
        self.frame_count += 1
        draw_board(self.board, self.layout, state, self.frame_count)
        draw_panels_for(self, state)

    def results(self, state: GameState) -> None:
        """Draw a final frame with the results box over the board."""
        self.render(state)
        draw_endscreen(self.board, self.layout, state)


def draw_panels_for(view: View, state: GameState) -> None:
    from .panels import draw_panels

    draw_panels(view.panel, view.layout, state)


def _screen_text(view: View) -> str:
    rows = [view.board.row_text(y).rstrip() for y in range(view.board.rows)]
    rows += [view.panel.row_text(y).rstrip() for y in range(view.panel.rows)]
    return "\n".join(rows)


def _show(view: View) -> None:
    sys.stdout.write(_CLEAR + _screen_text(view) + "\n")
    sys.stdout.flush()


def run(frames: Iterable[GameState], width: int, height: int) -> View:
    """Draw each state until one is marked ended, then show the results.

    Stops quietly, without the results screen, on keyboard interrupt.
    """
    size = shutil.get_terminal_size()
    view = View(width, height, size.lines, size.columns)
    last: GameState | None = None
    try:
        for state in frames:
            last = state
            if state.ended:
                break
            current = shutil.get_terminal_size()
            if current != size:
                size = current
                view.resize(size.lines, size.columns)
            view.render(state)
            _show(view)
    except KeyboardInterrupt:
        return view
    if last is not None and last.players:
        view.results(last)
        _show(view)
    return view