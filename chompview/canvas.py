"""An in-memory character grid that the view draws on."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from wcwidth import wcwidth


class Attr(enum.Flag):
    """Text attributes a cell may carry."""

    NONE = 0
    BOLD = enum.auto()
    DIM = enum.auto()


@dataclass(frozen=True)
class Cell:
    """One screen column.

    ``width`` is 1 for a normal character, 2 for the head of a wide
    character and 0 for the column a wide character spills into.
    """

    char: str = " "
    color: int = 0
    attrs: Attr = Attr.NONE
    width: int = 1


_BLANK = Cell()


class Canvas:
    """A fixed-size grid of cells; writes outside it are clipped."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._grid = [[_BLANK] * cols for _ in range(rows)]

    def erase(self) -> None:
        """Blank every cell."""
        for row in self._grid:
            row[:] = [_BLANK] * self.cols

    def put(self, y: int, x: int, text: str, color: int = 0, attrs: Attr = Attr.NONE) -> int:
        """Write ``text`` starting at ``(y, x)`` and return the column after it.

        Nothing is written when the start lies outside the canvas; text
        running past the right edge is cut off.
        """
        if not (0 <= y < self.rows and 0 <= x < self.cols):
            return x
        row = self._grid[y]
        col = x
        last: int | None = None
        for ch in text:
            width = wcwidth(ch)
            if width == 0:
                if last is not None:
                    row[last] = replace(row[last], char=row[last].char + ch)
                continue
            width = 2 if width == 2 else 1
            if col + width > self.cols:
                break
            self._split_overlaps(row, col, width)
            row[col] = Cell(ch, color, attrs, width)
            if width == 2:
                row[col + 1] = Cell("", color, attrs, 0)
            last = col
            col += width
        return col

    def _split_overlaps(self, row: list[Cell], col: int, width: int) -> None:
        if row[col].width == 0 and col > 0:
            row[col - 1] = _BLANK
        end = col + width - 1
        if row[end].width == 2 and end + 1 < self.cols:
            row[end + 1] = _BLANK

    def cell(self, y: int, x: int) -> Cell:
        """Return the cell at ``(y, x)``."""
        if not (0 <= y < self.rows and 0 <= x < self.cols):
            raise IndexError(f"position ({y}, {x}) is outside the canvas")
        return self._grid[y][x]

    def row_text(self, y: int) -> str:
        """Return the characters of row ``y`` as one string."""
        if not 0 <= y < self.rows:
            raise IndexError(f"row {y} is outside the canvas")
        return "".join(cell.char for cell in self._grid[y])