import pytest
from wcwidth import wcswidth

from chompview.canvas import Attr, Canvas, Cell


def test_new_canvas_is_blank():
    canvas = Canvas(2, 5)
    assert canvas.row_text(0) == " " * 5
    assert canvas.row_text(1) == " " * 5
    assert canvas.cell(1, 4) == Cell()


def test_put_writes_and_returns_next_column():
    canvas = Canvas(1, 5)
    end = canvas.put(0, 1, "abc")
    assert end == 1 + len("abc")
    assert canvas.row_text(0) == " abc "


def test_put_stores_color_and_attrs():
    canvas = Canvas(1, 4)
    canvas.put(0, 0, "x", 3, Attr.BOLD | Attr.DIM)
    cell = canvas.cell(0, 0)
    assert cell.char == "x"
    assert cell.color == 3
    assert Attr.BOLD in cell.attrs and Attr.DIM in cell.attrs


def test_put_clips_at_right_edge():
    canvas = Canvas(1, 4)
    end = canvas.put(0, 2, "hello")
    assert end == 4
    assert canvas.row_text(0) == "  he"


@pytest.mark.parametrize("y,x", [(-1, 0), (1, 0), (0, -1), (0, 4)])
def test_put_outside_canvas_writes_nothing(y, x):
    canvas = Canvas(1, 4)
    canvas.put(y, x, "zz")
    assert canvas.row_text(0) == " " * 4


def test_wide_character_takes_two_columns():
    canvas = Canvas(1, 6)
    end = canvas.put(0, 1, "中")
    assert end == 3
    assert canvas.cell(0, 1).width == 2
    assert canvas.cell(0, 2).width == 0
    assert wcswidth(canvas.row_text(0)) == 6


def test_wide_character_not_fitting_is_dropped():
    canvas = Canvas(1, 3)
    end = canvas.put(0, 2, "中")
    assert end == 2
    assert canvas.row_text(0) == " " * 3


def test_overwriting_half_of_wide_character_blanks_other_half():
    canvas = Canvas(1, 6)
    canvas.put(0, 1, "中")
    canvas.put(0, 2, "x")
    assert canvas.cell(0, 1) == Cell()
    assert canvas.cell(0, 2).char == "x"
    assert wcswidth(canvas.row_text(0)) == 6


def test_combining_mark_joins_previous_cell():
    canvas = Canvas(1, 3)
    end = canvas.put(0, 0, "e\u0301")
    assert end == 1
    assert canvas.cell(0, 0).char == "e\u0301"


def test_erase_blanks_everything():
    canvas = Canvas(2, 3)
    canvas.put(0, 0, "abc", 2)
    canvas.put(1, 0, "中")
    canvas.erase()
    assert canvas.row_text(0) == " " * 3
    assert canvas.row_text(1) == " " * 3


def test_cell_outside_raises():
    with pytest.raises(IndexError):
        Canvas(1, 1).cell(0, 1)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Canvas(-1, 3)