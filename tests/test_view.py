from chompview.endscreen import PROMPT, TITLE
from chompview.layout import PANEL_HEIGHT, compute_layout, theme_for
from chompview.model import GameState, Player
from chompview.panels import LEADERBOARD_LABEL
from chompview.view import View, run

WIDTH, HEIGHT = 5, 5


def make_state(ended=False, x=0):
    players = [Player("player-a", score=4, x=x, y=0), Player("player-b", score=1, x=4, y=4)]
    return GameState(WIDTH, HEIGHT, [3] * (WIDTH * HEIGHT), players, ended=ended)


def board_text(view):
    return "\n".join(view.board.row_text(y) for y in range(view.board.rows))


def test_canvases_follow_layout():
    view = View(WIDTH, HEIGHT, 30, 80)
    assert view.layout == compute_layout(30, 80, WIDTH, HEIGHT)
    assert view.board.rows == view.layout.board_rows
    assert view.board.cols == 80
    assert view.panel.rows == PANEL_HEIGHT
    assert view.frame_count == 0


def test_render_draws_board_and_panels():
    view = View(WIDTH, HEIGHT, 30, 80)
    view.render(make_state())
    view.render(make_state())
    assert view.frame_count == 2
    y, x = view.layout.board_y_offset, view.layout.board_x_offset
    assert view.board.cell(y, x).char == theme_for(0).head
    assert LEADERBOARD_LABEL in view.panel.row_text(0)


def test_resize_rebuilds_canvases():
    view = View(WIDTH, HEIGHT, 30, 80)
    view.resize(20, 40)
    assert view.layout == compute_layout(20, 40, WIDTH, HEIGHT)
    assert (view.board.rows, view.board.cols) == (view.layout.board_rows, 40)
    assert view.panel.cols == 40


def test_results_overlay_board():
    view = View(WIDTH, HEIGHT, 30, 80)
    view.results(make_state(ended=True))
    text = board_text(view)
    assert TITLE in text
    assert PROMPT in text
    assert view.frame_count == 1


def test_run_stops_at_ended_state(monkeypatch, capsys):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "30")
    states = iter([make_state(x=0), make_state(x=1), make_state(ended=True), make_state()])
    view = run(states, WIDTH, HEIGHT)
    assert view.frame_count == 3
    assert len(list(states)) == 1
    out = capsys.readouterr().out
    assert out.count(TITLE) == 1
    assert LEADERBOARD_LABEL in out


def test_run_without_frames_shows_nothing(monkeypatch, capsys):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "30")
    view = run([], WIDTH, HEIGHT)
    assert view.frame_count == 0
    assert capsys.readouterr().out == ""