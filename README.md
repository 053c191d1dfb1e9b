# chompview

`chompview` draws the state of a multiplayer grid-eating game onto an
in-memory character canvas. Players move across a board of reward cells;
every cell a player eats is marked with that player's flag. The renderer
produces:

- the **board**, framed by an animated "stadium" border with a title,
  showing rewards, player heads and the trails they leave behind;
- a row of **player panels** below the board, ordered by score, with each
  player's name, alive/dead status, score, position and move counts;
- an **end screen** with the winner and a final leaderboard table.

Everything is drawn onto a `Canvas`, a grid of cells that records the
character, colour pair and attributes written at each column, so a frame can
be inspected in tests or handed to any terminal backend.

## Installation

```
pip install .
pip install .[test]   # with pytest, to run the tests
```

The only runtime dependency is `wcwidth`, used to measure emoji and other
wide characters.

## Modules

- `chompview.model` – `Player` and `GameState`, the data being drawn.
  `GameState.cell(col, row)` reads a board value (raising `IndexError` off
  the board) and `GameState.player_at(col, row)` returns the index of the
  first player on a cell, or `None`. A `GameState` rejects a board whose
  length does not match `width * height` and more than nine players.
- `chompview.canvas` – `Canvas`, `Cell` and the `Attr` flags (`BOLD`,
  `DIM`). `Canvas.put(y, x, text, color, attrs)` writes text, clipping at the
  edges, and returns the column after it; `Canvas.cell(y, x)` and
  `Canvas.row_text(y)` read the result back; `Canvas.erase()` blanks it.
- `chompview.layout` – `compute_layout` centres the board in the part of
  the terminal above the five-row panel strip and returns a `Layout`;
  `display_name`, `sort_players_by_score` and `theme_for` (a `PlayerTheme`
  with a head and a flag emoji) are shared helpers.
- `chompview.board` – `draw_board` and `stadium_rings`.
- `chompview.panels` – `draw_panels` and `panel_header`.
- `chompview.endscreen` – `draw_endscreen` and `endscreen_box`.
- `chompview.view` – `View`, which ties it all together, and `run`.

## Usage

```python
from chompview.model import GameState, Player
from chompview.view import View

state = GameState(
    width=3,
    height=2,
    board=[5, 0, 3, 7, -1, 2],
    players=[Player("player-alice", score=5, x=1, y=0),
             Player("player-bob", score=9, x=1, y=1)],
)

view = View(board_width=3, board_height=2, term_rows=24, term_cols=80)
view.render(state)            # draws board and panels, advances frame_count
print(view.board.row_text(view.layout.board_y_offset))

view.results(state)           # one more frame, then the results box on top
```

Call `view.resize(term_rows, term_cols)` when the terminal changes size; the
layout is recomputed and the canvases recreated.

`run(frames, width, height)` takes an iterable of `GameState` objects and
writes each frame, as plain text, to standard output, sized to the current
terminal and resized when the terminal changes. It stops at the first state
marked `ended` and then draws the results screen for that state. On
`KeyboardInterrupt` it returns at once without the results screen. It returns
the `View` it used.

## Display rules

- Player names starting with `player-` are shown without that prefix.
- Players are ordered by score, highest first. Players with equal scores
  are not guaranteed to stay in index order.
- Positive board values are rewards and are printed as numbers; zero and
  negative values are trails, drawn with the flag of the player whose index
  is the value's negation.
- The stadium border has between one and four rings, depending on the
  space around the board, and its colours rotate every two frames.
- The results screen needs at least one player; `draw_endscreen` raises
  `ValueError` otherwise.

## What it does not do

`chompview` only draws. It does not run the game, move players or connect
to a running game: the states it draws must be supplied by the caller. It
does not read the keyboard, so there is no "press any key" wait after the
results screen, and `run` prints characters only, without the colours and
attributes recorded on the canvas.