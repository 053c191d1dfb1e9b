import pytest

from chompview.model import MAX_PLAYERS, GameState, Player


def make_state(players=()):
    return GameState(width=3, height=2, board=list(range(6)), players=list(players))


def test_cell_reads_row_major():
    state = make_state()
    assert state.cell(0, 0) == 0
    assert state.cell(2, 0) == 2
    assert state.cell(0, 1) == 3
    assert state.cell(2, 1) == 5


@pytest.mark.parametrize("col,row", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_cell_outside_board_raises(col, row):
    with pytest.raises(IndexError):
        make_state().cell(col, row)


def test_board_size_mismatch_raises():
    with pytest.raises(ValueError):
        GameState(width=3, height=3, board=[1, 2, 3])


def test_negative_dimension_raises():
    with pytest.raises(ValueError):
        GameState(width=-1, height=0, board=[])


def test_too_many_players_raises():
    players = [Player(name=f"p{i}") for i in range(MAX_PLAYERS + 1)]
    with pytest.raises(ValueError):
        GameState(width=1, height=1, board=[1], players=players)


def test_player_at_finds_player():
    state = make_state([Player("a", x=0, y=0), Player("b", x=2, y=1)])
    assert state.player_at(2, 1) == 1
    assert state.player_at(0, 0) == 0


def test_player_at_empty_cell_is_none():
    state = make_state([Player("a", x=0, y=0)])
    assert state.player_at(1, 1) is None


def test_player_at_returns_first_of_shared_cell():
    state = make_state([Player("a", x=1, y=1), Player("b", x=1, y=1)])
    assert state.player_at(1, 1) == 0


def test_players_count_tracks_players():
    state = make_state([Player("a"), Player("b")])
    assert state.players_count == 2
    assert make_state().players_count == 0