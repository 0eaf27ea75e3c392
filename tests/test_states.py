import pytest

from chainchess.pieces import Color
from chainchess.states import DrawState, GameState


def test_color_offered():
    assert DrawState.WHITE.color_offered(Color.WHITE)
    assert not DrawState.WHITE.color_offered(Color.BLACK)
    assert DrawState.BLACK.color_offered(Color.BLACK)
    assert not DrawState.NEITHER.color_offered(Color.WHITE)


def test_is_draw_with():
    assert DrawState.BLACK.is_draw_with(Color.WHITE)
    assert DrawState.WHITE.is_draw_with(Color.BLACK)
    assert not DrawState.WHITE.is_draw_with(Color.WHITE)
    assert not DrawState.NEITHER.is_draw_with(Color.BLACK)


def test_first_offer_records_color():
    assert DrawState.NEITHER.after_offer(Color.WHITE) is DrawState.WHITE
    assert DrawState.NEITHER.after_offer(Color.BLACK) is DrawState.BLACK


def test_accepting_offer_makes_draw():
    assert DrawState.WHITE.after_offer(Color.BLACK) is DrawState.DRAW
    assert DrawState.BLACK.after_offer(Color.WHITE) is DrawState.DRAW


def test_repeat_offer_and_draw_unchanged():
    assert DrawState.WHITE.after_offer(Color.WHITE) is DrawState.WHITE
    assert DrawState.DRAW.after_offer(Color.BLACK) is DrawState.DRAW


def test_current_turn_and_next_turn():
    assert GameState.WHITE.current_turn() is Color.WHITE
    assert GameState.BLACK.current_turn() is Color.BLACK
    assert GameState.WHITE.next_turn() is GameState.BLACK
    assert GameState.BLACK.next_turn().next_turn() is GameState.BLACK


@pytest.mark.parametrize(
    "state", [GameState.WAITING, GameState.WHITE_WON, GameState.BLACK_WON, GameState.DRAW]
)
def test_turn_invalid_when_not_playing(state):
    with pytest.raises(ValueError):
        state.current_turn()
    with pytest.raises(ValueError):
        state.next_turn()


def test_state_classification():
    for state in GameState:
        flags = [state.is_waiting(), state.is_still_going(), state.is_finished()]
        assert flags.count(True) == 1
    assert GameState.WAITING.is_waiting()
    assert GameState.BLACK.is_still_going()
    assert GameState.DRAW.is_finished()
    assert not GameState.WHITE_WON.is_still_going()