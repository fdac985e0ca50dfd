from jumpboard.constants import DEFAULT_VIEWPORT_OFFSET, START_ROW
from jumpboard.events.bus import EVENT_GAME_RESET, EVENT_VIEWPORT_CHANGED
from jumpboard.systems.board_ops import create_initial_board
from tests.helpers import capture, click, jump


def test_reset_restores_everything(engine, bus):
    jump(bus, (6, 20), (4, 20))
    jump(bus, (6, 22), (4, 22))
    engine.on_pan_left()
    click(bus, 7, 23)

    engine.on_reset()

    assert engine.get_board() == create_initial_board()
    assert engine.get_selection() is None
    assert engine.get_valid_moves() == ()
    assert not engine.can_undo()
    assert engine.get_viewport_offset() == DEFAULT_VIEWPORT_OFFSET
    assert engine.highest_row_reached() == START_ROW


def test_reset_board_shape_regardless_of_history(engine, bus):
    for col in range(10, 40, 2):
        jump(bus, (6, col), (4, col))
    engine.on_reset()
    board = engine.get_board()
    for r, row in enumerate(board):
        assert all(row) if r >= START_ROW else not any(row)


def test_fresh_reset_has_no_milestone(engine):
    engine.on_reset()
    assert engine.highest_row_reached() == 5
    assert engine.get_advisory_message() is None


def test_reset_allows_milestone_again(engine, bus):
    jump(bus, (6, 20), (4, 20))
    engine.dismiss_advisory()
    engine.on_reset()
    jump(bus, (6, 20), (4, 20))
    assert engine.get_advisory_message() == "Nice start! The journey has just begun."


def test_reset_emits_viewport_change_only_when_moved(engine, bus):
    changes = capture(bus, EVENT_VIEWPORT_CHANGED)
    resets = capture(bus, EVENT_GAME_RESET)
    engine.on_reset()
    assert changes == []
    engine.on_pan_right()
    engine.on_reset()
    assert changes[-1] == {"offset": DEFAULT_VIEWPORT_OFFSET, "previous": DEFAULT_VIEWPORT_OFFSET + 5}
    assert len(resets) == 2
