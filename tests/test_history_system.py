from jumpboard.events.bus import EVENT_BOARD_CHANGED, EVENT_TILE_DESELECTED, EVENT_UNDO_APPLIED
from jumpboard.systems.board_ops import create_initial_board
from tests.helpers import capture, click, jump


def test_undo_restores_previous_board_and_clears_selection(engine, bus):
    before = engine.get_board()
    jump(bus, (6, 20), (4, 20))
    click(bus, 7, 21)
    engine.on_undo()
    assert engine.get_board() == before
    assert engine.get_selection() is None
    assert engine.get_valid_moves() == ()
    assert not engine.can_undo()


def test_undo_steps_back_one_move_at_a_time(engine, bus):
    jump(bus, (6, 20), (4, 20))
    after_first = engine.get_board()
    jump(bus, (6, 24), (4, 24))
    assert engine.history_depth() == 2
    engine.on_undo()
    assert engine.get_board() == after_first
    engine.on_undo()
    assert engine.get_board() == create_initial_board()


def test_undo_with_empty_history_is_noop(engine, bus):
    applied = capture(bus, EVENT_UNDO_APPLIED)
    changed = capture(bus, EVENT_BOARD_CHANGED)
    click(bus, 6, 20)
    engine.on_undo()
    assert applied == []
    assert changed == []
    assert engine.get_board() == create_initial_board()
    # Selection survives a no-op undo.
    assert engine.get_selection() == (6, 20)


def test_undo_emits_events(engine, bus):
    applied = capture(bus, EVENT_UNDO_APPLIED)
    deselected = capture(bus, EVENT_TILE_DESELECTED)
    jump(bus, (6, 20), (4, 20))
    click(bus, 6, 22)
    engine.on_undo()
    assert applied == [{"remaining": 0}]
    assert deselected[-1]["reason"] == "undo"


def test_undo_does_not_roll_back_milestone(engine, bus):
    jump(bus, (6, 20), (4, 20))
    assert engine.highest_row_reached() == 4
    engine.on_undo()
    assert engine.highest_row_reached() == 4
    message = engine.get_advisory_message()
    engine.dismiss_advisory()
    # Re-reaching row 4 does not re-trigger the message.
    jump(bus, (6, 20), (4, 20))
    assert message is not None
    assert engine.get_advisory_message() is None
