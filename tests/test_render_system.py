from jumpboard.components.control_button import ControlAction, ControlButton
from jumpboard.constants import DEFAULT_VIEWPORT_OFFSET, ROWS, VISIBLE_COLS
from jumpboard.systems.render import RenderSystem
from tests.helpers import click, jump


class DummyWindow:
    def __init__(self, width=720, height=900):
        self.width = width
        self.height = height


def _render(engine, bus):
    render = RenderSystem(bus, DummyWindow(), engine)
    render.process()
    return render


def test_headless_render_lays_out_visible_window(engine, bus):
    render = _render(engine, bus)
    assert len(render._last_cell_layout) == ROWS * VISIBLE_COLS
    assert render.cell_layout(6, DEFAULT_VIEWPORT_OFFSET) is not None
    assert render.cell_layout(6, DEFAULT_VIEWPORT_OFFSET - 1) is None
    assert render.cell_layout(6, DEFAULT_VIEWPORT_OFFSET)["occupied"] is True
    assert render.cell_layout(2, DEFAULT_VIEWPORT_OFFSET)["occupied"] is False


def test_render_follows_viewport_pan(engine, bus):
    render = _render(engine, bus)
    engine.on_pan_left()
    render.process()
    entry = render.cell_layout(6, DEFAULT_VIEWPORT_OFFSET - 5)
    assert entry is not None
    assert entry["visible_col"] == 0


def test_render_marks_valid_targets(engine, bus):
    render = _render(engine, bus)
    click(bus, 6, 20)
    render.process()
    assert render.cell_layout(4, 20)["valid_target"] is True
    assert render.cell_layout(4, 21)["valid_target"] is False
    assert render._render_ctx.selected == (6, 20)


def test_render_selection_clears_after_jump(engine, bus):
    render = _render(engine, bus)
    jump(bus, (6, 20), (4, 20))
    render.process()
    assert render._render_ctx.selected is None
    assert render.cell_layout(4, 20)["occupied"] is True


def test_render_syncs_control_buttons(engine, bus):
    render = _render(engine, bus)
    buttons = {button.action: button for _, button in engine.world.get_component(ControlButton)}
    assert set(buttons) == set(ControlAction)
    assert buttons[ControlAction.UNDO].enabled is False
    jump(bus, (6, 20), (4, 20))
    render.process()
    assert buttons[ControlAction.UNDO].enabled is True
    assert render._render_ctx.advisory is not None
