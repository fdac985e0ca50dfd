"""Factory helpers for the control bar entities."""
from esper import World

from jumpboard.components.control_button import ControlAction, ControlButton
from jumpboard.ui.layout import compute_control_layout


def spawn_control_buttons(world: World, width: int, height: int) -> list[int]:
    """Create one ControlButton entity per control-bar action."""
    entities = []
    for label, action, x, y, w, h in compute_control_layout(width, height):
        entities.append(world.create_entity(ControlButton(label=label, action=action, x=x, y=y, width=w, height=h)))
    return entities


def sync_control_buttons(world: World, engine, width: int, height: int) -> None:
    """Move buttons to the current layout and refresh their enabled flags from engine state."""
    rows = len(engine.get_board())
    layout = {
        action: (x, y, w, h)
        for _, action, x, y, w, h in compute_control_layout(width, height, rows, engine.visible_cols())
    }
    enabled = {
        ControlAction.PAN_LEFT: engine.can_pan_left(),
        ControlAction.UNDO: engine.can_undo(),
        ControlAction.RESET: True,
        ControlAction.PAN_RIGHT: engine.can_pan_right(),
    }
    for _, button in world.get_component(ControlButton):
        geometry = layout.get(button.action)
        if geometry is not None:
            button.x, button.y, button.width, button.height = geometry
        button.enabled = enabled.get(button.action, True)
