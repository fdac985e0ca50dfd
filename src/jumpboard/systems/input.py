import logging

from jumpboard.components.control_button import ControlAction, ControlButton
from jumpboard.events.bus import (
    EventBus,
    EVENT_DESELECT_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
)
from jumpboard.factories.controls import sync_control_buttons
from jumpboard.ui.layout import cell_at_point

logger = logging.getLogger(__name__)

MOUSE_BUTTON_LEFT = 1

# arcade.key values, kept literal to avoid importing arcade in headless tests.
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_ESCAPE = 65307
KEY_U = 117
KEY_R = 114


class InputSystem:
    """Turns raw window input into engine interactions."""

    def __init__(self, event_bus: EventBus, window, engine):
        self.event_bus = event_bus
        self.window = window
        self.engine = engine
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Right-click deselect is handled by BoardSystem listening to EVENT_MOUSE_PRESS directly.
        if button != MOUSE_BUTTON_LEFT:
            return
        control = self._control_at_point(x, y)
        if control is not None:
            if control.enabled:
                self._activate_control(control.action)
            return
        cell = cell_at_point(
            x,
            y,
            self.window.width,
            self.window.height,
            len(self.engine.get_board()),
            self.engine.visible_cols(),
        )
        if cell is None:
            return
        row, visible_col = cell
        self.engine.on_cell_activated(row, visible_col)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol == KEY_LEFT:
            self.engine.on_pan_left()
        elif symbol == KEY_RIGHT:
            self.engine.on_pan_right()
        elif symbol == KEY_U:
            self.engine.on_undo()
        elif symbol == KEY_R:
            self.engine.on_reset()
        elif symbol == KEY_ESCAPE:
            self.event_bus.emit(EVENT_DESELECT_REQUEST, reason='escape')

    def _control_at_point(self, x: float, y: float) -> ControlButton | None:
        world = self.engine.world
        sync_control_buttons(world, self.engine, self.window.width, self.window.height)
        for _, control in world.get_component(ControlButton):
            if control.contains(x, y):
                return control
        return None

    def _activate_control(self, action: ControlAction) -> None:
        logger.debug("Control activated: %s", action.name)
        if action == ControlAction.PAN_LEFT:
            self.engine.on_pan_left()
        elif action == ControlAction.PAN_RIGHT:
            self.engine.on_pan_right()
        elif action == ControlAction.UNDO:
            self.engine.on_undo()
        elif action == ControlAction.RESET:
            self.engine.on_reset()
