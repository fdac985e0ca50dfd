"""Draws the pan / undo / reset control bar."""
from __future__ import annotations

from esper import World

from jumpboard.components.control_button import ControlAction, ControlButton

BUTTON_COLORS = {
    ControlAction.PAN_LEFT: (75, 85, 99),
    ControlAction.UNDO: (245, 158, 11),
    ControlAction.RESET: (14, 165, 233),
    ControlAction.PAN_RIGHT: (75, 85, 99),
}
DISABLED_FILL = (55, 65, 81)
DISABLED_TEXT = (107, 114, 128)
ENABLED_TEXT = (17, 24, 39)


class ControlRenderer:
    def __init__(self, world: World):
        self.world = world

    def render(self, arcade) -> None:
        for _, button in self.world.get_component(ControlButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            fill_color = BUTTON_COLORS.get(button.action, DISABLED_FILL) if button.enabled else DISABLED_FILL
            text_color = ENABLED_TEXT if button.enabled else DISABLED_TEXT
            if button.enabled and button.action in (ControlAction.PAN_LEFT, ControlAction.PAN_RIGHT):
                text_color = arcade.color.WHITE
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                text_color,
                16,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
