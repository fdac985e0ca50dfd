from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jumpboard.rendering.context import RenderContext

OVERLAY_FILL = (17, 24, 39, 230)
OVERLAY_BORDER = (245, 158, 11)
OVERLAY_TEXT = (251, 191, 36)


class AdvisoryRenderer:
    """Toast overlay for the current milestone message, a third of the way down the board."""

    def __init__(self, width_pct: float = 0.8, height: float = 72.0):
        self._width_pct = width_pct
        self._height = height

    def render(self, arcade, ctx: RenderContext) -> None:
        if not ctx.advisory:
            return
        width = ctx.board_width * self._width_pct
        center_x = ctx.board_left + ctx.board_width / 2
        center_y = ctx.board_top - ctx.board_height / 3
        left = center_x - width / 2
        bottom = center_y - self._height / 2
        arcade.draw_lbwh_rectangle_filled(left, bottom, width, self._height, OVERLAY_FILL)
        arcade.draw_lbwh_rectangle_outline(left, bottom, width, self._height, OVERLAY_BORDER, border_width=2)
        arcade.draw_text(
            ctx.advisory,
            center_x,
            center_y,
            OVERLAY_TEXT,
            16,
            width=int(width - 16),
            align="center",
            anchor_x="center",
            anchor_y="center",
            multiline=True,
            bold=True,
        )
