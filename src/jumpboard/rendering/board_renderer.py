from __future__ import annotations

from typing import TYPE_CHECKING

from jumpboard.constants import ROW_LABELS
from jumpboard.ui.layout import cell_center

if TYPE_CHECKING:
    from jumpboard.rendering.context import RenderContext
    from jumpboard.systems.render import RenderSystem

GOAL_ROW_COLOR = (186, 230, 253)
CELL_COLOR = (214, 211, 209)
GRID_LINE_COLOR = (107, 114, 128)
PIECE_COLOR = (0, 0, 0)
SELECTED_RING_COLOR = (251, 191, 36)
VALID_MOVE_COLOR = (251, 191, 36, 128)
LABEL_COLOR = (156, 163, 175)


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 4):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        rs = self._rs
        rs._last_cell_layout = {}
        ring_commands: list[tuple[float, float, float]] = []
        half = ctx.tile_size / 2
        radius = max(ctx.tile_size - self._padding, 4) / 2

        for row in range(ctx.rows):
            label = ROW_LABELS[row] if row < len(ROW_LABELS) else ''
            _, label_y = cell_center(row, 0, ctx.tile_size, ctx.board_left, ctx.board_bottom, ctx.rows)
            if not headless and label:
                arcade.draw_text(
                    label,
                    ctx.board_left - half,
                    label_y,
                    LABEL_COLOR,
                    max(8, int(ctx.tile_size * 0.4)),
                    anchor_x="center",
                    anchor_y="center",
                    bold=True,
                )
            for visible_col in range(ctx.visible_cols):
                col = visible_col + ctx.offset
                cx, cy = cell_center(row, visible_col, ctx.tile_size, ctx.board_left, ctx.board_bottom, ctx.rows)
                occupied = ctx.cells[row][col]
                valid_target = (row, col) in ctx.valid_moves
                rs._last_cell_layout[(row, col)] = {
                    "visible_col": visible_col,
                    "center": (cx, cy),
                    "occupied": occupied,
                    "valid_target": valid_target and not occupied,
                }
                if headless:
                    continue
                fill = GOAL_ROW_COLOR if row == 0 else CELL_COLOR
                arcade.draw_lrbt_rectangle_filled(cx - half, cx + half, cy - half, cy + half, fill)
                arcade.draw_lrbt_rectangle_outline(cx - half, cx + half, cy - half, cy + half, GRID_LINE_COLOR, 1)
                if occupied:
                    arcade.draw_circle_filled(cx, cy, radius, PIECE_COLOR)
                    if ctx.selected == (row, col):
                        ring_commands.append((cx, cy, radius + 2))
                elif valid_target:
                    arcade.draw_circle_filled(cx, cy, radius / 2, VALID_MOVE_COLOR)

        for cx, cy, ring_radius in ring_commands:
            arcade.draw_circle_outline(cx, cy, ring_radius, SELECTED_RING_COLOR, 4)
