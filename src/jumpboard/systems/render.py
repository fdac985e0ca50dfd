from typing import Any

from jumpboard.events.bus import EventBus
from jumpboard.factories.controls import spawn_control_buttons, sync_control_buttons
from jumpboard.rendering.advisory_renderer import AdvisoryRenderer
from jumpboard.rendering.board_renderer import BoardRenderer
from jumpboard.rendering.context import RenderContext, build_render_context
from jumpboard.rendering.control_renderer import ControlRenderer
from jumpboard.ui.layout import compute_board_geometry

PADDING = 4


class RenderSystem:
    def __init__(self, event_bus: EventBus, window, engine):
        self.event_bus = event_bus
        self.window = window
        self.engine = engine
        self.world = engine.world
        self._render_ctx: RenderContext | None = None
        self._last_cell_layout: dict[tuple[int, int], dict[str, Any]] = {}
        self._board_renderer = BoardRenderer(self, padding=PADDING)
        self._control_renderer = ControlRenderer(self.world)
        self._advisory_renderer = AdvisoryRenderer()
        spawn_control_buttons(self.world, self.window.width, self.window.height)

    def process(self):
        # Local import keeps tests headless without creating a window.
        arcade = None
        headless = False
        try:
            import arcade
            arcade.get_window()
        except Exception:
            # No active window (unit tests); still build the layout cache.
            headless = True
        rows = len(self.engine.get_board())
        visible_cols = self.engine.visible_cols()
        tile_size, board_left, board_bottom = compute_board_geometry(
            self.window.width, self.window.height, rows, visible_cols
        )
        ctx = build_render_context(
            self.engine,
            self.window.width,
            self.window.height,
            tile_size,
            board_left,
            board_bottom,
        )
        self._render_ctx = ctx
        sync_control_buttons(self.world, self.engine, self.window.width, self.window.height)

        self._board_renderer.render(arcade, ctx, headless=headless)
        if headless:
            return
        self._control_renderer.render(arcade)
        self._advisory_renderer.render(arcade, ctx)

    def cell_layout(self, row: int, col: int) -> dict[str, Any] | None:
        """Layout entry for an absolute cell drawn in the last frame, if visible."""
        return self._last_cell_layout.get((row, col))
