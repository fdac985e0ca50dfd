from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from jumpboard.components.board import BoardSnapshot

BoardPos = Tuple[int, int]


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    tile_size: int
    board_left: float
    board_bottom: float
    rows: int
    visible_cols: int
    offset: int
    cells: BoardSnapshot
    selected: Optional[BoardPos] = None
    valid_moves: FrozenSet[BoardPos] = field(default_factory=frozenset)
    advisory: Optional[str] = None

    @property
    def board_width(self) -> float:
        return self.tile_size * self.visible_cols

    @property
    def board_height(self) -> float:
        return self.tile_size * self.rows

    @property
    def board_top(self) -> float:
        return self.board_bottom + self.board_height

    @property
    def board_right(self) -> float:
        return self.board_left + self.board_width


def build_render_context(engine, window_width: int, window_height: int,
                         tile_size: int, board_left: float, board_bottom: float) -> RenderContext:
    """Snapshot engine state for the current frame."""
    cells = engine.get_board()
    viewport_cols = min(engine.visible_cols(), len(cells[0]) if cells else 0)
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        tile_size=tile_size,
        board_left=board_left,
        board_bottom=board_bottom,
        rows=len(cells),
        visible_cols=viewport_cols,
        offset=engine.get_viewport_offset(),
        cells=cells,
        selected=engine.get_selection(),
        valid_moves=frozenset(engine.get_valid_moves()),
        advisory=engine.get_advisory_message(),
    )
