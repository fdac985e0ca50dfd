from dataclasses import dataclass


@dataclass(slots=True)
class Viewport:
    """Column window onto the board.

    offset: absolute index of the leftmost visible column.
    """
    offset: int
    visible_cols: int
    total_cols: int

    @property
    def max_offset(self) -> int:
        return max(0, self.total_cols - self.visible_cols)
