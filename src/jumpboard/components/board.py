from dataclasses import dataclass
from typing import Tuple

BoardRow = Tuple[bool, ...]
BoardSnapshot = Tuple[BoardRow, ...]


@dataclass(slots=True)
class BoardGrid:
    """Occupancy grid for the whole board.

    cells is an immutable tuple of row tuples; mutations replace it with a new
    snapshot so anything already holding the old one (history) never changes.
    """
    rows: int
    cols: int
    cells: BoardSnapshot = ()
