from dataclasses import dataclass, field
from typing import List

from jumpboard.components.board import BoardSnapshot


@dataclass(slots=True)
class MoveHistory:
    """Stack of board snapshots taken before each jump. Unbounded."""
    snapshots: List[BoardSnapshot] = field(default_factory=list)
