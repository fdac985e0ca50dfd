from dataclasses import dataclass
from typing import Optional, Tuple

Position = Tuple[int, int]


@dataclass(slots=True)
class Selection:
    """Currently selected piece and the jump destinations open to it."""
    position: Optional[Position] = None
    valid_moves: Tuple[Position, ...] = ()

    def clear(self) -> None:
        self.position = None
        self.valid_moves = ()
