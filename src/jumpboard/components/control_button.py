"""Components for the on-screen control bar above the board."""
from dataclasses import dataclass
from enum import Enum, auto


class ControlAction(Enum):
    """Actions that a control button can trigger."""
    PAN_LEFT = auto()
    UNDO = auto()
    RESET = auto()
    PAN_RIGHT = auto()


@dataclass
class ControlButton:
    """Clickable control button; x/y is the button center."""
    label: str
    action: ControlAction
    x: float = 0.0
    y: float = 0.0
    width: float = 96.0
    height: float = 40.0
    enabled: bool = True

    def contains(self, px: float, py: float) -> bool:
        return (
            self.x - self.width / 2 <= px <= self.x + self.width / 2
            and self.y - self.height / 2 <= py <= self.y + self.height / 2
        )
