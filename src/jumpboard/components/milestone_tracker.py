from dataclasses import dataclass

from jumpboard.constants import START_ROW


@dataclass(slots=True)
class MilestoneTracker:
    """Lowest row index any piece has reached this game. Never increases until reset."""
    highest_row: int = START_ROW
