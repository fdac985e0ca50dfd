import logging

from esper import World

from jumpboard.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_TILE_DESELECTED,
    EVENT_UNDO_APPLIED,
    EVENT_UNDO_REQUEST,
)
from jumpboard.world import board_grid, move_history, selection_state

logger = logging.getLogger(__name__)


class HistorySystem:
    """Restores the board snapshot taken before the most recent jump.

    Milestone records are intentionally left untouched by undo.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_UNDO_REQUEST, self.on_undo_request)

    def can_undo(self) -> bool:
        return bool(move_history(self.world).snapshots)

    def on_undo_request(self, sender, **kwargs):
        self.undo()

    def undo(self) -> bool:
        history = move_history(self.world)
        if not history.snapshots:
            return False
        grid = board_grid(self.world)
        grid.cells = history.snapshots.pop()
        selection = selection_state(self.world)
        prev = selection.position
        selection.clear()
        logger.debug("Undo applied; %d snapshots remain", len(history.snapshots))
        if prev is not None:
            self.event_bus.emit(EVENT_TILE_DESELECTED, reason='undo', prev_row=prev[0], prev_col=prev[1])
        self.event_bus.emit(EVENT_UNDO_APPLIED, remaining=len(history.snapshots))
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='undo')
        return True
