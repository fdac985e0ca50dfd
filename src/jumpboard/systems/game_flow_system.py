"""Whole-game transitions: starting over from the initial position."""
from __future__ import annotations

import logging

from esper import World

from jumpboard.constants import START_ROW
from jumpboard.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_GAME_RESET,
    EVENT_RESET_REQUEST,
    EVENT_TILE_DESELECTED,
    EVENT_VIEWPORT_CHANGED,
    EventBus,
)
from jumpboard.systems.board_ops import create_initial_board
from jumpboard.world import (
    board_grid,
    default_viewport_offset,
    milestone_tracker,
    move_history,
    selection_state,
    viewport_state,
)

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Handles reset requests by rebuilding every piece of game state."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self._on_reset_request)

    def _on_reset_request(self, sender, **payload) -> None:
        self.reset()

    def reset(self) -> None:
        start_row = getattr(self.world, "start_row", START_ROW)
        grid = board_grid(self.world)
        grid.cells = create_initial_board(grid.rows, grid.cols, start_row=start_row)

        selection = selection_state(self.world)
        prev = selection.position
        selection.clear()
        move_history(self.world).snapshots.clear()
        milestone_tracker(self.world).highest_row = start_row

        viewport = viewport_state(self.world)
        previous_offset = viewport.offset
        viewport.offset = default_viewport_offset(viewport.total_cols, viewport.visible_cols)

        logger.debug("Game reset")
        if prev is not None:
            self.event_bus.emit(EVENT_TILE_DESELECTED, reason='reset', prev_row=prev[0], prev_col=prev[1])
        if viewport.offset != previous_offset:
            self.event_bus.emit(EVENT_VIEWPORT_CHANGED, offset=viewport.offset, previous=previous_offset)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='reset')
        self.event_bus.emit(EVENT_GAME_RESET)
