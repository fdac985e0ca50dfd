"""Facade over the board world, event bus and rule systems.

The presentation layer talks to the game only through BoardEngine: it calls
the on_* entry points for user interactions and re-queries the getters (or
listens on the bus) to redraw.
"""
from __future__ import annotations

from typing import Optional, Tuple

from esper import World

from jumpboard.components.board import BoardSnapshot
from jumpboard.events.bus import (
    EVENT_ADVISORY_DISMISS,
    EVENT_CELL_ACTIVATED,
    EVENT_PAN_REQUEST,
    EVENT_RESET_REQUEST,
    EVENT_UNDO_REQUEST,
    EventBus,
)
from jumpboard.systems.board import BoardSystem
from jumpboard.systems.game_flow_system import GameFlowSystem
from jumpboard.systems.history import HistorySystem
from jumpboard.systems.milestone import MilestoneSystem
from jumpboard.systems.viewport import PAN_LEFT, PAN_RIGHT, ViewportSystem
from jumpboard.world import (
    advisory_message,
    board_grid,
    create_world,
    milestone_tracker,
    move_history,
    selection_state,
    viewport_state,
)

Position = Tuple[int, int]


class BoardEngine:
    def __init__(self, event_bus: EventBus | None = None, world: World | None = None, **world_options):
        self.event_bus = event_bus or EventBus()
        self.world = world if world is not None else create_world(**world_options)
        self.viewport_system = ViewportSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.history_system = HistorySystem(self.world, self.event_bus)
        self.milestone_system = MilestoneSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self._timer = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_board(self) -> BoardSnapshot:
        return board_grid(self.world).cells

    def get_selection(self) -> Optional[Position]:
        return selection_state(self.world).position

    def get_valid_moves(self) -> Tuple[Position, ...]:
        return selection_state(self.world).valid_moves

    def get_viewport_offset(self) -> int:
        return viewport_state(self.world).offset

    def get_advisory_message(self) -> Optional[str]:
        return advisory_message(self.world).text

    def highest_row_reached(self) -> int:
        return milestone_tracker(self.world).highest_row

    def visible_cols(self) -> int:
        return viewport_state(self.world).visible_cols

    def history_depth(self) -> int:
        return len(move_history(self.world).snapshots)

    def can_undo(self) -> bool:
        return self.history_system.can_undo()

    def can_pan_left(self) -> bool:
        return self.viewport_system.can_pan_left()

    def can_pan_right(self) -> bool:
        return self.viewport_system.can_pan_right()

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------

    def on_cell_activated(self, visible_row: int, visible_col: int) -> None:
        self.event_bus.emit(EVENT_CELL_ACTIVATED, row=visible_row, visible_col=visible_col)

    def on_pan_left(self) -> None:
        self.event_bus.emit(EVENT_PAN_REQUEST, direction=PAN_LEFT)

    def on_pan_right(self) -> None:
        self.event_bus.emit(EVENT_PAN_REQUEST, direction=PAN_RIGHT)

    def on_undo(self) -> None:
        self.event_bus.emit(EVENT_UNDO_REQUEST)

    def on_reset(self) -> None:
        self.event_bus.emit(EVENT_RESET_REQUEST)

    def dismiss_advisory(self) -> None:
        self.event_bus.emit(EVENT_ADVISORY_DISMISS, reason='manual')

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def attach_timer(self, timer) -> None:
        """Register the presentation-owned message timer so close() can cancel it."""
        self._timer = timer

    def close(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
