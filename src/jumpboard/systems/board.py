import logging
from typing import Tuple

from esper import World

from jumpboard.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_DESELECT_REQUEST,
    EVENT_JUMP_APPLIED,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
)
from jumpboard.systems.board_ops import (
    apply_jump,
    calculate_valid_moves,
    has_piece,
    in_bounds,
    jumped_position,
)
from jumpboard.world import board_grid, move_history, selection_state

logger = logging.getLogger(__name__)

# Arcade uses 4 for the right mouse button (arcade.MOUSE_BUTTON_RIGHT).
MOUSE_BUTTON_RIGHT = 4


class BoardSystem:
    """Selection state machine and jump application.

    Works in absolute board coordinates; viewport translation happens upstream
    in ViewportSystem before EVENT_TILE_CLICK is emitted.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_DESELECT_REQUEST, self.on_deselect_request)

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        try:
            row = int(row)
            col = int(col)
        except (TypeError, ValueError, OverflowError):
            return
        self.activate(row, col)

    def activate(self, row: int, col: int) -> None:
        grid = board_grid(self.world)
        if not in_bounds(grid.cells, row, col):
            logger.debug("Ignoring click outside board at (%d, %d)", row, col)
            return
        selection = selection_state(self.world)
        target = (row, col)
        clicked_on_piece = has_piece(grid.cells, row, col)

        if selection.position is not None and not clicked_on_piece:
            if target in selection.valid_moves:
                self._apply_move(selection.position, target)
                return

        if clicked_on_piece:
            if selection.position == target:
                self._deselect(reason='toggle')
            else:
                self._select(target)
        else:
            self._deselect(reason='empty_cell')

    def on_mouse_press(self, sender, **kwargs):
        # Right-click always clears the current selection.
        if kwargs.get('button') != MOUSE_BUTTON_RIGHT:
            return
        self._deselect(reason='right_click')

    def on_deselect_request(self, sender, **kwargs):
        self._deselect(reason=kwargs.get('reason') or 'request')

    def _select(self, position: Tuple[int, int]) -> None:
        grid = board_grid(self.world)
        selection = selection_state(self.world)
        selection.position = position
        selection.valid_moves = tuple(calculate_valid_moves(grid.cells, *position))
        logger.debug("Selected %s with %d valid moves", position, len(selection.valid_moves))
        self.event_bus.emit(
            EVENT_TILE_SELECTED,
            row=position[0],
            col=position[1],
            valid_moves=selection.valid_moves,
        )

    def _deselect(self, reason: str) -> None:
        selection = selection_state(self.world)
        prev = selection.position
        selection.clear()
        if prev is None:
            return
        self.event_bus.emit(EVENT_TILE_DESELECTED, reason=reason, prev_row=prev[0], prev_col=prev[1])

    def _apply_move(self, src: Tuple[int, int], dst: Tuple[int, int]) -> None:
        grid = board_grid(self.world)
        history = move_history(self.world)
        jumped = jumped_position(src, dst)
        history.snapshots.append(grid.cells)
        grid.cells = apply_jump(grid.cells, src, dst)
        selection_state(self.world).clear()
        logger.debug("Jump %s -> %s over %s (history depth %d)", src, dst, jumped, len(history.snapshots))
        self.event_bus.emit(EVENT_TILE_DESELECTED, reason='move', prev_row=src[0], prev_col=src[1])
        self.event_bus.emit(EVENT_JUMP_APPLIED, src=src, jumped=jumped, dst=dst)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='jump')
