from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_KEY_PRESS = "key_press"              # payload: symbol, modifiers
EVENT_CELL_ACTIVATED = "cell_activated"    # payload: row, visible_col
EVENT_TILE_CLICK = "tile_click"            # payload: row, col (absolute)
EVENT_DESELECT_REQUEST = "deselect_request"  # payload: reason=str


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_TILE_SELECTED = "tile_selected"      # payload: row, col, valid_moves=tuple[(r,c),...]
EVENT_TILE_DESELECTED = "tile_deselected"  # payload: reason=str, prev_row, prev_col
EVENT_JUMP_APPLIED = "jump_applied"        # payload: src=(r,c), jumped=(r,c), dst=(r,c)
EVENT_BOARD_CHANGED = "board_changed"      # payload: reason=str


# ============================================================================
# HISTORY & GAME FLOW
# ============================================================================
EVENT_UNDO_REQUEST = "undo_request"        # payload: None
EVENT_UNDO_APPLIED = "undo_applied"        # payload: remaining=int
EVENT_RESET_REQUEST = "reset_request"      # payload: None
EVENT_GAME_RESET = "game_reset"            # payload: None


# ============================================================================
# VIEWPORT
# ============================================================================
EVENT_PAN_REQUEST = "pan_request"          # payload: direction='left'|'right'
EVENT_VIEWPORT_CHANGED = "viewport_changed"  # payload: offset=int, previous=int


# ============================================================================
# MILESTONES & ADVISORY MESSAGES
# ============================================================================
EVENT_MILESTONE_REACHED = "milestone_reached"  # payload: row=int, message=str, victory=bool
EVENT_ADVISORY_SHOWN = "advisory_shown"        # payload: message=str
EVENT_ADVISORY_DISMISS = "advisory_dismiss"    # payload: reason=str
EVENT_ADVISORY_CLEARED = "advisory_cleared"    # payload: reason=str
