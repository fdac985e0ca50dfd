from jumpboard.components.control_button import ControlAction
from jumpboard.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    CONTROL_ACTION_BUTTON_WIDTH,
    CONTROL_BAR_GAP,
    CONTROL_BUTTON_HEIGHT,
    CONTROL_BUTTON_SPACING,
    CONTROL_PAN_BUTTON_WIDTH,
    LABEL_COLUMN_TILES,
    ROWS,
    VISIBLE_COLS,
)

MIN_TILE_SIZE = 12

CONTROL_SPECS = (
    ("◀", ControlAction.PAN_LEFT, CONTROL_PAN_BUTTON_WIDTH),
    ("Undo", ControlAction.UNDO, CONTROL_ACTION_BUTTON_WIDTH),
    ("Reset", ControlAction.RESET, CONTROL_ACTION_BUTTON_WIDTH),
    ("▶", ControlAction.PAN_RIGHT, CONTROL_PAN_BUTTON_WIDTH),
)


def compute_board_geometry(window_width: int, window_height: int, rows: int = ROWS, visible_cols: int = VISIBLE_COLS):
    """Return (tile_size, start_x, start_y) for the visible board window.

    start_x is the left edge of visible column 0; the row label column sits to
    its left. start_y is the bottom edge of the last row. Shared by render and
    input so clicks map to the cells that were drawn.
    """
    reserved_h = BOTTOM_MARGIN + CONTROL_BAR_GAP * 2 + CONTROL_BUTTON_HEIGHT
    grid_cols = visible_cols + LABEL_COLUMN_TILES
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - reserved_h) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / grid_cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = grid_cols * tile_size
    start_x = (window_width - total_width) / 2 + LABEL_COLUMN_TILES * tile_size
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_center(row: int, visible_col: int, tile_size: int, start_x: float, start_y: float, rows: int = ROWS):
    """Screen center of a visible cell. Row 0 is drawn at the top."""
    cx = start_x + visible_col * tile_size + tile_size / 2
    cy = start_y + (rows - row - 1) * tile_size + tile_size / 2
    return cx, cy


def cell_at_point(x: float, y: float, window_width: int, window_height: int,
                  rows: int = ROWS, visible_cols: int = VISIBLE_COLS):
    """Return (row, visible_col) under the point, or None outside the board."""
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, rows, visible_cols)
    if x < start_x or x >= start_x + visible_cols * tile_size:
        return None
    if y < start_y or y >= start_y + rows * tile_size:
        return None
    visible_col = int((x - start_x) // tile_size)
    row = rows - 1 - int((y - start_y) // tile_size)
    if 0 <= row < rows and 0 <= visible_col < visible_cols:
        return row, visible_col
    return None


def compute_control_layout(window_width: int, window_height: int, rows: int = ROWS, visible_cols: int = VISIBLE_COLS):
    """Return [(label, action, center_x, center_y, width, height), ...] for the control bar."""
    tile_size, _, start_y = compute_board_geometry(window_width, window_height, rows, visible_cols)
    board_top = start_y + rows * tile_size
    center_y = board_top + CONTROL_BAR_GAP + CONTROL_BUTTON_HEIGHT / 2
    total = sum(width for _, _, width in CONTROL_SPECS) + CONTROL_BUTTON_SPACING * (len(CONTROL_SPECS) - 1)
    cursor = (window_width - total) / 2
    layout = []
    for label, action, width in CONTROL_SPECS:
        layout.append((label, action, cursor + width / 2, center_y, width, CONTROL_BUTTON_HEIGHT))
        cursor += width + CONTROL_BUTTON_SPACING
    return layout
