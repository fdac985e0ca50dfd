ROWS = 20
TOTAL_COLS = 51
VISIBLE_COLS = 15

# Rows at or below START_ROW begin filled; everything above starts empty.
START_ROW = 5
PAN_STEP = 5
DEFAULT_VIEWPORT_OFFSET = (TOTAL_COLS - VISIBLE_COLS) // 2

# Seconds an advisory message stays on screen before it is cleared.
MESSAGE_DURATION = 4.0

# Display-only labels, one per row, top to bottom.
ROW_LABELS = (
    '5', '4', '3', '2', '1', '1', '2', '3', '4', '5',
    '6', '7', '8', '9', '10', '11', '12', '13', '14', '15',
)

MILESTONE_MESSAGES = {
    4: "Nice start! The journey has just begun.",
    3: "Making progress! You're getting the hang of this.",
    2: "Impressive! You are a natural strategist.",
    1: "The summit awaits! One more push to victory!",
    0: "VICTORY! You have conquered the board!",
}
VICTORY_ROW = 0

WINDOW_WIDTH = 720
WINDOW_HEIGHT = 900
WINDOW_TITLE = "Summit Jump"
TILE_SIZE = 40
BOTTOM_MARGIN = 20

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.85
BOARD_MAX_HEIGHT_PCT = 0.82

# Column reserved left of the board for row labels, in tiles.
LABEL_COLUMN_TILES = 1

# Control bar that sits directly above the board.
CONTROL_BAR_GAP = 16
CONTROL_BUTTON_HEIGHT = 40
CONTROL_BUTTON_SPACING = 12
CONTROL_PAN_BUTTON_WIDTH = 56
CONTROL_ACTION_BUTTON_WIDTH = 96
