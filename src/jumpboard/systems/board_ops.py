from __future__ import annotations

from typing import List, Tuple

from jumpboard.components.board import BoardSnapshot
from jumpboard.constants import ROWS, START_ROW, TOTAL_COLS

Position = Tuple[int, int]

# Up, down, left, right. Result order of calculate_valid_moves follows this.
JUMP_DIRECTIONS: Tuple[Position, ...] = (
    (-2, 0),
    (2, 0),
    (0, -2),
    (0, 2),
)


def create_initial_board(rows: int = ROWS, cols: int = TOTAL_COLS, *, start_row: int = START_ROW) -> BoardSnapshot:
    """Every row at or below start_row filled, rows above it empty."""
    return tuple(tuple(r >= start_row for _ in range(cols)) for r in range(rows))


def board_size(board: BoardSnapshot) -> Tuple[int, int]:
    rows = len(board)
    cols = len(board[0]) if rows else 0
    return rows, cols


def in_bounds(board: BoardSnapshot, row: int, col: int) -> bool:
    rows, cols = board_size(board)
    return 0 <= row < rows and 0 <= col < cols


def has_piece(board: BoardSnapshot, row: int, col: int) -> bool:
    return in_bounds(board, row, col) and board[row][col]


def jumped_position(src: Position, dst: Position) -> Position:
    """Cell midway between src and dst."""
    return src[0] + (dst[0] - src[0]) // 2, src[1] + (dst[1] - src[1]) // 2


def calculate_valid_moves(board: BoardSnapshot, row: int, col: int) -> List[Position]:
    """Return jump destinations for the piece at (row, col).

    A destination is two cells away along one axis, inside the board, empty,
    and the cell between holds a piece. Positions without a piece have no moves.
    """
    if not has_piece(board, row, col):
        return []
    moves: List[Position] = []
    for d_row, d_col in JUMP_DIRECTIONS:
        dest_row = row + d_row
        dest_col = col + d_col
        if not in_bounds(board, dest_row, dest_col):
            continue
        mid_row, mid_col = jumped_position((row, col), (dest_row, dest_col))
        if not board[dest_row][dest_col] and board[mid_row][mid_col]:
            moves.append((dest_row, dest_col))
    return moves


def apply_jump(board: BoardSnapshot, src: Position, dst: Position) -> BoardSnapshot:
    """Return a new snapshot with src and the jumped cell cleared and dst filled.

    Callers are expected to have validated the jump with calculate_valid_moves.
    """
    mid = jumped_position(src, dst)
    changes = {src: False, mid: False, dst: True}
    touched_rows = {pos[0] for pos in changes}
    new_rows = []
    for r, row_cells in enumerate(board):
        if r not in touched_rows:
            new_rows.append(row_cells)
            continue
        cells = list(row_cells)
        for (cr, cc), value in changes.items():
            if cr == r:
                cells[cc] = value
        new_rows.append(tuple(cells))
    return tuple(new_rows)
