from jumpboard.constants import ROWS, START_ROW, TOTAL_COLS
from jumpboard.systems.board_ops import (
    apply_jump,
    calculate_valid_moves,
    create_initial_board,
    has_piece,
    in_bounds,
    jumped_position,
)
from tests.helpers import count_pieces, diff_cells


def _board_from(rows: list[str]):
    return tuple(tuple(ch == 'x' for ch in row) for row in rows)


def test_initial_board_shape():
    board = create_initial_board()
    assert len(board) == ROWS
    assert all(len(row) == TOTAL_COLS for row in board)
    for r, row in enumerate(board):
        assert all(row) if r >= START_ROW else not any(row)


def test_empty_positions_have_no_moves():
    board = create_initial_board()
    for r in range(ROWS):
        for c in range(TOTAL_COLS):
            if not board[r][c]:
                assert calculate_valid_moves(board, r, c) == []


def test_out_of_bounds_position_has_no_moves():
    board = create_initial_board()
    assert calculate_valid_moves(board, -1, 0) == []
    assert calculate_valid_moves(board, ROWS, 3) == []
    assert calculate_valid_moves(board, 6, TOTAL_COLS) == []


def test_initial_moves_only_from_second_filled_row():
    board = create_initial_board()
    # Row 5 pieces have nothing to jump over above them.
    assert calculate_valid_moves(board, 5, 7) == []
    # Row 6 pieces jump over row 5 into the empty row 4.
    assert calculate_valid_moves(board, 6, 7) == [(4, 7)]
    # Deep pieces are boxed in.
    assert calculate_valid_moves(board, 12, 20) == []


def test_moves_follow_up_down_left_right_order():
    board = _board_from([
        ".....",
        "..x..",
        ".xxx.",
        "..x..",
        ".....",
    ])
    assert calculate_valid_moves(board, 2, 2) == [(0, 2), (4, 2), (2, 0), (2, 4)]


def test_no_diagonal_or_edge_moves():
    board = _board_from([
        "xx.",
        "xx.",
        "...",
    ])
    assert calculate_valid_moves(board, 0, 0) == [(2, 0), (0, 2)]
    assert (2, 2) not in calculate_valid_moves(board, 0, 0)
    assert calculate_valid_moves(board, 1, 1) == []


def test_jumped_position_is_midpoint():
    assert jumped_position((6, 7), (4, 7)) == (5, 7)
    assert jumped_position((5, 5), (5, 7)) == (5, 6)
    assert jumped_position((5, 9), (5, 7)) == (5, 8)


def test_apply_jump_changes_exactly_three_cells():
    board = create_initial_board()
    after = apply_jump(board, (6, 7), (4, 7))
    removed, added = diff_cells(board, after)
    assert removed == {(6, 7), (5, 7)}
    assert added == {(4, 7)}
    assert count_pieces(after) == count_pieces(board) - 1


def test_apply_jump_leaves_input_snapshot_untouched():
    board = create_initial_board()
    apply_jump(board, (6, 7), (4, 7))
    assert board == create_initial_board()


def test_apply_jump_shares_untouched_rows():
    board = create_initial_board()
    after = apply_jump(board, (6, 7), (4, 7))
    assert after[10] is board[10]


def test_in_bounds_and_has_piece():
    board = _board_from(["x.", ".x"])
    assert in_bounds(board, 1, 1)
    assert not in_bounds(board, 2, 0)
    assert has_piece(board, 0, 0) and has_piece(board, 1, 1)
    assert not has_piece(board, 0, 1)
