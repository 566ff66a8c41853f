import numpy as np
import pytest

from game.board import (
    GRID_SIZE,
    apply_placement,
    as_board,
    board_key,
    clear_lines,
    count_empty,
    empty_board,
    origins,
    placeable,
)
from game.pieces import PIECES_DATA

from conftest import make_board


def test_empty_board_is_read_only():
    board = empty_board()
    assert board.shape == (GRID_SIZE, GRID_SIZE)
    assert count_empty(board) == 64
    with pytest.raises(ValueError):
        board[0, 0] = 1


@pytest.mark.parametrize("ox, oy", [(8, 0), (0, 8), (-1, 0), (0, -1), (7, 7)])
def test_placeable_rejects_cells_off_the_board(ox, oy):
    shape = PIECES_DATA['2H'] if (ox, oy) == (7, 7) else PIECES_DATA['1']
    assert not placeable(empty_board(), shape, ox, oy)


def test_placeable_rejects_filled_cells():
    board = as_board(make_board(filled=[(3, 4)]))
    assert not placeable(board, PIECES_DATA['SQ'], 2, 3)
    assert placeable(board, PIECES_DATA['SQ'], 4, 4)


def test_empty_shape_is_placeable_anywhere():
    assert placeable(as_board(make_board(fill_all=True)), (), -5, 20)


def test_full_board_accepts_nothing():
    board = as_board(make_board(fill_all=True))
    for shape in PIECES_DATA.values():
        assert not any(placeable(board, shape, ox, oy) for ox, oy in origins(shape))


def test_origins_follow_bounding_box():
    assert len(list(origins(PIECES_DATA['1']))) == 64
    assert len(list(origins(PIECES_DATA['SQ']))) == 49
    assert len(list(origins(PIECES_DATA['5H']))) == 4 * 8
    assert list(origins(())) == []
    assert list(origins(PIECES_DATA['SQ']))[:2] == [(0, 0), (1, 0)]


def test_filling_a_row_reports_it(row0_missing_last):
    board = as_board(row0_missing_last)
    outcome = apply_placement(board, ((0, 0),), 7, 0)
    assert outcome.full_rows == [0]
    assert outcome.full_cols == []
    assert outcome.cleared == 1
    assert count_empty(outcome.board) == 64


def test_detect_only_keeps_the_line(row0_missing_last):
    board = as_board(row0_missing_last)
    outcome = apply_placement(board, ((0, 0),), 7, 0, clear=False)
    assert outcome.full_rows == [0]
    assert outcome.cleared == 1
    assert outcome.board[0].all()
    assert count_empty(outcome.board) == 56


def test_crossing_lines_count_once_each(full_but_corner):
    outcome = apply_placement(as_board(full_but_corner), ((0, 0),), 0, 0)
    assert outcome.full_rows == list(range(8))
    assert outcome.full_cols == list(range(8))
    assert outcome.cleared == 16
    assert count_empty(outcome.board) == 64


def test_row_and_column_together():
    cells = [(x, 3) for x in range(8) if x != 5] + [(5, y) for y in range(8) if y != 3]
    outcome = apply_placement(as_board(make_board(filled=cells)), ((0, 0),), 5, 3)
    assert outcome.full_rows == [3]
    assert outcome.full_cols == [5]
    assert outcome.cleared == 2
    assert count_empty(outcome.board) == 64


def test_placement_copies_the_board(row0_missing_last):
    board = as_board(row0_missing_last)
    before = board.copy()
    outcome = apply_placement(board, PIECES_DATA['SQ'], 2, 2)
    np.testing.assert_array_equal(board, before)
    assert outcome.board is not board
    assert not outcome.board.flags.writeable
    assert outcome.board[2, 2] == 1 and board[2, 2] == 0


def test_clear_lines_leaves_caller_array_writable():
    rows = np.zeros((8, 8), dtype=np.int8)
    outcome = clear_lines(rows)
    assert outcome.cleared == 0
    assert rows.flags.writeable
    rows[0, 0] = 1


def test_board_key_depends_on_contents():
    a = as_board(make_board(filled=[(1, 1)]))
    b = as_board(make_board(filled=[(1, 1)]))
    c = as_board(make_board(filled=[(1, 2)]))
    assert board_key(a) == board_key(b)
    assert board_key(a) != board_key(c)
