"""
Block Blast - Board Engine
Placement legality, copy-on-write placement and full line detection
"""

import numpy as np
from typing import Iterator, List, NamedTuple, Sequence, Tuple

from .geometry import Offset, bbox

GRID_SIZE = 8


class LineClear(NamedTuple):
    """Outcome of a placement: the new board and the lines it filled"""
    board: np.ndarray
    cleared: int
    full_rows: List[int]
    full_cols: List[int]


def _freeze(board: np.ndarray) -> np.ndarray:
    board.setflags(write=False)
    return board


def empty_board() -> np.ndarray:
    return _freeze(np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8))


def as_board(rows) -> np.ndarray:
    """Copy nested lists (or an array) of 0/1 into a read-only board"""
    return _freeze(np.array(rows, dtype=np.int8))


def board_key(board: np.ndarray) -> bytes:
    return board.tobytes()


def count_empty(board: np.ndarray) -> int:
    return int(np.count_nonzero(board == 0))


def placeable(board: np.ndarray, shape: Sequence[Offset], ox: int, oy: int) -> bool:
    """Check if every cell of shape, moved to (ox, oy), is on the board and empty"""
    for dx, dy in shape:
        px, py = ox + dx, oy + dy
        if px < 0 or px >= GRID_SIZE or py < 0 or py >= GRID_SIZE:
            return False
        if board[py, px] != 0:
            return False
    return True


def origins(shape: Sequence[Offset]) -> Iterator[Tuple[int, int]]:
    """Origins where the shape's bounding box fits, row by row"""
    if not shape:
        return
    box = bbox(shape)
    for oy in range(GRID_SIZE - box.max_y):
        for ox in range(GRID_SIZE - box.max_x):
            yield ox, oy


def clear_lines(board: np.ndarray, clear: bool = True) -> LineClear:
    """
    Detect full rows and columns.

    A line is full when all 8 of its cells are 1. A cell at the crossing of a
    full row and a full column counts once for each. With clear=True the full
    lines are reset to 0 in the returned board, otherwise they stay filled and
    are only reported.
    """
    full_rows = [int(i) for i in np.flatnonzero(board.all(axis=1))]
    full_cols = [int(i) for i in np.flatnonzero(board.all(axis=0))]
    cleared = len(full_rows) + len(full_cols)

    if clear and cleared:
        out = board.copy()
        out[full_rows, :] = 0
        out[:, full_cols] = 0
    else:
        out = board.view()

    return LineClear(_freeze(out), cleared, full_rows, full_cols)


def apply_placement(board: np.ndarray, shape: Sequence[Offset], ox: int, oy: int,
                    clear: bool = True) -> LineClear:
    """Place shape on a copy of board, then detect (and clear) full lines"""
    new_board = board.copy()
    for dx, dy in shape:
        new_board[oy + dy, ox + dx] = 1
    return clear_lines(new_board, clear=clear)
