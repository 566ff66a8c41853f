import random

import pytest

from game.board import GRID_SIZE
from game.geometry import normalize
from game.pieces import PIECE_IDS, PIECES_DATA, get_shape, random_board, sample_shapes


def test_catalog_shapes_are_normalized():
    for pid, shape in PIECES_DATA.items():
        assert normalize(shape) == shape, pid
        assert len(set(shape)) == len(shape), pid


def test_get_shape():
    assert get_shape('SQ') == ((0, 0), (1, 0), (0, 1), (1, 1))
    assert get_shape('-') == ()
    assert get_shape('none') == ()


def test_unknown_piece_raises():
    with pytest.raises(ValueError, match="Unknown piece ID"):
        get_shape('XYZ')


def test_sample_shapes_is_seeded():
    a = sample_shapes(3, random.Random(1))
    b = sample_shapes(3, random.Random(1))
    assert a == b
    assert len(a) == 3
    assert all(s in PIECES_DATA.values() for s in a)


def test_random_board_has_no_full_lines():
    rng = random.Random(3)
    for _ in range(20):
        board = random_board(0.9, rng)
        assert board.shape == (GRID_SIZE, GRID_SIZE)
        assert not board.all(axis=1).any()
        assert not board.all(axis=0).any()
        assert not board.flags.writeable


def test_piece_ids_cover_catalog():
    assert PIECE_IDS == list(PIECES_DATA)
