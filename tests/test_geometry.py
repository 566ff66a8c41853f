import pytest

from game.geometry import (
    EMPTY_BBOX,
    bbox,
    canonical_key,
    generate_variants,
    is_empty_piece,
    normalize,
    rotate_quarter,
)
from game.pieces import PIECES_DATA

SHAPES = [
    ((0, 0),),
    ((2, 3), (3, 3), (4, 3)),
    ((-1, -2), (0, -2), (0, -1)),
    PIECES_DATA['L_3'],
    PIECES_DATA['T_E'],
    PIECES_DATA['SQ3'],
]


def test_bbox_of_empty_shape_is_degenerate():
    box = bbox(())
    assert box == EMPTY_BBOX
    assert box.max_x < box.min_x
    assert box.max_y < box.min_y


def test_bbox_covers_offsets():
    box = bbox(PIECES_DATA['L_3'])
    assert (box.min_x, box.min_y, box.max_x, box.max_y) == (0, 0, 1, 2)
    assert (box.width, box.height) == (2, 3)


@pytest.mark.parametrize("shape", SHAPES)
def test_normalize_is_idempotent(shape):
    once = normalize(shape)
    assert normalize(once) == once
    assert min(x for x, _ in once) == 0
    assert min(y for _, y in once) == 0


def test_normalize_empty_shape():
    assert normalize(()) == ()
    assert normalize([]) == ()


def test_rotate_quarter_turns_a_bar():
    assert set(rotate_quarter(PIECES_DATA['3H'])) == set(PIECES_DATA['3V'])


@pytest.mark.parametrize("shape", SHAPES)
def test_four_quarter_turns_give_back_the_shape(shape):
    rotated = shape
    for _ in range(4):
        rotated = rotate_quarter(rotated)
    assert set(rotated) == set(normalize(shape))


def test_canonical_key_ignores_order():
    assert canonical_key(((1, 0), (0, 0))) == "0,0;1,0"
    assert canonical_key(((0, 0), (1, 0))) == canonical_key(((1, 0), (0, 0)))


def test_square_has_a_single_variant():
    square = [[0, 0], [1, 0], [0, 1], [1, 1]]
    assert len(generate_variants(square, True)) == 1


@pytest.mark.parametrize("piece_id, expected", [
    ('1', 1), ('3H', 2), ('S4', 2), ('L_1', 4), ('T_N', 4), ('SQ3', 1),
])
def test_variant_counts_with_rotation(piece_id, expected):
    variants = generate_variants(PIECES_DATA[piece_id], True)
    assert len(variants) == expected
    keys = {canonical_key(v) for v in variants}
    assert len(keys) == len(variants)


@pytest.mark.parametrize("shape", SHAPES)
def test_no_rotation_gives_one_normalized_variant(shape):
    variants = generate_variants(shape, False)
    assert variants == [normalize(shape)]


def test_empty_shape_variants():
    assert generate_variants([], True) == [()]
    assert generate_variants([], False) == [()]
    assert is_empty_piece([()])
    assert is_empty_piece([])
    assert not is_empty_piece([((0, 0),)])
