"""
Block Blast - Shape Geometry
Normalization, bounding boxes and rotation variants for polyomino pieces
"""

from typing import Iterable, List, NamedTuple, Sequence, Tuple

Offset = Tuple[int, int]
Shape = Tuple[Offset, ...]


class BBox(NamedTuple):
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


EMPTY_BBOX = BBox(0, 0, -1, -1)


def as_shape(points: Iterable[Sequence[int]]) -> Shape:
    """Convert any list of [x, y] pairs into a Shape tuple"""
    return tuple((int(x), int(y)) for x, y in points)


def bbox(shape: Sequence[Offset]) -> BBox:
    """Retourne la boîte englobante; (0, 0, -1, -1) pour une forme vide"""
    if not shape:
        return EMPTY_BBOX
    xs = [x for x, y in shape]
    ys = [y for x, y in shape]
    return BBox(min(xs), min(ys), max(xs), max(ys))


def normalize(shape: Sequence[Offset]) -> Shape:
    """Translate the shape so that its minimum x and y are both 0"""
    if not shape:
        return ()
    box = bbox(shape)
    return tuple((x - box.min_x, y - box.min_y) for x, y in shape)


def rotate_quarter(shape: Sequence[Offset]) -> Shape:
    """Rotate by a quarter turn, (x, y) -> (y, -x), then renormalize"""
    return normalize([(y, -x) for x, y in shape])


def canonical_key(shape: Sequence[Offset]) -> str:
    return ";".join(f"{x},{y}" for x, y in sorted(shape))


def unique_shapes(shapes: Iterable[Shape]) -> List[Shape]:
    seen = set()
    out = []
    for shape in shapes:
        key = canonical_key(shape)
        if key not in seen:
            seen.add(key)
            out.append(shape)
    return out


def generate_variants(shape: Sequence[Offset], allow_rotation: bool) -> List[Shape]:
    """
    Build the distinct placements variants of a piece.

    Without rotation this is just the normalized shape. With rotation the
    three further quarter turns are added and duplicates (same canonical key)
    dropped, so symmetric pieces such as the 2x2 square give fewer than four.
    An empty shape always gives [()].
    """
    if not shape:
        return [()]

    variants = [normalize(shape)]
    if allow_rotation:
        for _ in range(3):
            variants.append(rotate_quarter(variants[-1]))
    return unique_shapes(variants)


def is_empty_piece(variants: Sequence[Shape]) -> bool:
    """True when a variant list stands for "no piece" (nothing to place)"""
    return len(variants) == 0 or all(len(v) == 0 for v in variants)
