"""
Block Blast - Piece Catalog
Named shapes of the game, used by the CLI and the benchmark
"""

import random
from typing import Dict, List, Optional

import numpy as np

from .board import GRID_SIZE, as_board, clear_lines
from .geometry import Shape

# Pièces du jeu, une entrée par orientation
PIECES_DATA: Dict[str, Shape] = {
    # 1 bloc
    '1': ((0, 0),),

    # 2 blocs
    '2H': ((0, 0), (1, 0)),
    '2V': ((0, 0), (0, 1)),

    # 3 blocs
    '3H': ((0, 0), (1, 0), (2, 0)),
    '3V': ((0, 0), (0, 1), (0, 2)),
    'L3_1': ((0, 0), (0, 1), (1, 1)),
    'L3_2': ((0, 0), (1, 0), (0, 1)),
    'L3_3': ((0, 0), (1, 0), (1, 1)),
    'L3_4': ((1, 0), (0, 1), (1, 1)),

    # 4 blocs
    '4H': ((0, 0), (1, 0), (2, 0), (3, 0)),
    '4V': ((0, 0), (0, 1), (0, 2), (0, 3)),
    'SQ': ((0, 0), (1, 0), (0, 1), (1, 1)),
    'T_N': ((0, 0), (1, 0), (2, 0), (1, 1)),
    'T_E': ((1, 0), (0, 1), (1, 1), (1, 2)),
    'T_S': ((1, 0), (0, 1), (1, 1), (2, 1)),
    'T_W': ((0, 0), (0, 1), (1, 1), (0, 2)),
    'L_1': ((0, 0), (0, 1), (0, 2), (1, 2)),
    'L_2': ((0, 0), (1, 0), (2, 0), (0, 1)),
    'L_3': ((1, 0), (1, 1), (1, 2), (0, 2)),
    'L_4': ((2, 0), (0, 1), (1, 1), (2, 1)),
    'S4': ((1, 0), (2, 0), (0, 1), (1, 1)),
    'Z4': ((0, 0), (1, 0), (1, 1), (2, 1)),

    # 5 blocs
    '5H': ((0, 0), (1, 0), (2, 0), (3, 0), (4, 0)),
    '5V': ((0, 0), (0, 1), (0, 2), (0, 3), (0, 4)),

    # 3x3 carré
    'SQ3': tuple((x, y) for y in range(3) for x in range(3)),
}

# "-" on the command line stands for an empty slot
EMPTY_PIECE_IDS = ('-', 'none', '')

PIECE_IDS = list(PIECES_DATA.keys())


def get_shape(piece_id: str) -> Shape:
    """Retourne la forme d'une pièce par son ID"""
    if piece_id.lower() in EMPTY_PIECE_IDS:
        return ()
    if piece_id not in PIECES_DATA:
        raise ValueError(f"Unknown piece ID: {piece_id}. Available: {PIECE_IDS}")
    return PIECES_DATA[piece_id]


def sample_shapes(n: int = 3, rng: Optional[random.Random] = None) -> List[Shape]:
    rng = rng or random.Random()
    return [PIECES_DATA[pid] for pid in rng.choices(PIECE_IDS, k=n)]


def random_board(fill: float = 0.4, rng: Optional[random.Random] = None) -> np.ndarray:
    """
    Random board with roughly `fill` of its cells occupied.

    Full lines are cleared first so the board looks like a reachable game
    position.
    """
    rng = rng or random.Random()
    rows = [[1 if rng.random() < fill else 0 for _ in range(GRID_SIZE)]
            for _ in range(GRID_SIZE)]
    return clear_lines(as_board(rows)).board
