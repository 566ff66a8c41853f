"""
Greedy Solver for Block Blast
Places pieces in input order, each at its best immediate spot
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from game.board import LineClear, apply_placement, as_board, count_empty, origins, placeable
from game.geometry import Offset, Shape, generate_variants

from .config import SolverConfig
from .result import PlacementStep, SolveResult


def best_placement(board: np.ndarray, piece: int, variants: Sequence[Shape],
                   config: SolverConfig) -> Optional[Tuple[PlacementStep, LineClear]]:
    """
    Highest scoring legal placement of one piece, or None if it doesn't fit.

    Score = cleared lines * clear_weight + empty cells after the placement.
    The first placement found wins ties.
    """
    best = None
    best_score = -1

    for shape in variants:
        for ox, oy in origins(shape):
            if not placeable(board, shape, ox, oy):
                continue
            outcome = apply_placement(board, shape, ox, oy, clear=config.clear_filled_lines)
            score = outcome.cleared * config.clear_weight + count_empty(outcome.board)
            if score > best_score:
                best_score = score
                step = PlacementStep(piece, ox, oy, shape,
                                     tuple(outcome.full_rows), tuple(outcome.full_cols))
                best = (step, outcome)

    return best


def fast_solve(board: np.ndarray, shapes: Sequence[Sequence[Offset]], allow_rotation: bool,
               config: SolverConfig = None) -> SolveResult:
    """Greedy pass over pieces 0, 1, 2; pieces that don't fit are skipped"""
    config = config or SolverConfig()
    result = SolveResult(steps=(), total_cleared=0, board=as_board(board))

    for piece, shape in enumerate(shapes):
        variants = generate_variants(shape, allow_rotation)
        found = best_placement(result.board, piece, variants, config)
        if found is None:
            continue
        step, outcome = found
        result = SolveResult(
            steps=result.steps + (step,),
            total_cleared=result.total_cleared + outcome.cleared,
            board=outcome.board,
        )

    return result
