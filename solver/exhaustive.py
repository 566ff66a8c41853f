"""
Exhaustive Solver for Block Blast
Depth-first search over every piece order and placement, memoized per call
"""

from itertools import permutations
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from game.board import apply_placement, as_board, board_key, origins, placeable
from game.geometry import Offset, Shape, generate_variants, is_empty_piece

from .config import SolverConfig
from .result import PlacementStep, SolveResult, better


class ExhaustiveSolver:
    """
    Finds the best full sequence for the three pieces.

    Every call to dfs returns the best continuation from its state as a
    complete SolveResult (steps still to play, lines they clear, final
    board). Continuations are cached on (board, remaining order), so the same
    subproblem reached through a different order or placement prefix is only
    searched once. One instance serves one solve; the memo is not reused.
    """

    def __init__(self, shapes: Sequence[Sequence[Offset]], allow_rotation: bool,
                 config: SolverConfig = None):
        self.config = config or SolverConfig()
        self.variants: List[List[Shape]] = [generate_variants(s, allow_rotation) for s in shapes]
        self.memo: Dict[Tuple[bytes, Tuple[int, ...]], SolveResult] = {}
        self.stats = {"nodes": 0, "memo_hits": 0, "placements": 0}

    def solve(self, board: np.ndarray) -> SolveResult:
        best = None
        for order in permutations(range(len(self.variants))):
            res = self.dfs(board, order, 0)
            if better(res, best):
                best = res
        return best

    def dfs(self, board: np.ndarray, order: Tuple[int, ...], depth: int) -> SolveResult:
        if depth == len(order):
            return SolveResult(steps=(), total_cleared=0, board=board)

        key = (board_key(board), order[depth:])
        cached = self.memo.get(key)
        if cached is not None:
            self.stats["memo_hits"] += 1
            return cached
        self.stats["nodes"] += 1

        piece = order[depth]
        variants = self.variants[piece]
        local_best: Optional[SolveResult] = None

        if is_empty_piece(variants):
            local_best = self.dfs(board, order, depth + 1)
        else:
            for shape in variants:
                for ox, oy in origins(shape):
                    if not placeable(board, shape, ox, oy):
                        continue
                    self.stats["placements"] += 1
                    outcome = apply_placement(board, shape, ox, oy,
                                              clear=self.config.clear_filled_lines)
                    step = PlacementStep(piece, ox, oy, shape,
                                         tuple(outcome.full_rows), tuple(outcome.full_cols))
                    res = self.dfs(outcome.board, order, depth + 1).prepend(step)
                    if better(res, local_best):
                        local_best = res

        if local_best is None:
            local_best = SolveResult(steps=(), total_cleared=0, board=board, dead=True)

        self.memo[key] = local_best
        return local_best


def solve(board: np.ndarray, shapes: Sequence[Sequence[Offset]], allow_rotation: bool,
          config: SolverConfig = None) -> SolveResult:
    """Best placement sequence for the given board and pieces"""
    return ExhaustiveSolver(shapes, allow_rotation, config).solve(as_board(board))
