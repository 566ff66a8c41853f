"""
Solve results and the comparator that ranks them
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, List, Optional, Tuple

import numpy as np

from game.board import apply_placement, count_empty
from game.geometry import Shape


@dataclass(frozen=True)
class PlacementStep:
    """One committed placement"""
    piece: int
    ox: int
    oy: int
    shape: Shape
    full_rows: Tuple[int, ...] = ()
    full_cols: Tuple[int, ...] = ()

    @property
    def cleared(self) -> int:
        return len(self.full_rows) + len(self.full_cols)

    @property
    def shape_id(self) -> int:
        return self.piece + 1

    def to_dict(self) -> Dict:
        return {
            "shapeId": self.shape_id,
            "piece": self.piece,
            "ox": self.ox,
            "oy": self.oy,
            "shape": [list(p) for p in self.shape],
            "fullRows": list(self.full_rows),
            "fullCols": list(self.full_cols),
            "cleared": self.cleared,
        }


@dataclass(frozen=True)
class SolveResult:
    steps: Tuple[PlacementStep, ...]
    total_cleared: int
    board: np.ndarray = field(compare=False)
    dead: bool = False

    @cached_property
    def empty_cells(self) -> int:
        return count_empty(self.board)

    def prepend(self, step: PlacementStep) -> "SolveResult":
        """New result with step played before this continuation"""
        return SolveResult(
            steps=(step,) + self.steps,
            total_cleared=self.total_cleared + step.cleared,
            board=self.board,
            dead=self.dead,
        )

    def to_dict(self) -> Dict:
        return {
            "steps": [s.to_dict() for s in self.steps],
            "totalCleared": self.total_cleared,
            "board": self.board.tolist(),
            "dead": self.dead,
        }


def better(a: Optional[SolveResult], b: Optional[SolveResult]) -> bool:
    """
    True if a is strictly preferred over b.

    Order: more cleared lines, then more empty cells on the final board, then
    alive over dead, then fewer steps. A missing result loses to any result.
    """
    if a is None:
        return False
    if b is None:
        return True
    if a.total_cleared != b.total_cleared:
        return a.total_cleared > b.total_cleared
    ea, eb = a.empty_cells, b.empty_cells
    if ea != eb:
        return ea > eb
    if a.dead != b.dead:
        return not a.dead
    return len(a.steps) < len(b.steps)


def first_step_only(result: SolveResult, start_board: np.ndarray,
                    clear: bool = True) -> SolveResult:
    """
    Cut a plan down to its first placement, replayed on start_board.

    dead is only carried over when the plan has no step at all; it says
    nothing about whether later pieces will fit after this move.
    """
    if not result.steps:
        return SolveResult(steps=(), total_cleared=0, board=start_board, dead=result.dead)
    step = result.steps[0]
    outcome = apply_placement(start_board, step.shape, step.ox, step.oy, clear=clear)
    return SolveResult(steps=(step,), total_cleared=outcome.cleared, board=outcome.board)


def summarize(result: SolveResult) -> List[str]:
    """Human readable lines describing a plan"""
    lines = []
    for i, step in enumerate(result.steps):
        clears = ", ".join([f"R{r}" for r in step.full_rows] + [f"C{c}" for c in step.full_cols])
        line = f"  {i + 1}. piece {step.shape_id} at ({step.ox}, {step.oy})"
        if clears:
            line += f"  clears {clears}"
        lines.append(line)
    lines.append(f"Total cleared: {result.total_cleared}  Empty cells: {result.empty_cells}"
                 + ("  [DEAD]" if result.dead else ""))
    return lines
