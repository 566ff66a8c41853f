"""
Request handling for the solvers
Typed request/response around solve, fastSolve and stepSolve
"""

import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

import numpy as np

from game.board import as_board
from game.geometry import Shape, as_shape

from .config import SolverConfig
from .exhaustive import solve
from .heuristic import fast_solve
from .result import SolveResult, first_step_only


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types"""
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        return super().default(obj)


@dataclass
class SolveRequest:
    type: str
    board: np.ndarray
    shapes: List[Shape]
    allow_rot: bool = False
    t0: Any = None

    @classmethod
    def from_dict(cls, data: Dict) -> "SolveRequest":
        return cls(
            type=data["type"],
            board=as_board(data["board"]),
            shapes=[as_shape(s) for s in data["shapes"]],
            allow_rot=bool(data.get("allowRot", False)),
            t0=data.get("t0"),
        )


@dataclass
class SolveResponse:
    type: str
    res: SolveResult
    t0: Any
    t1: float

    def to_dict(self) -> Dict:
        return {
            "type": self.type,
            "res": self.res.to_dict(),
            "t0": self.t0,
            "t1": self.t1,
        }


def _step_solve(board, shapes, allow_rot, config: SolverConfig) -> SolveResult:
    board = as_board(board)
    plan = solve(board, shapes, allow_rot, config)
    return first_step_only(plan, board, clear=config.clear_filled_lines)


SOLVERS: Dict[str, Callable[..., SolveResult]] = {
    "solve": solve,
    "fastSolve": fast_solve,
    "stepSolve": _step_solve,
}


def now_ms() -> float:
    return time.perf_counter() * 1000.0


def dispatch(request: SolveRequest, config: SolverConfig = None) -> SolveResponse:
    """Run the solver named by request.type"""
    if request.type not in SOLVERS:
        raise ValueError(f"Unknown request type: {request.type}. Available: {list(SOLVERS)}")
    config = config or SolverConfig()
    res = SOLVERS[request.type](request.board, request.shapes, request.allow_rot, config)
    return SolveResponse(type=request.type, res=res, t0=request.t0, t1=now_ms())


def handle_request(data: Dict, config: SolverConfig = None) -> Dict:
    return dispatch(SolveRequest.from_dict(data), config).to_dict()


def handle_message(message: str, config: SolverConfig = None) -> str:
    """JSON in, JSON out"""
    return json.dumps(handle_request(json.loads(message), config), cls=NumpyEncoder)
