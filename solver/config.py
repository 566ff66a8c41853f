"""
Solver configuration
Defaults for line clearing and the greedy score
"""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Configuration shared by the exhaustive and heuristic solvers"""

    # Reset full rows/columns to empty after a placement. False keeps them
    # filled and only reports them (detect-only scoring).
    clear_filled_lines: bool = True

    # Heuristic score: cleared lines * clear_weight + empty cells after
    clear_weight: int = 100
