from pathlib import Path
from typing import Dict, List

import imageio.v2 as imageio
import numpy as np
from PIL import Image

from game.board import apply_placement
from solver.result import SolveResult
from .renderer import PlanRenderer


def plan_frames(start_board: np.ndarray, result: SolveResult,
                renderer: PlanRenderer = None,
                clear: bool = True) -> List[Image.Image]:
    """
    One frame for the start position, then two per step: the board with the
    piece dropped in (full lines highlighted) and the board after clearing.
    """
    renderer = renderer or PlanRenderer()
    frames = [renderer.render_frame(start_board, title="Start",
                                    info_lines=[f"Steps: {len(result.steps)}",
                                                f"Total cleared: {result.total_cleared}"])]

    board = start_board
    for i, step in enumerate(result.steps):
        placed = {(step.ox + dx, step.oy + dy) for dx, dy in step.shape}
        filled = apply_placement(board, step.shape, step.ox, step.oy, clear=False).board
        info = [f"Piece {step.shape_id} at ({step.ox}, {step.oy})"]
        if step.cleared:
            info.append(f"Clears {step.cleared} line(s)")

        frames.append(renderer.render_frame(
            filled, title=f"Step {i + 1}", placed=placed, piece=step.piece,
            full_rows=step.full_rows, full_cols=step.full_cols, info_lines=info))

        board = apply_placement(board, step.shape, step.ox, step.oy, clear=clear).board
        if step.cleared and clear:
            frames.append(renderer.render_frame(board, title=f"Step {i + 1}",
                                                info_lines=info))

    if result.dead:
        frames.append(renderer.render_frame(board, title="No move left",
                                            info_lines=[f"Total cleared: {result.total_cleared}"]))
    return frames


def render_plan(start_board: np.ndarray,
                result: SolveResult,
                out_dir: str,
                to_gif: bool = True,
                cell_size: int = 50,
                step_duration: float = 0.8,
                clear: bool = True) -> Dict:
    out_path = Path(out_dir)
    frames_dir = out_path / "frames"

    renderer = PlanRenderer(cell_size=cell_size)
    frames = plan_frames(start_board, result, renderer, clear=clear)

    frame_paths = []
    for i, img in enumerate(frames):
        frame_path = frames_dir / f"frame_{i:03d}.png"
        renderer.save_frame(img, str(frame_path))
        frame_paths.append(str(frame_path))

    out = {
        "frames_dir": str(frames_dir),
        "num_frames": len(frame_paths),
        "frame_paths": frame_paths,
    }

    if to_gif:
        gif_path = out_path / "plan.gif"
        imageio.mimsave(str(gif_path), [np.array(img) for img in frames],
                        duration=int(step_duration * 1000), loop=0)
        out["gif_path"] = str(gif_path)

    return out
