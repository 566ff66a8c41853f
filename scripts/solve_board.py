import argparse
import json
import random
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from game.board import empty_board
from game.pieces import get_shape, random_board
from render.renderer import render_ansi
from render.replay import render_plan
from solver.config import SolverConfig
from solver.handler import NumpyEncoder, SOLVERS, SolveRequest, dispatch, now_ms
from solver.result import summarize


def build_request(args) -> dict:
    if args.request:
        with open(args.request, 'r') as f:
            return json.load(f)

    if args.board:
        with open(args.board, 'r') as f:
            board = json.load(f)
    elif args.fill > 0:
        board = random_board(args.fill, random.Random(args.seed)).tolist()
    else:
        board = empty_board().tolist()

    return {
        "type": args.type,
        "board": board,
        "shapes": [[list(p) for p in get_shape(pid)] for pid in args.pieces],
        "allowRot": bool(args.allow_rot),
        "t0": now_ms(),
    }


def main():
    parser = argparse.ArgumentParser(description='Solve one Block Blast turn')
    parser.add_argument('--request', type=str, default=None, help='Path to request JSON')
    parser.add_argument('--board', type=str, default=None, help='Path to 8x8 board JSON')
    parser.add_argument('--fill', type=float, default=0.0, help='Random board fill ratio')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--pieces', type=str, nargs=3, default=['SQ', 'L_1', '3H'],
                        help='Three piece IDs ("-" for an empty slot)')
    parser.add_argument('--type', type=str, default='solve', choices=list(SOLVERS),
                        help='Solver to run')
    parser.add_argument('--allow_rot', type=int, default=0, help='Allow rotations (1=yes, 0=no)')
    parser.add_argument('--keep_lines', action='store_true',
                        help='Report full lines without clearing them')
    parser.add_argument('--out', type=str, default=None, help='Write response JSON here')
    parser.add_argument('--render', type=str, default=None, help='Render plan frames to this directory')
    parser.add_argument('--to_gif', type=int, default=1, help='Export GIF (1=yes, 0=no)')

    args = parser.parse_args()
    config = SolverConfig(clear_filled_lines=not args.keep_lines)

    request = build_request(args)

    print(f"\n{'='*60}")
    print(f"BLOCK BLAST - SOLVER")
    print(f"{'='*60}")
    print(f"Type: {request['type']}")
    print(f"Shapes: {request['shapes']}")
    print(f"Rotation: {bool(request.get('allowRot', False))}")
    print(f"{'='*60}\n")


    req = SolveRequest.from_dict(request)
    print(render_ansi(req.board))

    start = now_ms()
    response = dispatch(req, config)
    result = response.res

    print("\nPlan:")
    for line in summarize(result):
        print(line)
    print("\nFinal board:")
    print(render_ansi(result.board))

    print(f"\nTime: {response.t1 - start:.1f} ms")

    if args.out:
        Path(args.out).parent.mkdir(parents=True, exist_ok=True)
        with open(args.out, 'w') as f:
            json.dump(response.to_dict(), f, indent=2, cls=NumpyEncoder)
        print(f"Saved: {args.out}")

    if args.render:
        print("\nRendering frames...")
        out = render_plan(req.board, result, args.render, to_gif=bool(args.to_gif),
                          clear=config.clear_filled_lines)
        print(f"Generated {out['num_frames']} frames")
        print(f"Frames directory: {out['frames_dir']}")
        if 'gif_path' in out:
            print(f"GIF: {out['gif_path']}")

    print("\nDone!")


if __name__ == "__main__":
    main()
