import argparse
import csv
import json
import random
import time
from pathlib import Path
from typing import Dict, List
import numpy as np

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from game.pieces import random_board, sample_shapes
from solver.config import SolverConfig
from solver.exhaustive import ExhaustiveSolver
from solver.heuristic import fast_solve


def run_trials(num_trials: int, fill: float, allow_rot: bool, seed: int,
               config: SolverConfig) -> Dict:
    rng = random.Random(seed)
    rows = []

    for trial in range(num_trials):
        board = random_board(fill, rng)
        shapes = sample_shapes(3, rng)

        t0 = time.perf_counter()
        solver = ExhaustiveSolver(shapes, allow_rot, config)
        full = solver.solve(board)
        t1 = time.perf_counter()
        fast = fast_solve(board, shapes, allow_rot, config)
        t2 = time.perf_counter()

        rows.append({
            'trial': trial,
            'exhaustive_cleared': full.total_cleared,
            'heuristic_cleared': fast.total_cleared,
            'exhaustive_dead': full.dead,
            'heuristic_steps': len(fast.steps),
            'exhaustive_ms': (t1 - t0) * 1000,
            'heuristic_ms': (t2 - t1) * 1000,
            'nodes': solver.stats['nodes'],
            'memo_hits': solver.stats['memo_hits'],
        })

        if (trial + 1) % 10 == 0:
            print(f"  Trial {trial + 1}/{num_trials}, "
                  f"Avg cleared: {np.mean([r['exhaustive_cleared'] for r in rows]):.2f} vs "
                  f"{np.mean([r['heuristic_cleared'] for r in rows]):.2f}")

    return summarize_trials(rows)


def summarize_trials(rows: List[Dict]) -> Dict:
    full = [r['exhaustive_cleared'] for r in rows]
    fast = [r['heuristic_cleared'] for r in rows]
    return {
        'trials': rows,
        'exhaustive_mean_cleared': float(np.mean(full)),
        'heuristic_mean_cleared': float(np.mean(fast)),
        'heuristic_matches': int(sum(a == b for a, b in zip(full, fast))),
        'exhaustive_dead': int(sum(r['exhaustive_dead'] for r in rows)),
        'exhaustive_mean_ms': float(np.mean([r['exhaustive_ms'] for r in rows])),
        'exhaustive_max_ms': float(np.max([r['exhaustive_ms'] for r in rows])),
        'heuristic_mean_ms': float(np.mean([r['heuristic_ms'] for r in rows])),
        'mean_memo_hits': float(np.mean([r['memo_hits'] for r in rows])),
    }


def save_plot(results: Dict, plot_path: Path):
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    rows = results['trials']
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    ax1 = axes[0]
    full = [r['exhaustive_cleared'] for r in rows]
    fast = [r['heuristic_cleared'] for r in rows]
    bins = np.arange(0, max(full + fast) + 2) - 0.5
    ax1.hist([full, fast], bins=bins, label=['exhaustive', 'heuristic'],
             color=['#3498db', '#e74c3c'])
    ax1.set_xlabel('Lines cleared')
    ax1.set_ylabel('Trials')
    ax1.set_title('Cleared lines per turn')
    ax1.legend()

    ax2 = axes[1]
    ax2.boxplot([[r['exhaustive_ms'] for r in rows], [r['heuristic_ms'] for r in rows]])
    ax2.set_xticks([1, 2], ['exhaustive', 'heuristic'])
    ax2.set_yscale('log')
    ax2.set_ylabel('Time (ms)')
    ax2.set_title('Solve time')

    plt.tight_layout()
    plt.savefig(plot_path, dpi=150)
    plt.close()


def main():
    parser = argparse.ArgumentParser(description='Compare exhaustive and heuristic solvers')
    parser.add_argument('--trials', type=int, default=50, help='Number of random turns')
    parser.add_argument('--fill', type=float, default=0.45, help='Random board fill ratio')
    parser.add_argument('--allow_rot', type=int, default=0, help='Allow rotations (1=yes, 0=no)')
    parser.add_argument('--seed', type=int, default=0, help='Random seed')
    parser.add_argument('--run_name', type=str, default='compare', help='Run name for outputs')
    parser.add_argument('--plot', type=int, default=1, help='Save plot (1=yes, 0=no)')

    args = parser.parse_args()

    print(f"\n{'='*60}")
    print(f"BLOCK BLAST - SOLVER COMPARISON")
    print(f"{'='*60}")
    print(f"Trials: {args.trials}")
    print(f"Fill: {args.fill}")
    print(f"Rotation: {bool(args.allow_rot)}")
    print(f"Run name: {args.run_name}")
    print(f"{'='*60}\n")

    out_base = Path("outputs")
    logs_dir = out_base / "logs" / args.run_name
    plots_dir = out_base / "plots" / args.run_name
    for d in [logs_dir, plots_dir]:
        d.mkdir(parents=True, exist_ok=True)

    start_time = time.time()
    results = run_trials(args.trials, args.fill, bool(args.allow_rot), args.seed, SolverConfig())
    elapsed = time.time() - start_time
    print(f"\nTotal time: {elapsed:.1f}s")

    print(f"\n{'='*60}")
    print(f"RESULTS SUMMARY")
    print(f"{'='*60}")
    print(f"{'Solver':<12} {'Cleared':>10} {'Mean ms':>10}")
    print(f"{'-'*60}")
    print(f"{'exhaustive':<12} {results['exhaustive_mean_cleared']:>10.2f} "
          f"{results['exhaustive_mean_ms']:>10.1f}")
    print(f"{'heuristic':<12} {results['heuristic_mean_cleared']:>10.2f} "
          f"{results['heuristic_mean_ms']:>10.1f}")
    print(f"Heuristic matched exhaustive: {results['heuristic_matches']}/{args.trials}")
    print(f"Dead turns: {results['exhaustive_dead']}")
    print(f"{'='*60}\n")

    csv_path = logs_dir / "compare.csv"
    with open(csv_path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=list(results['trials'][0].keys()))
        writer.writeheader()
        writer.writerows(results['trials'])
    print(f"Saved: {csv_path}")

    json_path = logs_dir / "compare_summary.json"
    with open(json_path, 'w') as f:
        json.dump({k: v for k, v in results.items() if k != 'trials'}, f, indent=2)
    print(f"Saved: {json_path}")

    if args.plot:
        plot_path = plots_dir / "compare.png"
        save_plot(results, plot_path)
        print(f"Saved: {plot_path}")

    print("\nDone!")


if __name__ == "__main__":
    main()
