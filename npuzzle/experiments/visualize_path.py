#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from typing import Tuple

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.heuristics.kinds import HeuristicKind
from npuzzle.solver import is_solvable, solve

State = Tuple[int, ...]

def draw_board(state: State, n: int, out_path: Path, title: str = ""):
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1, color="black")
        ax.plot([i,i],[0,n], linewidth=1, color="black")
    # tiles
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.5, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--heuristic", choices=[k.value for k in HeuristicKind], default="linear_conflict")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    dom = NPuzzle(args.n)
    start = dom.scramble(args.depth, args.seed)
    if not is_solvable(start, dom.GOAL):
        print("Scramble failed the solvability check.")
        return 1
    solution, expanded, _ = solve(start, dom.GOAL, args.heuristic)
    if solution is None:
        print("No path (exhausted).")
        return 1

    outdir = Path(args.outdir)
    for i, s in enumerate(solution.boards()):
        title = "start" if i == 0 else f"step {i}: {solution.moves[i - 1]}"
        draw_board(s, dom.N, outdir / f"step_{i:03d}.png", title=title)
    print(f"Saved {solution.length + 1} frames to {outdir} (expanded={expanded})")
    return 0

if __name__ == "__main__":
    sys.exit(main())
