from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from npuzzle.domains.puzzlen import NPuzzle, is_solvable
from npuzzle.heuristics.kinds import HeuristicKind, bind
from npuzzle.search.a_star import TIE_BREAKS, a_star

State = Tuple[int, ...]

HEADER = [
    "algorithm", "heuristic", "depth", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_open", "peak_closed", "peak_memory", "tie_break",
    "termination", "solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: State

def generate_instances(dom: NPuzzle, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    """Seeded scrambles; every walk from the goal is solvable, the check guards the oracle."""
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            s = dom.scramble(d, seed)
            if not dom.is_solvable(s):
                raise RuntimeError(f"scramble seed={seed} depth={d} failed the solvability check")
            out.append(Instance(seed=seed, depth=d, state=s))
            seed += 1
    return out

def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping the permutation parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)

def run_one(state: State, goal: State, kind: HeuristicKind, tie_break: str) -> dict:
    if not is_solvable(state, goal):
        # never search an instance the oracle rejects
        return {"algorithm": "A*", "expanded": 0, "generated": 0, "duplicates": 0, "g": None,
                "time": 0.0, "tie_break": tie_break, "termination": "unsolvable"}
    return a_star(state, goal, bind(kind, goal), tie_break=tie_break)

def write_row(w, res: dict, kind: HeuristicKind, inst: Instance, solvable_flag: int):
    w.writerow([
        res.get("algorithm", ""), kind.value, inst.depth, inst.seed,
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time', 0.0):.6f}",
        res.get("peak_open", ""), res.get("peak_closed", ""), res.get("peak_memory", ""),
        res.get("tie_break", ""), res.get("termination", "ok"), solvable_flag,
    ])

def run(n: int, depths: List[int], per_depth: int, heuristics: List[HeuristicKind],
        out: Path, tie_break: str = "h", include_unsolvable: bool = False, start_seed: int = 0) -> int:
    dom = NPuzzle(n)
    insts = generate_instances(dom, depths, per_depth, start_seed)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for kind in heuristics:
                write_row(w, run_one(inst.state, dom.GOAL, kind, tie_break), kind, inst, 1)
                if include_unsolvable:
                    u = make_unsolvable_variant(inst.state)
                    write_row(w, run_one(u, dom.GOAL, kind, tie_break), kind, inst, 0)
    return len(insts)

def main(argv=None):
    ap = argparse.ArgumentParser(description="A* heuristic comparison runner (spiral-goal N-puzzle)")
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--heuristics", nargs="+", default=["manhattan", "linear_conflict", "hamming"],
                    choices=["manhattan", "linear_conflict", "hamming"])
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18, 22])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also record a parity-flipped variant per instance (rejected before search)")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--log_level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    kinds = [HeuristicKind.parse(h) for h in args.heuristics]
    count = run(args.n, args.depths, args.per_depth, kinds, args.out,
                tie_break=args.tie_break, include_unsolvable=args.include_unsolvable,
                start_seed=args.start_seed)
    print(f"Wrote {args.out} ({count} instances)")

if __name__ == "__main__":
    main()
