#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    py = sys.executable
    run(f"{py} -m npuzzle.experiments.runner --n 3 --depths 6 10 14 18 22 --per_depth 10 --include_unsolvable --out results/p8_heuristics.csv")
    run(f"{py} -m npuzzle.experiments.runner --n 4 --depths 6 10 14 18 --per_depth 5 --heuristics manhattan linear_conflict --out results/p15_heuristics.csv")
    run(f"{py} -m npuzzle.experiments.analyze results/p8_heuristics.csv --out results/p8_summary.csv")
    run(f"{py} -m npuzzle.experiments.analyze results/p15_heuristics.csv --out results/p15_summary.csv")
    run(f"{py} -m npuzzle.experiments.plot results/p8_heuristics.csv --save results/plots")
    run(f"{py} -m npuzzle.experiments.plot results/p15_heuristics.csv --save results/plots")

if __name__ == "__main__":
    main()
