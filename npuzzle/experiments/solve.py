#!/usr/bin/env python3
"""Solve one N-puzzle from a file or a random scramble."""
import argparse
import logging
import random
import sys

from npuzzle.domains.puzzlen import NPuzzle, to_state
from npuzzle.experiments.puzzle_file import PuzzleFormatError, load_puzzle
from npuzzle.experiments.render import print_board, print_results, print_solution_path
from npuzzle.heuristics.kinds import HeuristicKind
from npuzzle.solver import is_solvable, solve

HEURISTIC_CHOICES = ["manhattan", "linear_conflict", "hamming", "1", "2", "3"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="A* solver for the N-puzzle (spiral goal, blank at center)")
    p.add_argument("-f", "--file", default=None, help="Solve puzzle from file")
    p.add_argument("-r", "--random", type=int, default=0, metavar="SIZE", help="Generate random puzzle")
    p.add_argument("--heuristic", choices=HEURISTIC_CHOICES, default="manhattan",
                   help="1=Manhattan, 2=Linear Conflict, 3=Hamming")
    p.add_argument("--moves", type=int, default=None, help="Scramble length (default size*size*10)")
    p.add_argument("--seed", type=int, default=None, help="Seed for the random scramble")
    p.add_argument("-v", "--verbose", action="store_true", help="Show solution path")
    p.add_argument("--log_level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not args.file and args.random == 0:
        ap.print_usage()
        return 1
    kind = HeuristicKind.parse(args.heuristic)

    if args.file:
        print(f"Loading puzzle from: {args.file}")
        try:
            size, rows = load_puzzle(args.file)
        except PuzzleFormatError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        start = to_state(rows)
    else:
        size = args.random
        if size < 2:
            print("Error: random puzzle size must be >= 2", file=sys.stderr)
            return 1
        print(f"Generating random {size}x{size} puzzle...")
        moves = args.moves if args.moves is not None else size * size * 10
        start = NPuzzle(size).scramble(moves, rng=random.Random(args.seed))

    goal = NPuzzle(size).GOAL
    print("\nStart state:")
    print_board(start)
    print("Goal state:")
    print_board(goal)

    print("Checking solvability...")
    if not is_solvable(start, goal):
        print("ERROR: This puzzle is UNSOLVABLE!")
        return 1
    print("Puzzle is solvable!\n")

    print(f"Solving with {kind.label}...")
    solution, expanded, peak_memory = solve(start, goal, kind)
    if solution is None:
        print("ERROR: Could not find solution!")
        return 1

    print_results(solution, expanded, peak_memory, kind.label)
    if args.verbose:
        print_solution_path(solution)
    return 0


if __name__ == "__main__":
    sys.exit(main())
