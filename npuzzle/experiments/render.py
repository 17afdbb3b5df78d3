from typing import Tuple

from npuzzle.domains.puzzlen import side
from npuzzle.search.node import SolutionPath

State = Tuple[int, ...]

RULE = "=" * 40


def format_board(s: State) -> str:
    n = side(s)
    w = len(str(n * n - 1))
    rows = []
    for r in range(n):
        rows.append(" ".join(f"{t:>{w}}" for t in s[r * n:(r + 1) * n]))
    return "\n".join(rows) + "\n"


def print_board(s: State) -> None:
    print(format_board(s))


def print_results(solution: SolutionPath, expanded: int, peak_memory: int, heuristic_name: str) -> None:
    print(RULE)
    print("           SOLUTION FOUND!")
    print(RULE)
    print(f"Heuristic used: {heuristic_name}")
    print(f"Total states opened (time complexity): {expanded}")
    print(f"Max states in memory (space complexity): {peak_memory}")
    print(f"Solution length: {solution.length} moves")
    print(f"Move sequence: {solution.moves}")
    print(RULE + "\n")


def print_solution_path(solution: SolutionPath) -> None:
    print("Solution path:")
    print(RULE)
    for i, s in enumerate(solution.boards()):
        print(f"Step {i}:")
        print_board(s)
