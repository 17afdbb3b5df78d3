"""Entry points used by the CLI and experiment scripts.

    goal = build_goal(3)
    if is_solvable(start, goal):
        solution, expanded, peak_memory = solve(start, goal, "linear_conflict")

Boards may be given as rows (``[[1, 2, 3], ...]``) or as flat row-major
sequences. ``solve`` does not re-check solvability; callers gate on
``is_solvable`` first.
"""
from __future__ import annotations
import logging
from typing import Optional, Tuple, Union

from npuzzle.domains import puzzlen
from npuzzle.domains.puzzlen import Board, Grid, to_grid, to_state
from npuzzle.heuristics.kinds import HeuristicKind, bind
from npuzzle.search.a_star import a_star
from npuzzle.search.node import SolutionPath

logger = logging.getLogger(__name__)


def build_goal(size: int) -> Grid:
    return to_grid(puzzlen.build_goal(size))


def is_solvable(start: Board, goal: Board) -> bool:
    return puzzlen.is_solvable(to_state(start), to_state(goal))


def solve(
    start: Board,
    goal: Board,
    heuristic: Union[str, int, HeuristicKind] = HeuristicKind.MANHATTAN,
    tie_break: str = "h",
) -> Tuple[Optional[SolutionPath], int, int]:
    """Run A* and return (solution or None, states expanded, peak memory)."""
    s, g = to_state(start), to_state(goal)
    if len(s) != len(g):
        raise ValueError("start and goal boards differ in size")
    kind = HeuristicKind.parse(heuristic)
    res = a_star(s, g, bind(kind, g), tie_break=tie_break)
    logger.debug("%s: termination=%s expanded=%d peak_memory=%d",
                 kind.label, res["termination"], res["expanded"], res["peak_memory"])
    return res["solution"], res["expanded"], res["peak_memory"]
