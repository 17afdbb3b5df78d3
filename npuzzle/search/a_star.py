from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple
import heapq
import itertools
import logging
from time import perf_counter

from npuzzle.domains.puzzlen import side
from npuzzle.search.neighbors import expand
from npuzzle.search.node import NodePool, SolutionPath, root_node

State = Tuple[int, ...]

logger = logging.getLogger(__name__)

TIE_BREAKS = ("h", "g", "fifo", "lifo")


def priority_tuple(tie_break: str, f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
    if tie_break == "h":    return (f, h, ctr)
    if tie_break == "g":    return (f, -g, ctr)
    if tie_break == "fifo": return (f, 0, ctr)
    if tie_break == "lifo": return (f, 0, -ctr)
    raise ValueError(f"unknown tie_break: {tie_break!r}")


def a_star(
    start: State,
    goal: State,
    hfun: Callable[[State], int],
    tie_break: str = "h",
) -> Dict[str, object]:
    """
    A* over blank slides with instrumentation.

    Open is a heap on (f, tie key, insertion order) plus a board -> g map;
    Closed is a set of boards. A child already in Closed, or already in Open
    with an equal or better g, is dropped. A strictly cheaper rediscovery of
    an open board is pushed again and the stale heap entry is skipped when
    popped, so closed boards never reopen under a consistent hfun.
    "expanded" counts every live pop, including the goal pop. "peak_memory" is
    the largest |Open| + |Closed| seen at the top of the loop.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"unknown tie_break: {tie_break!r}")
    n = side(start)
    t0 = perf_counter()

    pool = NodePool()
    open_heap: List[Tuple[Tuple[int, int, int], int]] = []
    in_open: Dict[State, int] = {}
    closed: Set[State] = set()
    counter = itertools.count()

    root = root_node(start, n, hfun(start))
    handle = pool.add(root)
    heapq.heappush(open_heap, (priority_tuple(tie_break, root.f, 0, root.h, next(counter)), handle))
    in_open[start] = 0

    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1
    peak_closed = 0
    peak_memory = 0

    logger.debug("A* start: n=%d h0=%d tie_break=%s", n, root.h, tie_break)

    def result(solution: Optional[SolutionPath], termination: str) -> Dict[str, object]:
        return {
            "solution": solution,
            "path": list(solution.boards()) if solution is not None else None,
            "g": solution.length if solution is not None else None,
            "moves": solution.moves if solution is not None else None,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "peak_open": peak_open,
            "peak_closed": peak_closed,
            "peak_memory": peak_memory,
            "time": perf_counter() - t0,
            "algorithm": "A*",
            "tie_break": tie_break,
            "termination": termination,
        }

    while open_heap:
        peak_open = max(peak_open, len(in_open))
        peak_memory = max(peak_memory, len(in_open) + len(closed))

        _, handle = heapq.heappop(open_heap)
        node = pool[handle]
        if in_open.get(node.board) != node.g:
            continue  # stale entry superseded by a cheaper copy
        del in_open[node.board]
        expanded += 1

        if node.board == goal:
            logger.debug("A* solved: g=%d expanded=%d peak_memory=%d", node.g, expanded, peak_memory)
            return result(SolutionPath(pool, handle), "ok")

        closed.add(node.board)
        peak_closed = max(peak_closed, len(closed))

        for child in expand(node, handle, n, hfun):
            generated += 1
            if child.board in closed or in_open.get(child.board, child.g + 1) <= child.g:
                duplicates += 1
                continue
            child_handle = pool.add(child)
            pr = priority_tuple(tie_break, child.f, child.g, child.h, next(counter))
            heapq.heappush(open_heap, (pr, child_handle))
            in_open[child.board] = child.g

    # Open exhausted without finding goal
    logger.warning(
        "A* exhausted the open set without reaching the goal (expanded=%d); "
        "was the instance checked for solvability?", expanded)
    return result(None, "exhausted")
