from collections import deque
from time import perf_counter
from typing import Tuple, Callable, List, Optional, Set, Dict

State = Tuple[int, ...]

def bfs(start: State, goal: State,
        neighbors_fn: Callable[[State], List[Tuple[State, int]]]):
    """Uninformed breadth-first baseline; its g is the true optimum."""
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[State, Optional[State]] = {start: None}
    expanded = generated = 0
    peak = 1
    while q:
        peak = max(peak, len(q))
        s = q.popleft()
        if s == goal:
            path = []
            while s is not None:
                path.append(s); s = parent[s]
            return {"path": list(reversed(path)), "g": len(path) - 1, "expanded": expanded,
                    "generated": generated, "peak_open": peak,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        expanded += 1
        for s2, _ in neighbors_fn(s):
            generated += 1
            if s2 in parent: continue
            parent[s2] = s; q.append(s2)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "peak_open": peak,
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}
