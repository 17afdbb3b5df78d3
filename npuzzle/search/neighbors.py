from typing import Callable, List, Tuple

from npuzzle.domains.puzzlen import MOVES
from npuzzle.search.node import SearchNode

State = Tuple[int, ...]


def expand(node: SearchNode, handle: int, n: int,
           hfun: Callable[[State], int]) -> List[SearchNode]:
    """Children reachable by one blank slide, in U/D/L/R order.

    No move is filtered out here (not even the reverse of the last one);
    duplicates are left to the open/closed membership tests.
    """
    r, c = node.blank
    z = r * n + c
    out: List[SearchNode] = []
    for sym, dr, dc in MOVES:
        nr, nc = r + dr, c + dc
        if not (0 <= nr < n and 0 <= nc < n):
            continue
        j = nr * n + nc
        lst = list(node.board)
        lst[z], lst[j] = lst[j], lst[z]
        s2 = tuple(lst)
        out.append(SearchNode(
            board=s2,
            blank=(nr, nc),
            g=node.g + 1,
            h=hfun(s2),
            moves=node.moves + sym,
            parent=handle,
        ))
    return out
