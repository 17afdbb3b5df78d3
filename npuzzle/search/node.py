from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

State = Tuple[int, ...]


@dataclass(frozen=True)
class SearchNode:
    board: State
    blank: Tuple[int, int]
    g: int
    h: int
    moves: str = ""
    parent: Optional[int] = None  # handle into the owning NodePool

    @property
    def f(self) -> int:
        return self.g + self.h


def root_node(board: State, n: int, h: int) -> SearchNode:
    return SearchNode(board=board, blank=divmod(board.index(0), n), g=0, h=h)


class NodePool:
    """Append-only arena of SearchNodes addressed by integer handle."""
    def __init__(self):
        self._nodes: List[SearchNode] = []

    def add(self, node: SearchNode) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def __getitem__(self, handle: int) -> SearchNode:
        return self._nodes[handle]

    def __len__(self) -> int:
        return len(self._nodes)

    def chain(self, handle: int) -> List[SearchNode]:
        """Nodes from the root down to `handle`."""
        out: List[SearchNode] = []
        cur: Optional[int] = handle
        while cur is not None:
            node = self._nodes[cur]
            out.append(node)
            cur = node.parent
        out.reverse()
        return out


class SolutionPath:
    """Optimal path found by a search, read back through the node pool."""
    def __init__(self, pool: NodePool, goal_handle: int):
        self._pool = pool
        self.goal_handle = goal_handle
        self.goal = pool[goal_handle]

    @property
    def length(self) -> int:
        return self.goal.g

    @property
    def moves(self) -> str:
        return self.goal.moves

    def nodes(self) -> List[SearchNode]:
        return self._pool.chain(self.goal_handle)

    def boards(self) -> Iterator[State]:
        for node in self.nodes():
            yield node.board

    def __repr__(self) -> str:
        return f"SolutionPath(length={self.length}, moves={self.moves!r})"
