from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union
import math
import random

from npuzzle.heuristics.hamming import hamming
from npuzzle.heuristics.linear_conflict import linear_conflict
from npuzzle.heuristics.manhattan import manhattan

State = Tuple[int, ...]
Grid = Tuple[Tuple[int, ...], ...]
Board = Union[State, Sequence[Sequence[int]]]

# Blank displacement per move symbol, in expansion order
MOVES: Tuple[Tuple[str, int, int], ...] = (
    ("U", -1, 0),
    ("D", 1, 0),
    ("L", 0, -1),
    ("R", 0, 1),
)
REVERSE = {"U": "D", "D": "U", "L": "R", "R": "L"}


def to_state(board: Board) -> State:
    """Flatten a board (rows or flat sequence) into a row-major tuple.

    Raises ValueError unless the cells form a permutation of 0..n*n-1 on a
    square grid.
    """
    cells: List[int] = []
    for x in board:
        if isinstance(x, (list, tuple)):
            cells.extend(int(v) for v in x)
        else:
            cells.append(int(x))
    n = math.isqrt(len(cells))
    if n < 2 or n * n != len(cells):
        raise ValueError(f"board with {len(cells)} cells is not a square of side >= 2")
    if sorted(cells) != list(range(n * n)):
        raise ValueError(f"board is not a permutation of 0..{n * n - 1}")
    return tuple(cells)


def side(s: State) -> int:
    return math.isqrt(len(s))


def to_grid(s: State) -> Grid:
    n = side(s)
    return tuple(tuple(s[r * n:(r + 1) * n]) for r in range(n))


# ---------- Goal ----------
def _spiral_cells(n: int) -> Iterable[Tuple[int, int]]:
    top, bottom, left, right = 0, n - 1, 0, n - 1
    while top <= bottom and left <= right:
        for c in range(left, right + 1):
            yield top, c
        top += 1
        for r in range(top, bottom + 1):
            yield r, right
        right -= 1
        if top <= bottom:
            for c in range(right, left - 1, -1):
                yield bottom, c
            bottom -= 1
        if left <= right:
            for r in range(bottom, top - 1, -1):
                yield r, left
            left += 1


def build_goal(n: int) -> State:
    """Clockwise spiral 1..n*n-1 from the top-left, blank at (n//2, n//2).

    The spiral skips the center cell so every tile appears exactly once,
    for even sizes as well as odd ones.
    """
    assert n >= 2
    center = (n // 2, n // 2)
    cells = [0] * (n * n)
    num = 1
    for r, c in _spiral_cells(n):
        if (r, c) == center:
            continue
        cells[r * n + c] = num
        num += 1
    return tuple(cells)


def goal_positions(goal: State) -> Dict[int, Tuple[int, int]]:
    """Tile -> (row, col) in the goal; the blank is left out."""
    n = side(goal)
    return {t: divmod(i, n) for i, t in enumerate(goal) if t != 0}


# ---------- Solvability ----------
def count_inversions(arr: Sequence[int]) -> int:
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def is_solvable(s: State, goal: State) -> bool:
    """Parity test of `s` against an arbitrary goal of the same size.

    Tiles are re-ranked by their order in the goal, so the goal itself has
    zero inversions.
       - N odd: inversions must be even
       - N even: (inversions + blank_row_from_bottom) must share parity with
         the goal's blank_row_from_bottom (ODD when the goal blank is in the
         bottom row)
    """
    if len(s) != len(goal):
        raise ValueError("start and goal boards differ in size")
    n = side(s)
    rank = {t: i for i, t in enumerate(t for t in goal if t != 0)}
    inv = count_inversions([rank[t] for t in s if t != 0])
    if n % 2 == 1:
        return (inv % 2) == 0
    blank_row_from_bottom = n - s.index(0) // n  # 1-based from bottom
    goal_row_from_bottom = n - goal.index(0) // n
    return ((inv + blank_row_from_bottom) % 2) == (goal_row_from_bottom % 2)


class NPuzzle:
    """N×N sliding-tile puzzle with the spiral goal (0 is the blank)."""
    def __init__(self, n: int):
        assert n >= 2
        self.N = n
        self.size = n * n
        self.GOAL: State = build_goal(n)
        self.goal_pos = goal_positions(self.GOAL)
        # Precompute (symbol, target index) blank moves per cell
        self._nei: Dict[int, Tuple[Tuple[str, int], ...]] = {}
        for i in range(self.size):
            r, c = divmod(i, n)
            moves = []
            for sym, dr, dc in MOVES:
                nr, nc = r + dr, c + dc
                if 0 <= nr < n and 0 <= nc < n:
                    moves.append((sym, nr * n + nc))
            self._nei[i] = tuple(moves)

    # ---------- Core dynamics ----------
    def neighbors(self, s: State) -> List[Tuple[State, int]]:
        """Return list of (next_state, cost). Unit edge costs."""
        z = s.index(0)
        out: List[Tuple[State, int]] = []
        for _, j in self._nei[z]:
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            out.append((tuple(lst), 1))
        return out

    def is_solvable(self, s: State) -> bool:
        return is_solvable(s, self.GOAL)

    # ---------- Instance generation ----------
    def scramble(self, depth: int, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None) -> State:
        """Random walk of `depth` blank slides from GOAL, no immediate backtrack."""
        rng = rng or random.Random(seed)
        s = self.GOAL
        last = None
        for _ in range(depth):
            z = s.index(0)
            cand = [m for m in self._nei[z] if m[0] != REVERSE.get(last)]
            sym, j = rng.choice(cand)
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            last = sym
            s = tuple(lst)
        return s

    # ---------- Heuristics ----------
    def manhattan(self, s: State) -> int:
        return manhattan(s, self.N, self.goal_pos)

    def linear_conflict(self, s: State) -> int:
        return linear_conflict(s, self.N, self.goal_pos)

    def hamming(self, s: State) -> int:
        return hamming(s, self.GOAL)
