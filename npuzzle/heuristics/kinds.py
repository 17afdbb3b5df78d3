from __future__ import annotations
from enum import Enum
from typing import Callable, Tuple, Union

from npuzzle.domains.puzzlen import goal_positions, side
from npuzzle.heuristics.hamming import hamming
from npuzzle.heuristics.linear_conflict import linear_conflict
from npuzzle.heuristics.manhattan import manhattan

State = Tuple[int, ...]


class HeuristicKind(Enum):
    MANHATTAN = "manhattan"
    LINEAR_CONFLICT = "linear_conflict"
    HAMMING = "hamming"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Union[str, int, "HeuristicKind"]) -> "HeuristicKind":
        """Accept a kind, its name ('linear_conflict', 'lc', ...) or the 1/2/3 code."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"unknown heuristic: {value!r}")


_LABELS = {
    HeuristicKind.MANHATTAN: "Manhattan Distance",
    HeuristicKind.LINEAR_CONFLICT: "Linear Conflict",
    HeuristicKind.HAMMING: "Hamming Distance",
}

_ALIASES = {
    "1": HeuristicKind.MANHATTAN, "m": HeuristicKind.MANHATTAN,
    "manhattan": HeuristicKind.MANHATTAN,
    "2": HeuristicKind.LINEAR_CONFLICT, "lc": HeuristicKind.LINEAR_CONFLICT,
    "linear": HeuristicKind.LINEAR_CONFLICT, "linear_conflict": HeuristicKind.LINEAR_CONFLICT,
    "3": HeuristicKind.HAMMING, "hamming": HeuristicKind.HAMMING,
}


def bind(kind: Union[str, int, HeuristicKind], goal: State) -> Callable[[State], int]:
    """Return hfun(state) for `kind`, evaluated against `goal`."""
    kind = HeuristicKind.parse(kind)
    n = side(goal)
    if kind is HeuristicKind.HAMMING:
        return lambda s: hamming(s, goal)
    goal_pos = goal_positions(goal)
    if kind is HeuristicKind.MANHATTAN:
        return lambda s: manhattan(s, n, goal_pos)
    return lambda s: linear_conflict(s, n, goal_pos)
