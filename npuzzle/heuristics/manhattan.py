from typing import Dict, Tuple

State = Tuple[int, ...]
GoalIndex = Dict[int, Tuple[int, int]]


def manhattan(s: State, n: int, goal_pos: GoalIndex) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
