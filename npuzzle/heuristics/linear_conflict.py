from typing import Dict, Tuple

from npuzzle.heuristics.manhattan import manhattan

State = Tuple[int, ...]
GoalIndex = Dict[int, Tuple[int, int]]


def linear_conflict(s: State, n: int, goal_pos: GoalIndex) -> int:
    """Manhattan + 2 per pair of linearly-conflicting tiles (rows & cols).

    Two tiles conflict when both sit in their goal row (or column) and
    their current order along it is the reverse of their goal order.
    """
    m = manhattan(s, n, goal_pos)
    # Row conflicts
    for r in range(n):
        row = s[r * n:(r + 1) * n]
        tiles = [t for t in row if t != 0 and goal_pos[t][0] == r]
        for i in range(len(tiles)):
            gi = goal_pos[tiles[i]][1]
            for j in range(i + 1, len(tiles)):
                gj = goal_pos[tiles[j]][1]
                if gi > gj:
                    m += 2
    # Column conflicts
    for c in range(n):
        col = [s[c + r * n] for r in range(n)]
        tiles = [t for t in col if t != 0 and goal_pos[t][1] == c]
        for i in range(len(tiles)):
            gi = goal_pos[tiles[i]][0]
            for j in range(i + 1, len(tiles)):
                gj = goal_pos[tiles[j]][0]
                if gi > gj:
                    m += 2
    return m
