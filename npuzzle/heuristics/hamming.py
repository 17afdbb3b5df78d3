from typing import Tuple

State = Tuple[int, ...]


def hamming(s: State, goal: State) -> int:
    """Number of tiles (blank excluded) not on their goal cell."""
    return sum(1 for t, g in zip(s, goal) if t != 0 and t != g)
