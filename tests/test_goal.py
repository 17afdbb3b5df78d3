import pytest

from npuzzle.domains.puzzlen import build_goal, goal_positions, to_grid, to_state
from npuzzle.solver import build_goal as build_goal_grid


def test_spiral_3x3():
    assert build_goal(3) == (1, 2, 3,
                             8, 0, 4,
                             7, 6, 5)


def test_spiral_4x4_skips_center():
    assert build_goal(4) == (1, 2, 3, 4,
                             12, 13, 14, 5,
                             11, 15, 0, 6,
                             10, 9, 8, 7)


def test_spiral_2x2():
    assert build_goal(2) == (1, 2,
                             3, 0)


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 7])
def test_goal_is_permutation_with_centered_blank(n):
    goal = build_goal(n)
    assert sorted(goal) == list(range(n * n))
    assert divmod(goal.index(0), n) == (n // 2, n // 2)


def test_goal_rejects_tiny_board():
    with pytest.raises(AssertionError):
        build_goal(1)


def test_goal_positions_excludes_blank():
    pos = goal_positions(build_goal(3))
    assert 0 not in pos
    assert pos[1] == (0, 0)
    assert pos[4] == (1, 2)
    assert pos[7] == (2, 0)
    assert len(pos) == 8


def test_public_goal_is_grid():
    assert build_goal_grid(3) == ((1, 2, 3), (8, 0, 4), (7, 6, 5))


def test_to_state_accepts_rows_and_flat():
    rows = [[1, 2, 3], [8, 0, 4], [7, 6, 5]]
    assert to_state(rows) == build_goal(3)
    assert to_state(build_goal(3)) == build_goal(3)
    assert to_grid(to_state(rows)) == tuple(tuple(r) for r in rows)


@pytest.mark.parametrize("bad", [
    [[1, 2], [3]],
    [[1, 2, 3], [4, 5, 6], [7, 8, 8]],
    [0],
])
def test_to_state_rejects_malformed(bad):
    with pytest.raises(ValueError):
        to_state(bad)
