import logging

import pytest

from npuzzle.domains.puzzlen import NPuzzle, build_goal
from npuzzle.heuristics.kinds import HeuristicKind, bind
from npuzzle.search.a_star import a_star, priority_tuple
from npuzzle.solver import is_solvable, solve

from conftest import bfs_distance

KINDS = list(HeuristicKind)


def one_slide_apart(a, b):
    n = int(len(a) ** 0.5)
    diff = [i for i in range(len(a)) if a[i] != b[i]]
    if len(diff) != 2:
        return False
    i, j = diff
    if 0 not in (a[i], a[j]) or a[i] != b[j] or a[j] != b[i]:
        return False
    (ri, ci), (rj, cj) = divmod(i, n), divmod(j, n)
    return abs(ri - rj) + abs(ci - cj) == 1


def test_already_solved():
    goal = build_goal(3)
    solution, expanded, peak = solve(goal, goal)
    assert solution
    assert solution.length == 0
    assert solution.moves == ""
    assert list(solution.boards()) == [goal]
    assert expanded == 1
    assert peak == 1


def test_sample_board_against_row_major_goal():
    start = [[1, 2, 3], [4, 0, 6], [7, 5, 8]]
    goal = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    assert is_solvable(start, goal)
    for kind in KINDS:
        solution, _, _ = solve(start, goal, kind)
        assert solution.length == 2
        assert solution.moves == "DR"


@pytest.mark.parametrize("seed", range(5))
def test_optimal_against_bfs_3x3(p8, seed):
    start = p8.scramble(20, seed)
    assert is_solvable(start, p8.GOAL)
    optimum = bfs_distance(start, p8.GOAL)
    for kind in KINDS:
        solution, _, _ = solve(start, p8.GOAL, kind)
        assert solution.length == optimum


@pytest.mark.parametrize("seed", range(3))
def test_optimal_against_bfs_4x4(p15, seed):
    start = p15.scramble(12, seed)
    optimum = bfs_distance(start, p15.GOAL)
    for kind in (HeuristicKind.MANHATTAN, HeuristicKind.LINEAR_CONFLICT):
        solution, _, _ = solve(start, p15.GOAL, kind)
        assert solution.length == optimum


def test_path_is_a_chain_of_single_slides(p15):
    start = p15.scramble(30, 11)
    solution, _, _ = solve(start, p15.GOAL, "linear_conflict")
    boards = list(solution.boards())
    assert boards[0] == start
    assert boards[-1] == p15.GOAL
    assert len(boards) == solution.length + 1 == len(solution.moves) + 1
    for a, b in zip(boards, boards[1:]):
        assert one_slide_apart(a, b)
    assert [n.g for n in solution.nodes()] == list(range(solution.length + 1))


def test_heuristics_agree_on_length(p8):
    totals = {}
    for seed in range(5):
        start = p8.scramble(24, 100 + seed)
        lengths = set()
        for kind in KINDS:
            solution, expanded, peak = solve(start, p8.GOAL, kind)
            lengths.add(solution.length)
            totals[kind] = totals.get(kind, 0) + expanded
            assert peak >= expanded
        assert len(lengths) == 1
    assert totals[HeuristicKind.MANHATTAN] <= totals[HeuristicKind.HAMMING]


def test_deterministic(p8):
    start = p8.scramble(30, 5)
    first = solve(start, p8.GOAL, "manhattan")
    second = solve(start, p8.GOAL, "manhattan")
    assert first[0].moves == second[0].moves
    assert first[1:] == second[1:]


def test_exhaustion_on_unsolvable_2x2(caplog):
    dom = NPuzzle(2)
    start = (2, 1,
             3, 0)
    assert not dom.is_solvable(start)
    with caplog.at_level(logging.WARNING, logger="npuzzle.search.a_star"):
        solution, expanded, peak = solve(start, dom.GOAL, "manhattan")
    assert solution is None
    assert expanded == 12  # every reachable board popped once
    assert peak == 12  # the whole 12-board component ends up open or closed
    assert "exhausted" in caplog.text


def test_instrumentation(p8):
    start = p8.scramble(18, 3)
    res = a_star(start, p8.GOAL, bind("linear_conflict", p8.GOAL))
    assert res["termination"] == "ok"
    assert res["algorithm"] == "A*"
    assert res["path"][0] == start and res["path"][-1] == p8.GOAL
    assert res["g"] == res["solution"].length == len(res["moves"])
    assert res["peak_memory"] <= res["peak_open"] + res["peak_closed"]
    assert res["peak_closed"] == res["expanded"] - 1
    assert res["generated"] >= res["duplicates"]


@pytest.mark.parametrize("tie_break", ["g", "fifo", "lifo"])
def test_other_tie_breaks_stay_optimal(p8, tie_break):
    start = p8.scramble(20, 9)
    optimum = bfs_distance(start, p8.GOAL)
    solution, _, _ = solve(start, p8.GOAL, "manhattan", tie_break=tie_break)
    assert solution.length == optimum


def test_unknown_tie_break():
    goal = build_goal(3)
    with pytest.raises(ValueError):
        solve(goal, goal, tie_break="random")


def test_size_mismatch():
    with pytest.raises(ValueError):
        solve(build_goal(3), build_goal(4))


def test_four_move_plateau_counters(p8):
    # goal with the blank walked U, R, D, L around the top-right square
    start = (1, 3, 4,
             8, 0, 2,
             7, 6, 5)
    assert p8.manhattan(start) == 4
    solution, expanded, peak = solve(start, p8.GOAL, "manhattan")
    assert solution.moves == "RULD"
    assert expanded == 5
    # 4 boards closed, 6 still open when the goal is popped
    assert peak == 10


def test_smaller_h_wins_equal_f():
    assert priority_tuple("h", 5, 3, 1, 9) < priority_tuple("h", 5, 1, 4, 0)
    assert priority_tuple("fifo", 5, 3, 1, 9) > priority_tuple("fifo", 5, 1, 4, 0)


# 2x2 boards around the goal (1, 2, 3, 0):
#   start --D--> near --R--> goal, and start --R--> decoy --D--> beyond
TIE_START = (0, 2, 1, 3)
TIE_NEAR = (1, 2, 0, 3)
TIE_DECOY = (2, 0, 1, 3)
TIE_GOAL = (1, 2, 3, 0)
TIE_H = {TIE_START: 2, TIE_NEAR: 1, TIE_DECOY: 1, TIE_GOAL: 0}


def tie_h(s):
    return TIE_H.get(s, 4)


def test_tie_break_on_h_skips_decoy():
    # near and decoy tie on (f=2, h=1); the goal child (f=2, h=0) must go before decoy
    res = a_star(TIE_START, TIE_GOAL, tie_h, tie_break="h")
    assert res["moves"] == "DR"
    assert res["expanded"] == 3
    assert res["peak_memory"] == 4


def test_fifo_expands_decoy_first():
    res = a_star(TIE_START, TIE_GOAL, tie_h, tie_break="fifo")
    assert res["moves"] == "DR"
    assert res["expanded"] == 4
    assert res["peak_memory"] == 5
