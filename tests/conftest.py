import pytest

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.search.bfs import bfs


@pytest.fixture
def p8():
    return NPuzzle(3)


@pytest.fixture
def p15():
    return NPuzzle(4)


def bfs_distance(start, goal):
    res = bfs(start, goal, NPuzzle(int(len(start) ** 0.5)).neighbors)
    return res["g"]
