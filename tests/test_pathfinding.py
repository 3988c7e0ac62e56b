"""A* results checked against a breadth-first search baseline."""

import random
from collections import deque

import pytest

from gridpath.core.errors import InvalidEndpoints
from gridpath.core.grid import Grid
from gridpath.search.heuristic import manhattan
from gridpath.search.pathfinding import a_star


def _bfs_length(grid, start, goal):
    dist = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            return dist[cell]
        for nb in grid.neighbors(cell):
            if grid.is_traversable(nb) and nb not in dist:
                dist[nb] = dist[cell] + 1
                queue.append(nb)
    return None


def _random_grid(rng, size, density):
    grid = Grid(size)
    free = []
    for cell in grid.cells():
        if rng.random() < density:
            grid.set_blocked(cell)
        else:
            free.append(cell)
    return grid, free


@pytest.mark.parametrize("seed", range(40))
def test_path_length_matches_bfs(seed):
    rng = random.Random(seed)
    grid, free = _random_grid(rng, size=rng.randint(2, 8), density=0.3)
    if not free:
        pytest.skip("every cell blocked")
    start, goal = rng.choice(free), rng.choice(free)

    path = a_star(grid, start, goal)
    expected = _bfs_length(grid, start, goal)

    if expected is None:
        assert path == []
    else:
        assert len(path) - 1 == expected
        assert path[0] == start and path[-1] == goal
        assert all(grid.is_traversable(c) for c in path)
        assert all(manhattan(a, b) == 1 for a, b in zip(path, path[1:]))


def test_a_star_uses_grid_markers():
    grid = Grid(5)
    grid.set_start((0, 0))
    grid.set_goal((4, 4))
    assert len(a_star(grid)) == 9


def test_a_star_same_start_goal():
    grid = Grid(3)
    assert a_star(grid, (1, 2), (1, 2)) == [(1, 2)]


def test_a_star_with_obstacle():
    grid = Grid(5)
    grid.set_blocked((1, 0))
    path = a_star(grid, (0, 0), (2, 0))
    assert path[0] == (0, 0) and path[-1] == (2, 0)
    assert (1, 0) not in path
    assert len(path) == 5


def test_a_star_missing_endpoints():
    with pytest.raises(InvalidEndpoints):
        a_star(Grid(3))
