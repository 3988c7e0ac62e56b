import pytest

from gridpath.core.errors import CellBlocked, OutOfBounds, SearchInProgress
from gridpath.core.grid import CellState, Grid


def test_new_grid_is_free():
    grid = Grid(3)
    assert all(grid.is_traversable(c) for c in grid.cells())
    assert grid.cell_state((1, 1)) is CellState.FREE
    assert grid.start is None and grid.goal is None


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        Grid(0)


def test_set_blocked_out_of_bounds():
    grid = Grid(3)
    with pytest.raises(OutOfBounds):
        grid.set_blocked((3, 0))
    with pytest.raises(OutOfBounds):
        grid.set_blocked((0, -1))


def test_is_traversable_outside_grid_is_false():
    grid = Grid(3)
    assert not grid.is_traversable((-1, 0))
    assert not grid.is_traversable((0, 3))


def test_set_blocked_toggles_traversability():
    grid = Grid(3)
    assert grid.set_blocked((1, 2)) is True
    assert not grid.is_traversable((1, 2))
    assert grid.cell_state((1, 2)) is CellState.BLOCKED
    grid.set_blocked((1, 2), False)
    assert grid.is_traversable((1, 2))


def test_set_blocked_on_endpoints_is_ignored():
    grid = Grid(3)
    grid.set_start((0, 0))
    grid.set_goal((2, 2))
    assert grid.set_blocked((0, 0)) is False
    assert grid.set_blocked((2, 2)) is False
    assert grid.is_traversable((0, 0)) and grid.is_traversable((2, 2))


def test_endpoint_on_blocked_cell_rejected():
    grid = Grid(3)
    grid.set_blocked((1, 1))
    with pytest.raises(CellBlocked):
        grid.set_start((1, 1))
    with pytest.raises(CellBlocked):
        grid.set_goal((1, 1))
    with pytest.raises(OutOfBounds):
        grid.set_goal((5, 5))


def test_endpoints_replace_previous_marker():
    grid = Grid(4)
    grid.set_start((0, 0))
    grid.set_start((1, 0))
    assert grid.start == (1, 0)
    assert grid.cell_state((0, 0)) is CellState.FREE
    assert grid.cell_state((1, 0)) is CellState.START

    grid.set_goal((3, 3))
    grid.set_goal((1, 0))
    assert grid.goal == (1, 0)
    assert grid.start is None


def test_annotations_independent_of_traversability():
    grid = Grid(3)
    grid.mark_visited((1, 1))
    assert grid.is_traversable((1, 1))
    assert grid.cell_state((1, 1)) is CellState.VISITED

    grid.mark_visited((1, 1))
    grid.mark_path((1, 1))
    grid.mark_visited((1, 1))
    assert grid.annotation((1, 1)) is CellState.PATH

    grid.reset_annotations()
    assert grid.annotation((1, 1)) is None


def test_edits_rejected_while_search_active():
    grid = Grid(3)
    grid.search_active = True
    with pytest.raises(SearchInProgress):
        grid.set_blocked((1, 1))
    with pytest.raises(SearchInProgress):
        grid.set_start((0, 0))
    with pytest.raises(SearchInProgress):
        grid.clear_obstacles()
    with pytest.raises(SearchInProgress):
        grid.reset_annotations()


def test_neighbors_order_and_bounds():
    grid = Grid(3)
    assert grid.neighbors((1, 1)) == [(1, 0), (1, 2), (2, 1), (0, 1)]
    assert grid.neighbors((0, 0)) == [(0, 1), (1, 0)]


def test_snapshot_is_detached_copy():
    grid = Grid(3)
    grid.set_start((0, 0))
    grid.set_goal((2, 0))
    grid.set_blocked((1, 0))
    snap = grid.snapshot()
    grid.set_blocked((1, 0), False)

    assert snap.state((1, 0)) is CellState.BLOCKED
    assert snap.as_text().splitlines() == ["S#G", "...", "..."]
    with pytest.raises(AttributeError):
        snap.size = 4  # type: ignore[misc]


def test_clear_obstacles():
    grid = Grid(3)
    grid.set_blocked((0, 1))
    grid.set_blocked((2, 2))
    assert grid.blocked_cells() == [(0, 1), (2, 2)]
    grid.clear_obstacles()
    assert grid.blocked_cells() == []
