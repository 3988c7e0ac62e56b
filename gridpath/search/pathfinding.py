"""One-shot grid pathfinding helpers."""

from __future__ import annotations

from typing import List

from ..core.grid import Cell, Grid
from .engine import EngineState, SearchEngine


def a_star(grid: Grid, start: Cell | None = None, goal: Cell | None = None) -> List[Cell]:
    """Return the shortest path from ``start`` to ``goal`` using A*.

    Endpoints default to the grid's markers. The path includes both ends;
    an empty list means the goal is unreachable. Visited and path
    annotations are left on ``grid`` for display. Raises
    :class:`~gridpath.core.errors.SearchInProgress` if another search is
    still running on ``grid``.
    """

    engine = SearchEngine()
    engine.begin(grid, start, goal)
    if engine.solve() is EngineState.SUCCEEDED:
        return engine.current_path()
    return []


__all__ = ["a_star"]
