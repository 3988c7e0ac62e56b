"""Square grid of traversable/blocked cells with search annotations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .errors import CellBlocked, OutOfBounds, SearchInProgress

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (x, y)

# North, south, east, west. Engine expansion order depends on this.
DIRECTIONS: Tuple[Cell, ...] = ((0, -1), (0, 1), (1, 0), (-1, 0))


class CellState(Enum):
    """What a renderer should show for a cell."""

    FREE = "free"
    BLOCKED = "blocked"
    START = "start"
    GOAL = "goal"
    VISITED = "visited"
    PATH = "path"


_GLYPHS = {
    CellState.FREE: ".",
    CellState.BLOCKED: "#",
    CellState.START: "S",
    CellState.GOAL: "G",
    CellState.VISITED: "o",
    CellState.PATH: "*",
}


@dataclass(frozen=True)
class GridSnapshot:
    """Immutable copy of every cell state, safe to hand to a renderer."""

    size: int
    rows: Tuple[Tuple[CellState, ...], ...]  # [y][x]
    start: Optional[Cell] = None
    goal: Optional[Cell] = None

    def state(self, cell: Cell) -> CellState:
        x, y = cell
        return self.rows[y][x]

    def as_text(self) -> str:
        """Return the snapshot as lines of single-character glyphs."""

        return "\n".join("".join(_GLYPHS[s] for s in row) for row in self.rows)


class Grid:
    """N×N traversability layer plus an independent annotation layer.

    ``search_active`` is raised by :class:`~gridpath.search.engine.SearchEngine`
    for the duration of a search; obstacle and endpoint edits are refused
    while it is set.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"grid size must be positive, got {size}")
        self.size: int = size
        self._blocked: List[List[bool]] = [[False] * size for _ in range(size)]
        self._annotations: List[List[Optional[CellState]]] = [
            [None] * size for _ in range(size)
        ]
        self.start: Optional[Cell] = None
        self.goal: Optional[Cell] = None
        self.search_active: bool = False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def _check(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise OutOfBounds(cell, self.size)

    def is_blocked(self, cell: Cell) -> bool:
        self._check(cell)
        x, y = cell
        return self._blocked[y][x]

    def is_traversable(self, cell: Cell) -> bool:
        """Return ``True`` iff ``cell`` is in bounds and not blocked."""

        if not self.in_bounds(cell):
            return False
        x, y = cell
        return not self._blocked[y][x]

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Return in-bounds cardinal neighbours of ``cell`` in N, S, E, W order."""

        x, y = cell
        out: List[Cell] = []
        for dx, dy in DIRECTIONS:
            n = (x + dx, y + dy)
            if self.in_bounds(n):
                out.append(n)
        return out

    def annotation(self, cell: Cell) -> Optional[CellState]:
        self._check(cell)
        x, y = cell
        return self._annotations[y][x]

    def cell_state(self, cell: Cell) -> CellState:
        """Collapse both layers into the single state a renderer draws."""

        self._check(cell)
        if cell == self.start:
            return CellState.START
        if cell == self.goal:
            return CellState.GOAL
        x, y = cell
        if self._blocked[y][x]:
            return CellState.BLOCKED
        return self._annotations[y][x] or CellState.FREE

    def cells(self) -> Iterator[Cell]:
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def blocked_cells(self) -> List[Cell]:
        return [c for c in self.cells() if self._blocked[c[1]][c[0]]]

    def snapshot(self) -> GridSnapshot:
        rows = tuple(
            tuple(self.cell_state((x, y)) for x in range(self.size))
            for y in range(self.size)
        )
        return GridSnapshot(self.size, rows, self.start, self.goal)

    # ------------------------------------------------------------------
    # Traversability edits
    # ------------------------------------------------------------------
    def _ensure_idle(self, action: str) -> None:
        if self.search_active:
            raise SearchInProgress(f"cannot {action} while a search is running")

    def set_blocked(self, cell: Cell, blocked: bool = True) -> bool:
        """Mark ``cell`` blocked or free.

        Returns ``False`` without changing anything when ``cell`` is the
        current start or goal.
        """

        self._check(cell)
        self._ensure_idle("edit obstacles")
        if cell == self.start or cell == self.goal:
            logger.debug("Ignoring obstacle edit on endpoint %s", cell)
            return False
        x, y = cell
        self._blocked[y][x] = blocked
        return True

    def clear_obstacles(self) -> None:
        self._ensure_idle("edit obstacles")
        for row in self._blocked:
            row[:] = [False] * self.size

    def set_start(self, cell: Cell) -> None:
        self._place_endpoint(cell)
        if cell == self.goal:
            self.goal = None
        self.start = cell

    def set_goal(self, cell: Cell) -> None:
        self._place_endpoint(cell)
        if cell == self.start:
            self.start = None
        self.goal = cell

    def _place_endpoint(self, cell: Cell) -> None:
        self._check(cell)
        self._ensure_idle("move endpoints")
        if self.is_blocked(cell):
            raise CellBlocked(cell)

    # ------------------------------------------------------------------
    # Annotations
    # ------------------------------------------------------------------
    def reset_annotations(self) -> None:
        self._ensure_idle("reset annotations")
        for row in self._annotations:
            row[:] = [None] * self.size

    def mark_visited(self, cell: Cell) -> None:
        self._check(cell)
        x, y = cell
        if self._annotations[y][x] is None:
            self._annotations[y][x] = CellState.VISITED

    def mark_path(self, cell: Cell) -> None:
        self._check(cell)
        x, y = cell
        self._annotations[y][x] = CellState.PATH


__all__ = ["Cell", "CellState", "DIRECTIONS", "Grid", "GridSnapshot"]
