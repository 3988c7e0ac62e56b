"""Resumable A* search over a :class:`~gridpath.core.grid.Grid`.

The engine is an explicit state machine::

    Idle -> Running -> {Succeeded, Failed, Cancelled}

``step()`` pops exactly one frontier entry and returns control to the
caller, so whoever owns the main loop decides when the next step runs.
``solve()`` is the same loop without yielding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..core.errors import (
    InvalidEndpoints,
    NoPathRecorded,
    SearchInProgress,
    SearchNotRunning,
)
from ..core.grid import Cell, Grid
from ..utils.observer import log_event
from .frontier import Frontier, SearchNode
from .heuristic import manhattan
from .reconstruct import reconstruct_path

logger = logging.getLogger(__name__)

_UNREACHED = -1


class EngineState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"


TERMINAL_STATES = frozenset(
    {EngineState.SUCCEEDED, EngineState.FAILED, EngineState.CANCELLED}
)


class StepOutcome(Enum):
    EXPANDED = "expanded"   # a cell was closed and its neighbours relaxed
    SKIPPED = "skipped"     # stale frontier entry discarded; call step() again
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class StepResult:
    """What a single :meth:`SearchEngine.step` did."""

    outcome: StepOutcome
    current: Optional[Cell] = None
    opened: List[Cell] = field(default_factory=list)


class SearchEngine:
    """A* with lazy deletion and per-cell arena tables.

    Best-known ``g`` costs, closed flags and predecessors live in ``N×N``
    tables indexed by coordinate and are dropped when a search is cancelled.
    """

    def __init__(self, event_log: List[Dict[str, Any]] | None = None) -> None:
        self.state: EngineState = EngineState.IDLE
        self.grid: Grid | None = None
        self.start: Cell | None = None
        self.goal: Cell | None = None
        self.event_log = event_log

        self._frontier = Frontier()
        self._g: List[List[int]] | None = None
        self._closed: List[List[bool]] | None = None
        self._parent: List[List[Optional[Cell]]] | None = None

        self.popped = 0
        self.expanded = 0
        self.skipped = 0
        self._path_len: int | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def begin(self, grid: Grid, start: Cell | None = None, goal: Cell | None = None) -> None:
        """Start a fresh search on ``grid``.

        ``start``/``goal`` default to the grid's own markers.
        """

        if self.state is EngineState.RUNNING:
            raise SearchInProgress("a search is already running")
        if grid.search_active:
            raise SearchInProgress("another search is running on this grid")

        start = grid.start if start is None else start
        goal = grid.goal if goal is None else goal
        for name, cell in (("start", start), ("goal", goal)):
            if cell is None:
                raise InvalidEndpoints(f"{name} is not set")
            if not grid.in_bounds(cell):
                raise InvalidEndpoints(f"{name} {cell} is out of bounds")
            if not grid.is_traversable(cell):
                raise InvalidEndpoints(f"{name} {cell} is blocked")

        n = grid.size
        self.grid = grid
        self.start = start
        self.goal = goal
        grid.reset_annotations()
        self._frontier.clear()
        self._g = [[_UNREACHED] * n for _ in range(n)]
        self._closed = [[False] * n for _ in range(n)]
        self._parent = [[None] * n for _ in range(n)]
        self.popped = self.expanded = self.skipped = 0
        self._path_len = None

        sx, sy = start
        self._g[sy][sx] = 0
        self._frontier.push(SearchNode(start, 0, manhattan(start, goal)))

        grid.search_active = True
        self.state = EngineState.RUNNING
        logger.info("Search started: %s -> %s on %dx%d grid", start, goal, n, n)
        log_event("search_started", {"start": start, "goal": goal}, self.event_log)

    def step(self) -> StepResult:
        """Process one frontier entry."""

        self._require_running("step")
        if self._frontier.is_empty():
            self._finish(EngineState.FAILED)
            return StepResult(StepOutcome.FAILED)

        node = self._frontier.pop_min()
        x, y = node.cell
        if self._closed[y][x]:
            self.skipped += 1
            return StepResult(StepOutcome.SKIPPED, current=node.cell)

        self._closed[y][x] = True
        self._parent[y][x] = node.predecessor
        self.popped += 1
        if node.cell != self.start and node.cell != self.goal:
            self.grid.mark_visited(node.cell)
        log_event("cell_closed", {"cell": node.cell, "g": node.g_cost}, self.event_log)

        if node.cell == self.goal:
            path = self._build_path()
            for cell in path[1:-1]:
                self.grid.mark_path(cell)
            self._path_len = len(path) - 1
            self._finish(EngineState.SUCCEEDED)
            return StepResult(StepOutcome.SUCCEEDED, current=node.cell)

        opened: List[Cell] = []
        tentative = node.g_cost + 1
        for nb in self.grid.neighbors(node.cell):
            nx, ny = nb
            if not self.grid.is_traversable(nb) or self._closed[ny][nx]:
                continue
            best = self._g[ny][nx]
            if best == _UNREACHED or tentative < best:
                self._g[ny][nx] = tentative
                self._frontier.push(
                    SearchNode(nb, tentative, tentative + manhattan(nb, self.goal), node.cell)
                )
                opened.append(nb)

        self.expanded += 1
        logger.debug("Expanded %s (g=%d), opened %s", node.cell, node.g_cost, opened)
        return StepResult(StepOutcome.EXPANDED, current=node.cell, opened=opened)

    def advance(self) -> StepResult:
        """Step past stale entries until a cell is closed or the search ends."""

        result = self.step()
        while result.outcome is StepOutcome.SKIPPED:
            result = self.step()
        return result

    def solve(self) -> EngineState:
        """Step until the search reaches a terminal state and return it."""

        self._require_running("solve")
        while self.state is EngineState.RUNNING:
            self.step()
        return self.state

    def cancel(self) -> None:
        self._require_running("cancel")
        self._finish(EngineState.CANCELLED)

    def reset(self) -> None:
        """Return a finished engine to ``Idle`` and forget its results."""

        if self.state is EngineState.RUNNING:
            raise SearchInProgress("cancel the running search before resetting")
        self._release()
        self._parent = None
        self._path_len = None
        self.state = EngineState.IDLE

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def current_path(self) -> List[Cell]:
        """Return the route from start to goal, both included."""

        if self.state is not EngineState.SUCCEEDED:
            raise NoPathRecorded(f"no path recorded in state {self.state.value}")
        return self._build_path()

    def _build_path(self) -> List[Cell]:
        parent = self._parent

        def predecessor_of(cell: Cell) -> Optional[Cell]:
            return parent[cell[1]][cell[0]]

        return reconstruct_path(self.goal, predecessor_of, self.grid.size ** 2)

    def stats(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "popped": self.popped,
            "expanded": self.expanded,
            "skipped": self.skipped,
            "frontier_size": len(self._frontier),
            "closed_count": self.popped,
            "path_len": self._path_len,
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _require_running(self, action: str) -> None:
        if self.state is not EngineState.RUNNING:
            raise SearchNotRunning(f"cannot {action} in state {self.state.value}")

    def _release(self) -> None:
        self._frontier.clear()
        self._g = None
        self._closed = None
        if self.grid is not None:
            self.grid.search_active = False

    def _finish(self, state: EngineState) -> None:
        closed = self.popped
        self._release()
        if state is not EngineState.SUCCEEDED:
            self._parent = None
        self.state = state
        logger.info(
            "Search %s after closing %d cells (%d stale entries skipped)",
            state.value,
            closed,
            self.skipped,
        )
        data: Dict[str, Any] = {"closed": closed}
        if self._path_len is not None:
            data["path_len"] = self._path_len
        log_event(f"search_{state.value}", data, self.event_log)


__all__ = [
    "EngineState",
    "TERMINAL_STATES",
    "StepOutcome",
    "StepResult",
    "SearchEngine",
]
