"""Single owner of the grid, the search engine and step pacing."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from .grid import Cell, Grid, GridSnapshot
from .time_manager import TimeManager
from ..search.engine import TERMINAL_STATES, EngineState, SearchEngine, StepResult

logger = logging.getLogger(__name__)


class World:
    """Holder passed explicitly to the GUI, CLI and step system.

    Edits go through this object so that a finished search whose results
    no longer match the grid is cleared before the grid changes.
    """

    def __init__(self, size: int, tick_rate: float = 20.0) -> None:
        self.grid = Grid(size)
        self.event_log: List[Dict[str, Any]] = []
        self.engine = SearchEngine(event_log=self.event_log)
        self.time_manager = TimeManager(tick_rate)

        # For main loop / GUI state
        self.gui_enabled: bool = False
        self.paused: bool = False
        self.animate: bool = True
        self.config: Any | None = None

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def state(self) -> EngineState:
        return self.engine.state

    # ------------------------------------------------------------------
    # Grid commands
    # ------------------------------------------------------------------
    def _invalidate_results(self) -> None:
        if self.engine.state in TERMINAL_STATES:
            self.engine.reset()
            self.grid.reset_annotations()

    def set_blocked(self, cell: Cell, blocked: bool = True) -> bool:
        if (
            not self.grid.search_active
            and self.grid.is_blocked(cell) != blocked
            and cell not in (self.grid.start, self.grid.goal)
        ):
            self._invalidate_results()
        return self.grid.set_blocked(cell, blocked)

    def set_start(self, cell: Cell) -> None:
        if not self.grid.search_active:
            self._invalidate_results()
        self.grid.set_start(cell)

    def set_goal(self, cell: Cell) -> None:
        if not self.grid.search_active:
            self._invalidate_results()
        self.grid.set_goal(cell)

    def clear(self) -> None:
        """Remove every obstacle and all search annotations."""

        self.grid.clear_obstacles()
        self._invalidate_results()
        self.grid.reset_annotations()

    def reset_annotations(self) -> None:
        """Clear visited/path marks; rejected while a search is running."""

        self._invalidate_results()
        self.grid.reset_annotations()

    # ------------------------------------------------------------------
    # Search commands
    # ------------------------------------------------------------------
    def _begin(self) -> None:
        self.engine.begin(self.grid)
        # The log covers one search: keep only the new search_started event.
        # A rejected begin raises above and leaves the log untouched.
        del self.event_log[:-1]

    def begin_search(self, animate: bool | None = None) -> EngineState:
        """Begin a search; solve it at once unless animating."""

        animate = self.animate if animate is None else animate
        self._begin()
        if not animate:
            self.engine.solve()
        return self.engine.state

    def cancel_search(self) -> None:
        self.engine.cancel()
        logger.info("Search cancelled by user.")

    def step_search(self) -> StepResult:
        """Close one more cell, starting a search first if none is running."""

        if self.engine.state is not EngineState.RUNNING:
            self._begin()
        return self.engine.advance()

    def solve(self) -> EngineState:
        if self.engine.state is not EngineState.RUNNING:
            self._begin()
        return self.engine.solve()

    # ------------------------------------------------------------------
    # Renderer queries
    # ------------------------------------------------------------------
    def snapshot(self) -> GridSnapshot:
        return self.grid.snapshot()

    def current_path(self) -> List[Cell]:
        return self.engine.current_path()


__all__ = ["World"]
