"""Renderer for drawing grid snapshots to a :class:`Window`."""

from __future__ import annotations

from typing import Any

from ..core.grid import Cell, CellState, GridSnapshot
from .window import Window

# Define colors for cell states
CELL_COLOR_MAP = {
    CellState.FREE: (255, 255, 255),
    CellState.BLOCKED: (0, 0, 0),
    CellState.START: (0, 255, 0),
    CellState.GOAL: (255, 255, 0),
    CellState.VISITED: (255, 0, 0),
    CellState.PATH: (0, 0, 255),
}
GRID_LINE_COLOR = (0, 0, 0)
STATUS_BAR_HEIGHT = 24
STATUS_TEXT_COLOR = (230, 230, 230)


def window_size(grid_size: int, cell_size: int) -> tuple[int, int]:
    """Pixel size of a window showing ``grid_size`` cells plus the status bar."""

    side = grid_size * cell_size
    return side, side + STATUS_BAR_HEIGHT


class Renderer:
    """Draw each cell of ``world.snapshot()`` as a filled square."""

    def __init__(self, window: Window, cell_size: int = 30) -> None:
        self.window = window
        self.cell_size = cell_size

    def screen_to_cell(self, screen_pos: tuple[int, int]) -> Cell:
        return screen_pos[0] // self.cell_size, screen_pos[1] // self.cell_size

    def draw_snapshot(self, snapshot: GridSnapshot) -> None:
        # One pixel gap between cells acts as the grid line.
        inner = max(1, self.cell_size - 1)
        for y, row in enumerate(snapshot.rows):
            for x, state in enumerate(row):
                rect = (x * self.cell_size, y * self.cell_size, inner, inner)
                self.window.draw_rect(rect, CELL_COLOR_MAP[state])

    def status_line(self, world: Any) -> str:
        stats = world.engine.stats()
        line = f"{stats['state']}  closed={stats['closed_count']}  frontier={stats['frontier_size']}"
        if stats["path_len"] is not None:
            line += f"  path={stats['path_len']}"
        if world.paused:
            line += "  [paused]"
        return line

    def update(self, world: Any) -> None:
        if self.window is None:
            return
        snapshot = world.snapshot()
        self.window.clear(GRID_LINE_COLOR)
        self.draw_snapshot(snapshot)
        self.window.draw_text(
            self.status_line(world), 4, snapshot.size * self.cell_size + 4, STATUS_TEXT_COLOR
        )


__all__ = ["Renderer", "CELL_COLOR_MAP", "window_size"]
