"""Exceptions raised by the grid model and the search engine."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base class for recoverable grid and search errors."""


class OutOfBounds(PathfindingError, IndexError):
    """A coordinate lies outside ``[0, size)`` on either axis."""

    def __init__(self, cell: tuple[int, int], size: int) -> None:
        super().__init__(f"cell {cell} is outside a {size}x{size} grid")
        self.cell = cell
        self.size = size


class CellBlocked(PathfindingError):
    """Start or goal placement was attempted on a blocked cell."""

    def __init__(self, cell: tuple[int, int]) -> None:
        super().__init__(f"cell {cell} is blocked")
        self.cell = cell


class InvalidEndpoints(PathfindingError):
    """Start or goal is missing, out of bounds or blocked when a search begins."""


class SearchInProgress(PathfindingError):
    """Grid mutation attempted while a search is running."""


class SearchNotRunning(PathfindingError):
    """A running-only engine operation was called outside ``Running``."""


class NoPathRecorded(PathfindingError):
    """A path was requested before the search succeeded."""


__all__ = [
    "PathfindingError",
    "OutOfBounds",
    "CellBlocked",
    "InvalidEndpoints",
    "SearchInProgress",
    "SearchNotRunning",
    "NoPathRecorded",
]
