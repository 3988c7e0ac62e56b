"""Distance estimates for 4-neighbour unit-cost grids."""

from __future__ import annotations

from ..core.grid import Cell


def manhattan(a: Cell, b: Cell) -> int:
    """Return the Manhattan distance between ``a`` and ``b``.

    Admissible and consistent for cardinal moves that each cost 1.
    """

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


__all__ = ["manhattan"]
