"""Open-set priority queue for A*."""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from typing import List, Optional, Tuple

from ..core.grid import Cell


@dataclass(frozen=True)
class SearchNode:
    """A frontier entry.

    ``predecessor`` is the coordinate of the cell this one was reached
    from; it is looked up in the engine's per-cell tables, never followed
    as an object reference.
    """

    cell: Cell
    g_cost: int
    f_cost: int
    predecessor: Optional[Cell] = None


class Frontier:
    """Min-heap of :class:`SearchNode` keyed on ``f_cost``.

    Equal ``f_cost`` entries pop in insertion order. The same cell may be
    present several times; callers discard stale entries when popped.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, SearchNode]] = []  # (f, seq, node)
        self._seq = 0

    def push(self, node: SearchNode) -> None:
        self._seq += 1
        heappush(self._heap, (node.f_cost, self._seq, node))

    def pop_min(self) -> SearchNode:
        if not self._heap:
            raise IndexError("pop from empty frontier")
        return heappop(self._heap)[2]

    def clear(self) -> None:
        self._heap.clear()
        self._seq = 0

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["Frontier", "SearchNode"]
