"""Turn predecessor links into an ordered route."""

from __future__ import annotations

from typing import Callable, List, Optional

from ..core.grid import Cell


def reconstruct_path(
    goal: Cell,
    predecessor_of: Callable[[Cell], Optional[Cell]],
    max_steps: int,
) -> List[Cell]:
    """Return the route from the chain's root to ``goal``, root first.

    ``predecessor_of`` returns ``None`` for the start cell. Walking more
    than ``max_steps`` links means the links form a cycle.
    """

    path = [goal]
    current = goal
    for _ in range(max_steps):
        prev = predecessor_of(current)
        if prev is None:
            path.reverse()
            return path
        path.append(prev)
        current = prev
    raise RuntimeError(f"predecessor chain from {goal} exceeds {max_steps} links")


__all__ = ["reconstruct_path"]
