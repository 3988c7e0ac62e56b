"""Runtime observability helpers."""

from __future__ import annotations

import time
from collections import deque
from typing import Any, Callable, Deque, Dict, List

# Rolling history of the last 1000 step durations in seconds
_STEP_HISTORY_LEN = 1000
_step_durations: Deque[float] = deque(maxlen=_STEP_HISTORY_LEN)

# Whether to print timing after every recorded step
_live_timing: bool = False

# Global in-memory list for logged events when no destination is supplied
_events: List[Dict[str, Any]] = []


def record_step(duration: float) -> None:
    """Append a step ``duration`` in seconds to the rolling history."""

    _step_durations.append(duration)
    if _live_timing:
        print_timing()


def average_step_time() -> float | None:
    """Return the mean recorded step duration, or ``None`` if nothing was recorded."""

    if not _step_durations:
        return None
    return sum(_step_durations) / len(_step_durations)


def print_timing() -> None:
    """Print the average step time based on recorded durations."""

    avg = average_step_time()
    if avg is None:
        print("Step time: --")
        return
    rate = 1.0 / avg if avg > 0 else float("inf")
    print(f"{avg * 1000:.3f} ms/step ({rate:.0f} steps/s)")


def toggle_live_timing() -> bool:
    """Toggle live timing output. Returns ``True`` if enabled after toggle."""

    global _live_timing
    _live_timing = not _live_timing
    return _live_timing


def timed(fn: Callable[[], Any]) -> Any:
    """Call ``fn`` and record how long it took."""

    start = time.perf_counter()
    try:
        return fn()
    finally:
        record_step(time.perf_counter() - start)


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
        # cell_closed fires once per expansion; keep the shared buffer bounded
        if len(_events) > _STEP_HISTORY_LEN:
            del _events[: len(_events) - _STEP_HISTORY_LEN]
    else:
        log.append(event)


__all__ = [
    "record_step",
    "average_step_time",
    "print_timing",
    "toggle_live_timing",
    "timed",
    "log_event",
    "_step_durations",
    "_events",
]
