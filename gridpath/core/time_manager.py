"""Tick timing helpers."""

from __future__ import annotations

import time


class TimeManager:
    """Pace incremental search steps at a fixed rate."""

    def __init__(self, tick_rate: float = 20.0) -> None:
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate}")
        self.tick_rate: float = tick_rate
        self.tick_counter: int = 0
        self._last_tick: float = time.perf_counter()

    @property
    def interval(self) -> float:
        return 1.0 / self.tick_rate

    def tick_due(self) -> bool:
        """Return ``True`` and start a new tick if the interval has elapsed.

        Never blocks, so the main loop keeps polling input between ticks.
        """

        now = time.perf_counter()
        if now - self._last_tick < self.interval:
            return False
        self._last_tick = now
        self.tick_counter += 1
        return True


__all__ = ["TimeManager"]
