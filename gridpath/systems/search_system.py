"""Drive a running search one expansion per tick."""

from __future__ import annotations

import logging
from typing import Any

from ..search.engine import EngineState, StepOutcome, StepResult
from ..utils import observer

logger = logging.getLogger(__name__)


class SearchSystem:
    """Advance ``world.engine`` while it is running and not paused.

    ``steps_per_tick`` expansions are performed per call to :meth:`update`;
    stale frontier entries do not count as an expansion.
    """

    def __init__(self, world: Any, steps_per_tick: int = 1) -> None:
        self.world = world
        self.steps_per_tick = steps_per_tick
        self.last_result: StepResult | None = None

    def update(self) -> StepResult | None:
        engine = self.world.engine
        if engine.state is not EngineState.RUNNING or self.world.paused:
            return None

        for _ in range(self.steps_per_tick):
            self.last_result = observer.timed(engine.advance)
            if self.last_result.outcome in (StepOutcome.SUCCEEDED, StepOutcome.FAILED):
                logger.info("Search finished: %s", engine.stats())
                break
        return self.last_result


__all__ = ["SearchSystem"]
