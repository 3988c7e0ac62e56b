"""Translate ``pygame`` events into grid and search commands."""

from __future__ import annotations

import logging
from typing import Any, Dict

import pygame

from ..core.errors import PathfindingError
from ..search.engine import EngineState

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1
MIDDLE_BUTTON = 2
RIGHT_BUTTON = 3


def _place_endpoint(world: Any, cell: tuple[int, int], move_start: bool) -> None:
    """First click sets the start, later clicks set or move the goal."""
    grid = world.grid
    if move_start or grid.start is None:
        world.set_start(cell)
        logger.info("Start set at: %s", cell)
    else:
        world.set_goal(cell)
        logger.info("Goal set at: %s", cell)


def _paint(world: Any, cell: tuple[int, int], state: Dict[str, Any]) -> None:
    if cell == state.get("last_painted"):
        return
    state["last_painted"] = cell
    world.set_blocked(cell, not state.get("erasing", False))


def _handle_key(world: Any, key: int, state: Dict[str, Any]) -> None:
    engine = world.engine
    if key == pygame.K_SPACE:
        world.begin_search(animate=True)
    elif key == pygame.K_RETURN:
        world.solve()
    elif key == pygame.K_n:
        world.step_search()
    elif key == pygame.K_ESCAPE:
        if engine.state is EngineState.RUNNING:
            world.cancel_search()
    elif key == pygame.K_p:
        world.paused = not world.paused
        state["paused"] = world.paused
        logger.info("Search %s.", "paused" if world.paused else "resumed")
    elif key == pygame.K_c:
        world.clear()
    elif key == pygame.K_r:
        world.reset_annotations()
    elif key == pygame.K_q:
        state["running"] = False


def handle_events(world: Any, renderer: Any, state: Dict[str, Any]) -> None:
    """Process ``pygame`` events; recoverable errors are logged and dropped."""

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return
        try:
            if ev.type == pygame.MOUSEBUTTONDOWN:
                cell = renderer.screen_to_cell(ev.pos)
                if not world.grid.in_bounds(cell):
                    continue
                if ev.button in (LEFT_BUTTON, MIDDLE_BUTTON):
                    _place_endpoint(world, cell, move_start=ev.button == MIDDLE_BUTTON)
                elif ev.button == RIGHT_BUTTON:
                    state["painting"] = True
                    # A drag that starts on an obstacle erases instead.
                    state["erasing"] = world.grid.is_blocked(cell)
                    state["last_painted"] = None
                    _paint(world, cell, state)

            elif ev.type == pygame.MOUSEBUTTONUP and ev.button == RIGHT_BUTTON:
                state["painting"] = False

            elif ev.type == pygame.MOUSEMOTION and state.get("painting"):
                cell = renderer.screen_to_cell(ev.pos)
                if world.grid.in_bounds(cell):
                    _paint(world, cell, state)

            elif ev.type == pygame.KEYDOWN:
                _handle_key(world, ev.key, state)
                if not state.get("running", True):
                    return
        except PathfindingError as exc:
            logger.warning("Ignored input: %s", exc)


__all__ = ["handle_events"]
