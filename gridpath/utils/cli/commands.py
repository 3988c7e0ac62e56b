"""Implementations of development CLI commands."""

from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from ...core.errors import PathfindingError
from ...core.grid import Cell
from ...search.engine import EngineState
from ..observer import print_timing, toggle_live_timing
from .terminal_view import get_view

logger = logging.getLogger(__name__)


def _parse_cell(args: Sequence[str], usage: str) -> Cell | None:
    if len(args) < 2:
        logger.info("Usage: %s", usage)
        return None
    try:
        return int(args[0]), int(args[1])
    except ValueError:
        logger.error("Invalid coordinates: %s", " ".join(args[:2]))
        return None


def pause(world: Any, state: Dict[str, Any]) -> None:
    world.paused = not world.paused
    state["paused"] = world.paused
    logger.info("Search stepping %s.", "paused" if world.paused else "resumed")


def step(world: Any) -> None:
    result = world.step_search()
    logger.info("Step: %s at %s", result.outcome.value, result.current)


def run(world: Any) -> None:
    world.begin_search(animate=True)
    logger.info("Search running from %s to %s.", world.grid.start, world.grid.goal)


def solve(world: Any) -> EngineState:
    final = world.solve()
    stats = world.engine.stats()
    if final is EngineState.SUCCEEDED:
        logger.info("Path found: %s steps, %s cells closed.", stats["path_len"], stats["closed_count"])
    else:
        logger.info("No path exists (%s cells closed).", stats["closed_count"])
    return final


def cancel(world: Any) -> None:
    world.cancel_search()


def block(world: Any, args: Sequence[str], blocked: bool = True) -> None:
    name = "block" if blocked else "unblock"
    cell = _parse_cell(args, f"/{name} <x> <y>")
    if cell is None:
        return
    if not world.set_blocked(cell, blocked):
        logger.info("Cell %s is an endpoint; left unchanged.", cell)


def set_endpoint(world: Any, which: str, args: Sequence[str]) -> None:
    cell = _parse_cell(args, f"/{which} <x> <y>")
    if cell is None:
        return
    if which == "start":
        world.set_start(cell)
    else:
        world.set_goal(cell)
    logger.info("%s set at: %s", which.capitalize(), cell)


def show(world: Any) -> None:
    print(world.snapshot().as_text())


def path(world: Any) -> list[Cell]:
    route = world.current_path()
    print(" -> ".join(f"({x},{y})" for x, y in route))
    return route


def status(world: Any) -> Dict[str, Any]:
    stats = world.engine.stats()
    logger.info(
        "state=%s start=%s goal=%s closed=%s frontier=%s skipped=%s path_len=%s",
        stats["state"],
        world.grid.start,
        world.grid.goal,
        stats["closed_count"],
        stats["frontier_size"],
        stats["skipped"],
        stats["path_len"],
    )
    return stats


def view(world: Any, state: Dict[str, Any]) -> None:
    terminal = get_view()
    state["view"] = terminal.toggle()
    terminal.render(world)


def timing(state: Dict[str, Any]) -> None:
    state["timing"] = toggle_live_timing()
    if state["timing"]:
        print_timing()


def gui(world: Any, state: Dict[str, Any]) -> None:
    if state.get("renderer") is None:
        logger.error("Renderer not available; start with gui.enabled to use the window.")
        return
    world.gui_enabled = not world.gui_enabled
    state["gui_enabled"] = world.gui_enabled
    logger.info("GUI %s.", "enabled" if world.gui_enabled else "disabled")


def help_command(state: Dict[str, Any]) -> None:
    help_lines = [
        "\nAvailable commands:",
        "  /help              - Show this help message.",
        "  /block <x> <y>     - Mark a cell as an obstacle.",
        "  /unblock <x> <y>   - Clear an obstacle.",
        "  /start <x> <y>     - Place the start cell.",
        "  /goal <x> <y>      - Place the goal cell.",
        "  /run               - Begin an animated search.",
        "  /step              - Close one more cell (begins a search if needed).",
        "  /solve             - Run the search to completion.",
        "  /cancel            - Cancel the running search.",
        "  /pause             - Pause or resume animated stepping.",
        "  /reset             - Clear visited/path marks.",
        "  /clear             - Remove all obstacles and marks.",
        "  /show              - Print the grid as text.",
        "  /path              - Print the found path.",
        "  /status            - Show search state and counters.",
        "  /view              - Toggle the live terminal grid view.",
        "  /timing            - Toggle per-step timing output.",
        "  /gui               - Toggle the pygame window.",
        "  /quit              - Exit the application.\n",
    ]
    for line in help_lines:
        logger.info(line)


def execute(command: str, args: list[str], world: Any, state: Dict[str, Any]) -> Any:
    """Run ``command``; grid and search errors are logged, never raised."""

    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()
    logger.debug("Executing /%s %s", cmd_lower, args)

    try:
        if cmd_lower == "help":
            help_command(state)
        elif cmd_lower in ("block", "unblock"):
            block(world, args, blocked=cmd_lower == "block")
        elif cmd_lower in ("start", "goal"):
            set_endpoint(world, cmd_lower, args)
        elif cmd_lower == "run":
            run(world)
        elif cmd_lower == "step":
            step(world)
        elif cmd_lower == "solve":
            return solve(world)
        elif cmd_lower == "cancel":
            cancel(world)
        elif cmd_lower == "pause":
            pause(world, state)
        elif cmd_lower == "reset":
            world.reset_annotations()
        elif cmd_lower == "clear":
            world.clear()
        elif cmd_lower == "show":
            show(world)
        elif cmd_lower == "path":
            return path(world)
        elif cmd_lower == "status":
            return status(world)
        elif cmd_lower == "view":
            view(world, state)
        elif cmd_lower == "timing":
            timing(state)
        elif cmd_lower == "gui":
            gui(world, state)
        elif cmd_lower == "quit":
            state["running"] = False
            logger.info("Quit command received. Shutting down...")
        else:
            logger.error("Unknown command: /%s. Type /help for available commands.", command)
    except PathfindingError as exc:
        logger.error("/%s failed: %s", cmd_lower, exc)
    return None


__all__ = [
    "execute",
    "help_command",
    "pause",
    "step",
    "run",
    "solve",
    "cancel",
    "block",
    "set_endpoint",
    "show",
    "path",
    "status",
    "view",
    "timing",
    "gui",
]
