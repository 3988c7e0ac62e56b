"""Grid bootstrap and main loop."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

import pygame
from dotenv import load_dotenv

from .config import CONFIG, CONFIG_PATH, load_config
from .core.world import World
from .gui import input as gui_input
from .gui.renderer import Renderer, window_size
from .gui.window import Window
from .systems.search_system import SearchSystem
from .utils.cli.command_parser import poll_command, start_cli_thread, stop_cli_thread
from .utils.cli.commands import execute
from .utils.cli.terminal_view import get_view


log_level_str = CONFIG.logging.global_level
numeric_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=numeric_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)
logger = logging.getLogger(__name__)  # For main.py specific logs

# Apply per-module levels if defined
if CONFIG.logging.module_levels:
    for module_name, level_str in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)

FRAME_RATE = 60


def bootstrap(config_path: str | Path | None = None) -> World:
    """Build a :class:`World` from configuration.

    ``GRIDPATH_CONFIG`` (environment or ``.env``) overrides the default
    config location when ``config_path`` is not given.
    """
    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    if config_path is None:
        config_path = os.getenv("GRIDPATH_CONFIG", str(CONFIG_PATH))
    cfg = load_config(Path(config_path))

    world = World(cfg.grid.size, cfg.search.steps_per_second)
    world.config = cfg
    world.animate = cfg.search.animate
    world.gui_enabled = cfg.gui.enabled

    # Endpoints first so an obstacle listed on one of them is skipped.
    if cfg.grid.start is not None:
        world.set_start(cfg.grid.start)
    if cfg.grid.goal is not None:
        world.set_goal(cfg.grid.goal)
    for cell in cfg.grid.obstacles:
        if not world.set_blocked(cell):
            logger.warning("Obstacle %s is on an endpoint; skipped.", cell)

    logger.info(
        "[Bootstrap] %dx%d grid, %d obstacles, start=%s goal=%s, %.1f steps/s",
        cfg.grid.size,
        cfg.grid.size,
        len(cfg.grid.obstacles),
        world.grid.start,
        world.grid.goal,
        cfg.search.steps_per_second,
    )
    return world


def _make_renderer(world: World) -> Renderer:
    cfg = world.config
    cell_size = cfg.gui.cell_size
    window = Window(window_size(world.size, cell_size), cfg.gui.caption)
    return Renderer(window, cell_size)


def main() -> None:
    world = bootstrap()
    renderer = _make_renderer(world) if world.gui_enabled else None
    search_system = SearchSystem(world)
    terminal = get_view()
    cli_input_thread = start_cli_thread()
    clock = pygame.time.Clock()

    state = {"running": True, "renderer": renderer, "paused": world.paused}
    logger.info(
        "Application started. Left click: start/goal, right drag: obstacles, "
        "SPACE: animate, ENTER: solve, N: step, ESC: cancel. Type /help for CLI commands."
    )

    try:
        while state["running"]:
            if renderer is not None and world.gui_enabled:
                gui_input.handle_events(world, renderer, state)
            elif pygame.get_init():
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        state["running"] = False
            if not state["running"]: break

            cmd = poll_command()
            if cmd:
                execute(cmd.name, cmd.args, world, state)
            if not state["running"]: break

            if world.time_manager.tick_due() and search_system.update() is not None:
                terminal.render(world)

            if renderer is not None and world.gui_enabled:
                renderer.update(world)
                renderer.window.refresh()
                clock.tick(FRAME_RATE)
            else:
                time.sleep(1.0 / FRAME_RATE)

    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        logger.info("Application shutting down...")
        stop_cli_thread()
        if cli_input_thread and cli_input_thread.is_alive():
            cli_input_thread.join(timeout=0.1)
        if pygame.get_init():
            pygame.quit()


if __name__ == "__main__":
    main()
