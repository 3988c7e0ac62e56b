"""Simple configuration loader for gridpath."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Configuration values for the grid section."""

    size: int = 20
    start: Optional[Tuple[int, int]] = (0, 0)
    goal: Optional[Tuple[int, int]] = None  # defaults to the far corner
    obstacles: List[Tuple[int, int]] = field(default_factory=list)


@dataclass
class SearchConfig:
    """Pacing of incremental search."""

    steps_per_second: float = 20.0
    animate: bool = True


@dataclass
class GuiConfig:
    enabled: bool = True
    cell_size: int = 30
    caption: str = "Path Planning - A* Algorithm"


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    gui: GuiConfig
    logging: LoggingConfig


def _cell(value: Any) -> Optional[Tuple[int, int]]:
    if value is None:
        return None
    x, y = value
    return int(x), int(y)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {})
    size = int(grid_data.get("size", 20))
    if size <= 0:
        raise ValueError(f"grid.size must be positive, got {size}")
    grid = GridConfig(
        size=size,
        start=_cell(grid_data.get("start", [0, 0])),
        goal=_cell(grid_data.get("goal", [size - 1, size - 1])),
        obstacles=[_cell(c) for c in grid_data.get("obstacles") or []],
    )

    search_data = data.get("search", {})
    search = SearchConfig(
        steps_per_second=float(search_data.get("steps_per_second", 20.0)),
        animate=bool(search_data.get("animate", True)),
    )

    gui_data = data.get("gui", {})
    gui = GuiConfig(
        enabled=bool(gui_data.get("enabled", True)),
        cell_size=int(gui_data.get("cell_size", 30)),
        caption=str(gui_data.get("caption", GuiConfig.caption)),
    )

    logging_data = data.get("logging", {})
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(grid=grid, search=search, gui=gui, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "SearchConfig",
    "GuiConfig",
    "LoggingConfig",
    "load_config",
]
