from pathlib import Path

import pytest

from gridpath.config import load_config


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.grid.size == 20
    assert cfg.grid.start == (0, 0)
    assert cfg.grid.goal == (19, 19)
    assert cfg.grid.obstacles == []
    assert cfg.search.steps_per_second == 20.0
    assert cfg.search.animate is True
    assert cfg.gui.enabled is True
    assert cfg.logging.global_level == "INFO"


def test_values_are_parsed(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "grid:\n"
        "  size: 8\n"
        "  start: [1, 2]\n"
        "  obstacles: [[3, 3], [4, 3]]\n"
        "search:\n"
        "  steps_per_second: 5\n"
        "  animate: false\n"
        "gui:\n"
        "  enabled: false\n"
        "  cell_size: 12\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    gridpath.search.engine: WARNING\n"
    )
    cfg = load_config(path)
    assert cfg.grid.size == 8
    assert cfg.grid.start == (1, 2)
    assert cfg.grid.goal == (7, 7)
    assert cfg.grid.obstacles == [(3, 3), (4, 3)]
    assert cfg.search.steps_per_second == 5.0
    assert cfg.search.animate is False
    assert cfg.gui.enabled is False and cfg.gui.cell_size == 12
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"gridpath.search.engine": "WARNING"}


def test_non_positive_size_rejected(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("grid:\n  size: 0\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_empty_file(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).grid.size == 20
