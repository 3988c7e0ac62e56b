"""ASCII terminal renderer for grid snapshots."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from ...core.grid import CellState, GridSnapshot


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_STATE_COLOURS = {
    CellState.FREE: "white",
    CellState.BLOCKED: "black",
    CellState.START: "green",
    CellState.GOAL: "yellow",
    CellState.VISITED: "red",
    CellState.PATH: "blue",
}


class TerminalView:
    """Grid viewer using ANSI colours, redrawn in place."""

    def __init__(self, stream: TextIO | None = None, colour: bool = True) -> None:
        self.stream = stream
        self.colour = colour
        self.enabled: bool = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def toggle(self) -> bool:
        """Toggle rendering. Returns ``True`` if enabled after toggle."""

        self.enabled = not self.enabled
        return self.enabled

    def format(self, snapshot: GridSnapshot) -> str:
        if not self.colour:
            return snapshot.as_text()
        lines = snapshot.as_text().splitlines()
        out: list[str] = []
        for line, row in zip(lines, snapshot.rows):
            cells = [
                f"{_COLOURS[_STATE_COLOURS[state]]}{glyph}"
                for glyph, state in zip(line, row)
            ]
            out.append("".join(cells) + _COLOURS["reset"])
        return "\n".join(out)

    def render(self, world: Any) -> None:
        """Draw ``world``'s current snapshot to the stream if enabled."""

        if not self.enabled:
            return
        stream = self.stream or sys.stdout
        stream.write("\x1b[H\x1b[2J")  # clear screen
        stream.write(self.format(world.snapshot()) + "\n")
        stream.flush()


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]
