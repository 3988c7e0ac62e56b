"""Command parsing and stdin reader thread for the development CLI."""

from __future__ import annotations

import logging
import queue  # For thread-safe command passing
import sys
import threading
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class CLICommand:
    """Result of parsing a command string."""
    name: str
    args: List[str]


# Commands are only parsed on the reader thread; the main loop executes them,
# so the grid and engine are never touched from two threads.
_cli_command_queue: queue.Queue[CLICommand] = queue.Queue()
_cli_thread_stop_event = threading.Event()


def _cli_input_thread_func() -> None:
    """Thread function to read CLI input."""
    logger.info("CLI ready. Type commands prefixed with '/' (try /help).")
    while not _cli_thread_stop_event.is_set():
        try:
            line = sys.stdin.readline()
        except (OSError, ValueError) as exc:  # stdin closed underneath us
            logger.error("CLI input stream failed: %s", exc)
            break
        if not line:  # EOF
            if not _cli_thread_stop_event.is_set():
                logger.info("CLI input stream closed.")
            break

        parsed = parse_command(line)
        if parsed:
            _cli_command_queue.put(parsed)
        elif line.strip():
            logger.info("Commands start with '/'. Type /help for a list.")

    logger.debug("CLI input thread stopped.")


def start_cli_thread() -> threading.Thread:
    """Starts the CLI input thread."""
    if _cli_thread_stop_event.is_set():  # If previously stopped, reset
        _cli_thread_stop_event.clear()

    thread = threading.Thread(target=_cli_input_thread_func, daemon=True, name="CLIInputThread")
    thread.start()
    return thread


def stop_cli_thread() -> None:
    """Signals the CLI input thread to stop.

    A thread blocked in ``readline`` only notices on its next line; it is a
    daemon so it never holds up process exit.
    """
    _cli_thread_stop_event.set()


def parse_command(text: str) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``text`` if it starts with ``/``."""
    text = text.strip()
    if not text.startswith("/"):
        return None
    parts = text[1:].split()
    if not parts:
        return None
    return CLICommand(name=parts[0].lower(), args=parts[1:])


def poll_command() -> Optional[CLICommand]:
    """Return a command from the internal queue if available, else ``None``."""
    try:
        return _cli_command_queue.get_nowait()
    except queue.Empty:
        return None


__all__ = ["CLICommand", "parse_command", "poll_command", "start_cli_thread", "stop_cli_thread"]
