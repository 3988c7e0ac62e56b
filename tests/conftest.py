import pytest

from gridpath.utils import observer
from gridpath.utils.cli import terminal_view


@pytest.fixture(autouse=True)
def _reset_shared_state():
    """Module-level buffers and the terminal view singleton outlive a test."""
    yield
    observer._events.clear()
    observer._step_durations.clear()
    observer._live_timing = False
    terminal_view.get_view().enabled = False
