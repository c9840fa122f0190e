"""UI utilities for terminal-based progress display.

This module provides:
- TTY detection so redirected output stays clean
- A single-line spinner driven manually (spin/clear)
- A background controller that redraws the spinner on a timer
"""

from linespin.lib.ui.controller import SpinnerController, SpinnerThread, spinning
from linespin.lib.ui.spinner import Spinner, SpinnerMode
from linespin.lib.ui.terminal import is_terminal

__all__ = [
    "Spinner",
    "SpinnerController",
    "SpinnerMode",
    "SpinnerThread",
    "is_terminal",
    "spinning",
]
