"""linespin - Lightweight single-line terminal spinner.

Draws ``<text> <frame>`` on one terminal line and redraws it in place, either
when the caller asks (Spinner.spin) or on a timer in the background
(SpinnerController). Output is suppressed entirely when the stream is not
an interactive terminal, so redirecting to files or pipes stays clean.
"""

from linespin.lib.errors import ConfigError, LineSpinError, SpinnerStateError
from linespin.lib.ui import (
    Spinner,
    SpinnerController,
    SpinnerMode,
    is_terminal,
    spinning,
)
from linespin.models.spinner_config import SpinnerConfig

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "LineSpinError",
    "Spinner",
    "SpinnerConfig",
    "SpinnerController",
    "SpinnerMode",
    "SpinnerStateError",
    "is_terminal",
    "spinning",
]
