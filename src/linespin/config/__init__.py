"""Default configuration values for linespin spinners."""

from linespin.config.defaults import (
    DEFAULT_FRAMES,
    DEFAULT_TICK_INTERVAL,
    MAX_TICK_INTERVAL,
    SPINNER_DEFAULTS,
)

__all__ = [
    "DEFAULT_FRAMES",
    "DEFAULT_TICK_INTERVAL",
    "MAX_TICK_INTERVAL",
    "SPINNER_DEFAULTS",
]
