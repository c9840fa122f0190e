"""Default configuration values for linespin."""

# Seconds between background redraws (10 frames per second)
DEFAULT_TICK_INTERVAL = 0.1

# Single-byte frames drawn in rotation
DEFAULT_FRAMES = "|/-\\"

# Upper bound for the tick interval; slower than this no longer reads as motion
MAX_TICK_INTERVAL = 10.0

SPINNER_DEFAULTS: dict[str, float | str] = {
    "tick_interval": DEFAULT_TICK_INTERVAL,
    "frames": DEFAULT_FRAMES,
}
