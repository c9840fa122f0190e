"""Terminal detection utilities.

Provides the single capability check the spinner relies on: whether an
output stream is attached to an interactive terminal.
"""

from typing import Any


def is_terminal(stream: Any) -> bool:
    """Check if a stream is connected to a terminal.

    Streams without an isatty() method, and streams whose isatty() fails
    (closed or detached files), count as non-terminals so output can safely
    be redirected to files and pipes.

    Args:
        stream: File-like object, usually sys.stdout or sys.stderr.

    Returns:
        True if the stream is a TTY (interactive terminal), False otherwise.
    """
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False
