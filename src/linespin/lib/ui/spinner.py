"""Single-line terminal spinner.

The spinner keeps one preallocated byte buffer laid out as
``<text> <frame>\\r``. Each redraw swaps the frame byte and writes the whole
buffer; the trailing carriage return puts the cursor back at the start of
the line so the next write overwrites it in place.

Spinners created on a stream that is not attached to a terminal are
disabled and never write anything, which keeps redirected output clean.
The spinner expects exclusive access to its stream while in use.
"""

import io
from dataclasses import dataclass
from enum import Enum
from typing import Any

from linespin.lib.logging_config import get_logger
from linespin.lib.ui.terminal import is_terminal
from linespin.models.spinner_config import SpinnerConfig

logger = get_logger(__name__)

SEPARATOR = ord(" ")
CARRIAGE_RETURN = ord("\r")


class SpinnerMode(str, Enum):
    """Whether a spinner writes to its stream."""

    DISABLED = "disabled"
    ACTIVE = "active"


@dataclass
class _ActiveState:
    """Render state that only exists for spinners attached to a terminal."""

    stream: Any
    buffer: bytearray
    blank: bytes
    frames: bytes
    frame_index: int = 0


def _build_buffer(text: bytes) -> bytearray:
    # text + " " + frame + "\r"; the frame slot is filled on the first spin
    buffer = bytearray(len(text) + 3)
    buffer[: len(text)] = text
    buffer[-3] = SEPARATOR
    buffer[-1] = CARRIAGE_RETURN
    return buffer


class Spinner:
    """Terminal spinner attached to a writable stream.

    Both ``Spinner()`` and a spinner built on a non-terminal stream are
    disabled: spin() and clear() do nothing. Methods are not thread safe.

    Args:
        stream: Output stream, usually sys.stdout or sys.stderr. None gives a
            disabled spinner.
        text: Label drawn before the frame character.
        config: Frame set and tick interval; defaults to SpinnerConfig().
        force_tty: Override terminal detection (for testing). None uses
            auto-detection.
    """

    def __init__(
        self,
        stream: Any = None,
        text: str = "",
        *,
        config: SpinnerConfig | None = None,
        force_tty: bool | None = None,
    ) -> None:
        self.config = config or SpinnerConfig()
        self.text = text
        self._state: _ActiveState | None = None

        if stream is None:
            return

        attached = force_tty if force_tty is not None else is_terminal(stream)
        if not attached:
            logger.debug("Stream is not a terminal, spinner disabled")
            return

        buffer = _build_buffer(text.encode("utf-8"))
        self._state = _ActiveState(
            stream=stream,
            buffer=buffer,
            blank=b" " * (len(buffer) - 1) + b"\r",
            frames=self.config.frames.encode("ascii"),
        )

    @property
    def mode(self) -> SpinnerMode:
        """Current mode of the spinner."""
        if self._state is None:
            return SpinnerMode.DISABLED
        return SpinnerMode.ACTIVE

    @property
    def enabled(self) -> bool:
        """True if the spinner writes to its stream."""
        return self._state is not None

    @property
    def frame_index(self) -> int:
        """Index of the frame drawn by the last spin() call."""
        return self._state.frame_index if self._state is not None else 0

    @property
    def render_buffer(self) -> bytes:
        """Copy of the bytes written on each redraw (empty when disabled)."""
        return bytes(self._state.buffer) if self._state is not None else b""

    def spin(self) -> None:
        """Advance to the next frame and redraw the line."""
        state = self._state
        if state is None:
            return
        state.frame_index = (state.frame_index + 1) % len(state.frames)
        state.buffer[-2] = state.frames[state.frame_index]
        self._write(state, state.buffer)

    def clear(self) -> None:
        """Overwrite the line with spaces, erasing the previous redraw."""
        state = self._state
        if state is None:
            return
        self._write(state, state.blank)

    @staticmethod
    def _write(state: _ActiveState, data: bytes | bytearray) -> None:
        # Text streams such as sys.stderr expose their binary layer as .buffer
        target = getattr(state.stream, "buffer", state.stream)
        payload: bytes | str = bytes(data)
        if target is state.stream and isinstance(target, io.TextIOBase):
            # Text-only streams (StringIO, IDE consoles) take str
            payload = payload.decode("utf-8")
        try:
            if target is not state.stream:
                # Pending text must reach the terminal before our bytes do
                state.stream.flush()
            target.write(payload)
            flush = getattr(target, "flush", None)
            if flush is not None:
                flush()
        except (OSError, ValueError, TypeError) as e:
            logger.debug(f"Dropped spinner frame: {e}")
