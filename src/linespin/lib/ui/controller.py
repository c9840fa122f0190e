"""Background refresh loop for a Spinner.

SpinnerController runs Spinner.spin() on a fixed cadence in a daemon thread
and hands the caller one shutdown handle. Typical use::

    with SpinnerController.start(sys.stderr, "working..."):
        do_blocking_work()

or, keeping the handle as a plain function::

    stop = SpinnerController.start(sys.stderr, "working...")
    try:
        do_blocking_work()
    finally:
        stop()

Nothing else may write to the stream until stop() returns.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from types import TracebackType
from typing import Any

from linespin.lib.errors import SpinnerStateError
from linespin.lib.logging_config import get_logger
from linespin.lib.ui.spinner import Spinner
from linespin.models.spinner_config import SpinnerConfig

logger = get_logger(__name__)


class SpinnerThread(threading.Thread):
    """Background thread that redraws a spinner until asked to stop."""

    def __init__(self, spinner: Spinner, interval: float) -> None:
        """Initialize spinner thread.

        Args:
            spinner: Active spinner to redraw.
            interval: Seconds between redraws.
        """
        super().__init__(name="linespin-refresh", daemon=True)
        self.spinner = spinner
        self.interval = interval
        self.stop_event = threading.Event()

    def run(self) -> None:
        """Run spinner animation loop."""
        # wait() returns True as soon as stop is requested, so no tick
        # is processed after that point
        while not self.stop_event.wait(self.interval):
            self.spinner.spin()


class SpinnerController:
    """Handle for one background spinner session.

    Create sessions with SpinnerController.start(). The controller is
    callable, so it can be used directly as the shutdown function, and it is
    a context manager that stops the session on exit.
    """

    def __init__(self, spinner: Spinner, config: SpinnerConfig) -> None:
        self.spinner = spinner
        self.config = config
        self._thread: SpinnerThread | None = None
        self._lock = threading.Lock()
        self._stopped = False

    @classmethod
    def start(
        cls,
        stream: Any,
        text: str,
        *,
        config: SpinnerConfig | None = None,
        force_tty: bool | None = None,
    ) -> "SpinnerController":
        """Create a spinner on stream and start redrawing it in the background.

        No thread is started when the spinner is disabled; stop() is then a
        no-op.

        Args:
            stream: Output stream, usually sys.stdout or sys.stderr.
            text: Label drawn before the frame character.
            config: Frame set and tick interval.
            force_tty: Override terminal detection (for testing).

        Returns:
            Controller whose stop() (or call) ends the session.
        """
        config = config or SpinnerConfig()
        spinner = Spinner(stream, text, config=config, force_tty=force_tty)
        controller = cls(spinner, config)
        if spinner.enabled:
            # Log handlers may share the stream, so log before the first redraw
            logger.debug(
                f"Spinner session starting: text={text!r}, "
                f"interval={config.tick_interval}s"
            )
            controller._thread = SpinnerThread(spinner, config.tick_interval)
            controller._thread.start()
        return controller

    @property
    def running(self) -> bool:
        """True while the background thread is redrawing."""
        return self._thread is not None and self._thread.is_alive()

    @property
    def stopped(self) -> bool:
        """True once stop() has completed."""
        return self._stopped

    def stop(self) -> None:
        """Stop the refresh thread, wait for it to exit, then clear the line.

        Returns only after the thread has exited, so no redraw can follow.
        Calls after the first are no-ops.

        Raises:
            SpinnerStateError: If called from the refresh thread itself.
        """
        thread = self._thread
        if thread is not None and threading.current_thread() is thread:
            raise SpinnerStateError(
                "Spinner session cannot be stopped from its own refresh thread"
            )

        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            if thread is not None:
                thread.stop_event.set()
                thread.join()
            self.spinner.clear()
            if thread is not None:
                logger.debug("Spinner session stopped")

    def __call__(self) -> None:
        self.stop()

    def __enter__(self) -> "SpinnerController":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()


@contextmanager
def spinning(
    stream: Any,
    text: str,
    *,
    config: SpinnerConfig | None = None,
    force_tty: bool | None = None,
) -> Iterator[SpinnerController]:
    """Context manager for spinner usage.

    Args:
        stream: Output stream, usually sys.stdout or sys.stderr.
        text: Label drawn before the frame character.
        config: Frame set and tick interval.
        force_tty: Override terminal detection (for testing).

    Yields:
        The running SpinnerController.
    """
    controller = SpinnerController.start(
        stream, text, config=config, force_tty=force_tty
    )
    try:
        yield controller
    finally:
        controller.stop()
