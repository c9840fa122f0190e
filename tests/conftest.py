"""Pytest configuration and shared fixtures for linespin tests."""

import logging
import threading
from collections.abc import Generator

import pytest

from linespin.lib.logging_config import PACKAGE_LOGGER


class FakeTerminal:
    """Binary stream that records every write and reports itself as a TTY."""

    def __init__(self, tty: bool = True) -> None:
        self.tty = tty
        self.writes: list[bytes] = []
        self.flushes = 0
        self._lock = threading.Lock()

    def isatty(self) -> bool:
        return self.tty

    def write(self, data: bytes) -> int:
        with self._lock:
            self.writes.append(bytes(data))
        return len(data)

    def flush(self) -> None:
        self.flushes += 1

    def snapshot(self) -> list[bytes]:
        """Return a copy of the writes recorded so far."""
        with self._lock:
            return list(self.writes)


class BrokenTerminal(FakeTerminal):
    """Terminal whose writes always fail."""

    def write(self, data: bytes) -> int:
        raise OSError("write failed")


@pytest.fixture
def terminal() -> FakeTerminal:
    """Provide a fake interactive terminal stream.

    Returns:
        FakeTerminal reporting isatty() == True
    """
    return FakeTerminal()


@pytest.fixture
def pipe() -> FakeTerminal:
    """Provide a fake non-interactive stream (file or pipe).

    Returns:
        FakeTerminal reporting isatty() == False
    """
    return FakeTerminal(tty=False)


@pytest.fixture
def broken_terminal() -> BrokenTerminal:
    """Provide a terminal stream whose writes raise OSError.

    Returns:
        BrokenTerminal instance
    """
    return BrokenTerminal()


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None]:
    """Restore the package logger after tests that call setup_logging.

    Yields:
        None

    Cleanup:
        Removes handlers and restores level and propagation
    """
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
