"""
SIGINT handling for checksum runs.

The first Ctrl-C sets the engine's cancel event so sinks are still
terminated cleanly; a second Ctrl-C exits immediately.
"""

from __future__ import annotations

import signal
import sys
import threading
from signal import Handlers

from ...core.interfaces.logger import ILogger
from ..logging import NullLogger


class CancelOnInterrupt:
    """
    Context manager translating SIGINT into a cancel event.

    Usage:
        with CancelOnInterrupt() as cancel:
            outcome = engine.run(cancel=cancel)
    """

    def __init__(self, event: threading.Event | None = None, logger: ILogger | None = None) -> None:
        self._event = event or threading.Event()
        self._interrupt_count = 0
        self._original_handler: Handlers | None = None
        self._installed = False
        self._logger = logger or NullLogger()

    @property
    def event(self) -> threading.Event:
        return self._event

    @property
    def interrupt_count(self) -> int:
        return self._interrupt_count

    def install(self) -> None:
        """Install the SIGINT handler (main thread only)."""
        if threading.current_thread() is not threading.main_thread():
            self._logger.debug("Not on main thread, SIGINT handler not installed")
            return
        self._original_handler = signal.signal(signal.SIGINT, self._handle_signal)  # type: ignore[assignment]
        self._installed = True

    def restore(self) -> None:
        """Restore the original SIGINT handler."""
        if self._installed:
            original = self._original_handler
            signal.signal(signal.SIGINT, original if original is not None else signal.default_int_handler)
            self._original_handler = None
            self._installed = False

    def _handle_signal(self, signum: int, frame) -> None:
        self._interrupt_count += 1
        if self._interrupt_count == 1:
            self._logger.warning("Interrupted, finishing current file and writing partial output")
            self._event.set()
        else:
            self._logger.warning("Second interrupt, aborting immediately")
            sys.exit(130)  # Standard exit code for SIGINT

    def __enter__(self) -> threading.Event:
        self.install()
        return self._event

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()
