"""One-shot cancellation shared between signal handlers and the run loop."""

from __future__ import annotations

import logging
import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


class CancellationToken:
    """A flag set at most once; the scheduler polls it and waits on it."""

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def wait(self, timeout: float) -> bool:
        """Block up to *timeout* seconds; True as soon as the token is cancelled."""
        return self._event.wait(max(0.0, timeout))


@contextmanager
def signal_cancellation(
    token: CancellationToken,
    logger: logging.Logger | None = None,
    signals: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM),
) -> Iterator[CancellationToken]:
    """Cancel *token* on SIGINT/SIGTERM while the block runs.

    Previous handlers are restored on exit. Must be entered from the main
    thread, as with any ``signal.signal`` call.
    """
    log = logger or logging.getLogger("tinytop.cancel")

    def _handler(signum: int, frame: Any) -> None:
        if not token.cancelled:
            log.info("Received interrupt signal, exiting...")
        token.cancel()

    previous = {sig: signal.signal(sig, _handler) for sig in signals}
    try:
        yield token
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
