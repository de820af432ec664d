"""Interval-paced, time-boxed driver for snapshot assembly."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from .config import Config, format_duration
from .errors import SubsystemError
from .models import Snapshot


class Cancellation(Protocol):
    @property
    def cancelled(self) -> bool: ...

    def wait(self, timeout: float) -> bool: ...


class StopReason(str, enum.Enum):
    DURATION_ELAPSED = "duration_elapsed"
    CANCELLED = "cancelled"
    SUBSYSTEM_FAILED = "subsystem_failed"


@dataclass(frozen=True, slots=True)
class RunOutcome:
    passes: int
    reason: StopReason


class Scheduler:
    """Run the assembler every ``interval`` until ``duration`` elapses.

    Passes are strictly sequential: a slow pass delays the next tick, it never
    overlaps it. Cancellation is checked before each pass and raced against
    the timer while waiting for the next tick; a pass already running is
    allowed to finish.
    """

    def __init__(
        self,
        config: Config,
        assembler: Callable[[], Snapshot],
        sink: Callable[[Snapshot], None],
        token: Cancellation,
        logger: logging.Logger | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self.assembler = assembler
        self.sink = sink
        self.token = token
        self.log = logger or logging.getLogger("tinytop.scheduler")
        self.clock = clock

    def _stop(self, passes: int, reason: StopReason) -> RunOutcome:
        self.log.info("Collection stopped", extra={"passes": passes, "reason": reason.value})
        return RunOutcome(passes=passes, reason=reason)

    def run(self) -> RunOutcome:
        interval = self.config.interval
        start = self.clock()
        end_time = start + self.config.duration
        tick = start
        passes = 0

        self.log.debug(
            "Collection started",
            extra={
                "interval": format_duration(interval),
                "duration": format_duration(self.config.duration),
            },
        )

        while tick < end_time:
            if self.token.cancelled:
                return self._stop(passes, StopReason.CANCELLED)

            try:
                snapshot = self.assembler()
            except SubsystemError as e:
                self.log.error(
                    "Failed to collect system info",
                    extra={"subsystem": e.subsystem, "error": e.error},
                )
                return self._stop(passes, StopReason.SUBSYSTEM_FAILED)

            self.sink(snapshot)
            passes += 1

            tick += interval
            now = self.clock()
            if tick >= end_time or now >= end_time:
                break

            if self.token.wait(tick - now):
                return self._stop(passes, StopReason.CANCELLED)

        return self._stop(passes, StopReason.DURATION_ELAPSED)
