"""Process wiring: logging, startup reporting, signals, and the run loop."""

from __future__ import annotations

import logging

from .assembler import SnapshotAssembler
from .cancel import CancellationToken, signal_cancellation
from .collectors import SubsystemReaders, default_readers
from .config import Config, format_duration, settings
from .formatters import get_formatter
from .logging import close_logging, configure_logging
from .privileges import identity
from .scheduler import RunOutcome, Scheduler
from .sink import StreamSink


def log_startup(log: logging.Logger, config: Config, readers: SubsystemReaders) -> None:
    """Log who we run as, the schedule, and static host/CPU identity."""
    user, elevated, message = identity()
    log.info(message, extra={"user": user, "sudo": elevated})

    log.info(
        "Collection interval and duration",
        extra={
            "interval": format_duration(config.interval),
            "duration": format_duration(config.duration),
        },
    )

    try:
        info = readers.host_info()
    except Exception as e:
        log.error("Failed to get host info", extra={"error": str(e)})
    else:
        log.info("Host Information (JSON)", extra={"host_info": info})

    try:
        cpus = readers.cpu_info()
    except Exception as e:
        log.error("Failed to get CPU info", extra={"error": str(e)})
    else:
        for idx, cpu in enumerate(cpus):
            log.info("CPU %d Information (JSON)", idx, extra={"cpu_info": cpu})


class App:
    def __init__(
        self,
        name: str,
        config: Config,
        readers: SubsystemReaders | None = None,
    ) -> None:
        self.name = name
        self.config = config
        self.readers = readers

    def run(self) -> RunOutcome:
        """Run to completion. Raises StartupError if the log or output file cannot be opened."""
        log = configure_logging(
            self.config.log_file,
            to_stdout=self.config.log_to_stdout,
            level=settings.log_level,
        )
        try:
            log.debug("Starting %s", self.name)
            readers = self.readers or default_readers()
            log_startup(log, self.config, readers)

            assembler = SnapshotAssembler(readers, log.getChild("assembler"))
            sink = StreamSink(
                get_formatter(self.config.output_format),
                self.config.output_file,
                log.getChild("sink"),
            )
            token = CancellationToken()
            try:
                with signal_cancellation(token, log):
                    scheduler = Scheduler(
                        self.config, assembler, sink, token, log.getChild("scheduler")
                    )
                    return scheduler.run()
            finally:
                sink.close()
        finally:
            close_logging(log)
