"""Snapshot assembly with a mandatory / best-effort failure policy."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .collectors import SubsystemReaders, default_readers, is_nobrowse
from .errors import SubsystemError
from .models import Ok, PartitionUsage, Result, Snapshot, Unavailable

# A failure in any of these voids the whole pass.
MANDATORY = (
    "runtime_info",
    "cpu_cores",
    "cpu_info",
    "partitions",
    "io_counters",
    "host_info",
    "mem_info",
)

# A failure in any of these degrades only its own field.
BEST_EFFORT = (
    "swap_devices",
    "swap_info",
    "sensor_temperatures",
)


def _describe(exc: BaseException) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


class SnapshotAssembler:
    """Query every subsystem once and merge the results into a Snapshot."""

    def __init__(
        self,
        readers: SubsystemReaders | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.readers = readers or default_readers()
        self.log = logger or logging.getLogger("tinytop.assembler")

    def __call__(self) -> Snapshot:
        return self.assemble()

    def _mandatory(self, subsystem: str, read: Callable[[], Any]) -> Ok[Any]:
        try:
            return Ok(read())
        except Exception as e:
            raise SubsystemError(subsystem, _describe(e)) from e

    def _best_effort(self, subsystem: str, read: Callable[[], Any]) -> Result:
        try:
            return Ok(read())
        except Exception as e:
            reason = _describe(e)
            self.log.warning(
                "Failed to get %s",
                subsystem.replace("_", " "),
                extra={"subsystem": subsystem, "error": reason},
            )
            return Unavailable(reason)

    def _sources(self) -> dict[str, Callable[[], Any]]:
        r = self.readers
        return {
            "runtime_info": r.runtime_info,
            "cpu_cores": r.cpu_count,
            "cpu_info": r.cpu_info,
            "partitions": self._partitions,
            "io_counters": r.disk_io_counters,
            "host_info": r.host_info,
            "mem_info": r.virtual_memory,
            "swap_devices": r.swap_devices,
            "swap_info": r.swap_memory,
            "sensor_temperatures": r.sensor_temperatures,
        }

    def _partitions(self) -> tuple[PartitionUsage, ...]:
        parts = self.readers.disk_partitions()
        out: list[PartitionUsage] = []
        for part in parts:
            if is_nobrowse(part):
                continue
            mountpoint = part["mountpoint"]
            try:
                usage: Result = Ok(self.readers.disk_usage(mountpoint))
            except Exception as e:
                reason = _describe(e)
                self.log.warning(
                    "Failed to get partition usage",
                    extra={"subsystem": "partition_usage", "mountpoint": mountpoint, "error": reason},
                )
                usage = Unavailable(reason)
            out.append(PartitionUsage(partition=part, usage=usage))
        return tuple(out)

    def assemble(self) -> Snapshot:
        """Run one assembly pass.

        Raises SubsystemError on the first mandatory failure; no partial
        Snapshot is produced in that case.
        """
        sources = self._sources()
        fields: dict[str, Result] = {}
        for name in MANDATORY:
            fields[name] = self._mandatory(name, sources[name])
        for name in BEST_EFFORT:
            fields[name] = self._best_effort(name, sources[name])
        return Snapshot(fields)
