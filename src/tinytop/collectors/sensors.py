"""Sensor readers."""

from __future__ import annotations

from typing import Any

import psutil


def sensor_temperatures() -> list[dict[str, Any]]:
    # Only Linux and FreeBSD builds of psutil expose temperatures.
    read = getattr(psutil, "sensors_temperatures", None)
    if read is None:
        raise NotImplementedError("sensor temperatures are not supported on this platform")

    temps: list[dict[str, Any]] = []
    for chip, entries in read().items():
        for idx, entry in enumerate(entries):
            label = entry.label or str(idx)
            temps.append(
                {
                    "sensor_key": f"{chip}_{label}",
                    "temperature": entry.current,
                    "high": entry.high,
                    "critical": entry.critical,
                }
            )
    return temps
