"""Disk readers."""

from __future__ import annotations

from typing import Any

import psutil

# macOS marks mounts hidden from Finder with this option.
NOBROWSE = "nobrowse"


def is_nobrowse(partition: dict[str, Any]) -> bool:
    return NOBROWSE in partition.get("opts", [])


def disk_partitions() -> list[dict[str, Any]]:
    return [
        {
            "device": part.device,
            "mountpoint": part.mountpoint,
            "fstype": part.fstype,
            "opts": [opt for opt in part.opts.split(",") if opt],
        }
        for part in psutil.disk_partitions(all=True)
    ]


def disk_usage(mountpoint: str) -> dict[str, Any]:
    usage = psutil.disk_usage(mountpoint)
    return {
        "path": mountpoint,
        "total": usage.total,
        "used": usage.used,
        "free": usage.free,
        "percent": round(usage.percent, 2),
    }


def disk_io_counters() -> dict[str, dict[str, Any]]:
    counters = psutil.disk_io_counters(perdisk=True, nowrap=True)
    if counters is None:
        raise RuntimeError("disk IO counters are unavailable")
    return {name: {"name": name, **io._asdict()} for name, io in counters.items()}
