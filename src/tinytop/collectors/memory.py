"""Memory and swap readers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import psutil

SWAPS_PATH = Path("/proc/swaps")


def virtual_memory() -> dict[str, Any]:
    vm = psutil.virtual_memory()
    data = vm._asdict()
    data["percent"] = round(vm.percent, 2)
    return data


def swap_memory() -> dict[str, Any]:
    sm = psutil.swap_memory()
    data = sm._asdict()
    data["percent"] = round(sm.percent, 2)
    return data


def parse_swaps(text: str) -> list[dict[str, Any]]:
    """Parse /proc/swaps. Sizes there are in KiB; returned in bytes."""
    lines = text.strip().splitlines()
    if not lines:
        return []

    header = lines[0].split()
    if header[:4] != ["Filename", "Type", "Size", "Used"]:
        raise ValueError(f"unexpected /proc/swaps header: {lines[0]!r}")

    devices: list[dict[str, Any]] = []
    for line in lines[1:]:
        fields = line.split()
        if len(fields) < 4:
            raise ValueError(f"malformed /proc/swaps line: {line!r}")
        size = int(fields[2]) * 1024
        used = int(fields[3]) * 1024
        devices.append(
            {
                "name": fields[0],
                "type": fields[1],
                "used_bytes": used,
                "free_bytes": size - used,
            }
        )
    return devices


def swap_devices() -> list[dict[str, Any]]:
    if not sys.platform.startswith("linux"):
        raise NotImplementedError(f"swap devices are not supported on {sys.platform}")
    return parse_swaps(SWAPS_PATH.read_text())
