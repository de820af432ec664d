"""CPU readers."""

from __future__ import annotations

import platform
from pathlib import Path
from typing import Any

import psutil

CPUINFO_PATH = Path("/proc/cpuinfo")

# /proc/cpuinfo key -> output key
_CPUINFO_FIELDS = {
    "processor": "cpu",
    "vendor_id": "vendor_id",
    "cpu family": "family",
    "model": "model",
    "stepping": "stepping",
    "physical id": "physical_id",
    "core id": "core_id",
    "cpu cores": "cores",
    "model name": "model_name",
    "cpu MHz": "mhz",
    "cache size": "cache_size",
    "microcode": "microcode",
    "flags": "flags",
}


def cpu_count() -> int:
    count = psutil.cpu_count(logical=True)
    if not count:
        raise RuntimeError("logical CPU count is unavailable")
    return int(count)


def parse_cpuinfo(text: str) -> list[dict[str, Any]]:
    """Parse /proc/cpuinfo into one dict per logical CPU."""
    cpus: list[dict[str, Any]] = []
    current: dict[str, Any] = {}
    for line in text.splitlines():
        if not line.strip():
            if current:
                cpus.append(current)
                current = {}
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        out_key = _CPUINFO_FIELDS.get(key.strip())
        if out_key is None:
            continue
        value = value.strip()
        if out_key == "flags":
            current[out_key] = value.split()
        elif out_key == "mhz":
            try:
                current[out_key] = float(value)
            except ValueError:
                continue
        elif out_key in ("cpu", "cores", "stepping"):
            try:
                current[out_key] = int(value)
            except ValueError:
                current[out_key] = value
        else:
            current[out_key] = value
    if current:
        cpus.append(current)
    return cpus


def cpu_info() -> list[dict[str, Any]]:
    """Per-CPU identity, with current frequency where psutil exposes it."""
    if CPUINFO_PATH.exists():
        cpus = parse_cpuinfo(CPUINFO_PATH.read_text())
    else:
        cpus = [{"cpu": 0, "model_name": platform.processor() or platform.machine()}]

    if not cpus:
        raise RuntimeError("no CPU information found")

    try:
        freqs = psutil.cpu_freq(percpu=True) or []
    except (NotImplementedError, OSError):
        freqs = []

    if len(freqs) == len(cpus):
        for cpu, freq in zip(cpus, freqs):
            cpu["mhz"] = round(freq.current, 2)
            cpu["mhz_max"] = round(freq.max, 2)
    elif len(freqs) == 1:
        for cpu in cpus:
            cpu.setdefault("mhz", round(freqs[0].current, 2))
            cpu["mhz_max"] = round(freqs[0].max, 2)

    return cpus
