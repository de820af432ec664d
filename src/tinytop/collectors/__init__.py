"""Subsystem readers: one synchronous function per OS facility."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .cpu import cpu_count, cpu_info
from .disk import disk_io_counters, disk_partitions, disk_usage, is_nobrowse
from .host import host_info, runtime_info
from .memory import swap_devices, swap_memory, virtual_memory
from .sensors import sensor_temperatures

__all__ = [
    "SubsystemReaders",
    "cpu_count",
    "cpu_info",
    "default_readers",
    "disk_io_counters",
    "disk_partitions",
    "disk_usage",
    "host_info",
    "is_nobrowse",
    "runtime_info",
    "sensor_temperatures",
    "swap_devices",
    "swap_memory",
    "virtual_memory",
]


@dataclass(frozen=True, slots=True)
class SubsystemReaders:
    """The set of OS queries one assembly pass performs.

    Each reader returns plain data or raises; none of them retry.
    """

    runtime_info: Callable[[], dict[str, Any]] = runtime_info
    cpu_count: Callable[[], int] = cpu_count
    cpu_info: Callable[[], list[dict[str, Any]]] = cpu_info
    disk_partitions: Callable[[], list[dict[str, Any]]] = disk_partitions
    disk_usage: Callable[[str], dict[str, Any]] = disk_usage
    disk_io_counters: Callable[[], dict[str, dict[str, Any]]] = disk_io_counters
    host_info: Callable[[], dict[str, Any]] = host_info
    virtual_memory: Callable[[], dict[str, Any]] = virtual_memory
    swap_devices: Callable[[], list[dict[str, Any]]] = swap_devices
    swap_memory: Callable[[], dict[str, Any]] = swap_memory
    sensor_temperatures: Callable[[], list[dict[str, Any]]] = sensor_temperatures


def default_readers() -> SubsystemReaders:
    return SubsystemReaders()
