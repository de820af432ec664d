from __future__ import annotations

import logging
from typing import Any

import pytest

from tinytop.collectors import SubsystemReaders

PARTITIONS = [
    {"device": "/dev/sda1", "mountpoint": "/", "fstype": "ext4", "opts": ["rw", "relatime"]},
    {"device": "/dev/sda2", "mountpoint": "/home", "fstype": "ext4", "opts": ["rw"]},
    {
        "device": "map auto_home",
        "mountpoint": "/System/Volumes/Data/home",
        "fstype": "autofs",
        "opts": ["rw", "nobrowse", "automounted"],
    },
]


def _usage(mountpoint: str) -> dict[str, Any]:
    return {"path": mountpoint, "total": 1000, "used": 250, "free": 750, "percent": 25.0}


def make_readers(**overrides: Any) -> SubsystemReaders:
    """Deterministic readers; pass ``name=callable`` to replace one."""
    readers: dict[str, Any] = {
        "runtime_info": lambda: {"os": "linux", "arch": "x86_64", "num_cpu": 4, "version": "3.12.1"},
        "cpu_count": lambda: 4,
        "cpu_info": lambda: [{"cpu": i, "model_name": "Test CPU"} for i in range(4)],
        "disk_partitions": lambda: [dict(p) for p in PARTITIONS],
        "disk_usage": _usage,
        "disk_io_counters": lambda: {"sda": {"name": "sda", "read_count": 10, "write_count": 5}},
        "host_info": lambda: {"hostname": "testhost", "uptime": 3600, "procs": 42},
        "virtual_memory": lambda: {"total": 8192, "available": 4096, "used": 4096, "percent": 50.0},
        "swap_devices": lambda: [{"name": "/swapfile", "type": "file", "used_bytes": 0, "free_bytes": 1024}],
        "swap_memory": lambda: {"total": 1024, "used": 0, "free": 1024, "percent": 0.0},
        "sensor_temperatures": lambda: [
            {"sensor_key": "coretemp_Core 0", "temperature": 45.0, "high": 80.0, "critical": 100.0}
        ],
    }
    readers.update(overrides)
    return SubsystemReaders(**readers)


def fail(message: str = "boom"):
    def _read(*args: Any) -> Any:
        raise OSError(message)

    return _read


@pytest.fixture
def readers() -> SubsystemReaders:
    return make_readers()


@pytest.fixture
def logger() -> logging.Logger:
    log = logging.getLogger("test.tinytop")
    log.setLevel(logging.DEBUG)
    return log
