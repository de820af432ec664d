"""Tests for the psutil-backed subsystem readers."""

from __future__ import annotations

from collections import namedtuple
from unittest.mock import patch

import pytest

from tinytop.collectors import cpu, disk, host, memory, sensors

shwtemp = namedtuple("shwtemp", ["label", "current", "high", "critical"])
sdiskpart = namedtuple("sdiskpart", ["device", "mountpoint", "fstype", "opts"])
scpufreq = namedtuple("scpufreq", ["current", "min", "max"])
sdiskio = namedtuple("sdiskio", ["read_count", "write_count", "read_bytes", "write_bytes"])

CPUINFO = (
    "processor\t: 0\n"
    "vendor_id\t: GenuineIntel\n"
    "cpu family\t: 6\n"
    "model\t\t: 142\n"
    "model name\t: Intel(R) Core(TM) i7-8550U CPU @ 1.80GHz\n"
    "stepping\t: 10\n"
    "cpu MHz\t\t: 1992.000\n"
    "cache size\t: 8192 KB\n"
    "physical id\t: 0\n"
    "core id\t\t: 0\n"
    "cpu cores\t: 4\n"
    "flags\t\t: fpu vme de pse\n"
    "bogomips\t: 3984.00\n"
    "\n"
    "processor\t: 1\n"
    "vendor_id\t: GenuineIntel\n"
    "model name\t: Intel(R) Core(TM) i7-8550U CPU @ 1.80GHz\n"
    "cpu MHz\t\t: 2001.500\n"
    "\n"
)

SWAPS = (
    "Filename\t\t\t\tType\t\tSize\t\tUsed\t\tPriority\n"
    "/swapfile                               file\t\t2097148\t\t1024\t\t-2\n"
    "/dev/nvme0n1p3                          partition\t8388604\t\t0\t\t-3\n"
)


def test_parse_cpuinfo() -> None:
    cpus = cpu.parse_cpuinfo(CPUINFO)
    assert len(cpus) == 2
    first = cpus[0]
    assert first["cpu"] == 0
    assert first["vendor_id"] == "GenuineIntel"
    assert first["family"] == "6"
    assert first["cores"] == 4
    assert first["mhz"] == 1992.0
    assert first["flags"] == ["fpu", "vme", "de", "pse"]
    assert "bogomips" not in first
    assert cpus[1]["mhz"] == 2001.5


def test_cpu_info_merges_frequencies(tmp_path) -> None:
    path = tmp_path / "cpuinfo"
    path.write_text(CPUINFO)
    freqs = [scpufreq(2100.0, 400.0, 4000.0), scpufreq(2200.0, 400.0, 4000.0)]

    with patch.object(cpu, "CPUINFO_PATH", path), patch("psutil.cpu_freq", return_value=freqs):
        cpus = cpu.cpu_info()

    assert [c["mhz"] for c in cpus] == [2100.0, 2200.0]
    assert cpus[0]["mhz_max"] == 4000.0


def test_cpu_info_without_procfs(tmp_path) -> None:
    with patch.object(cpu, "CPUINFO_PATH", tmp_path / "missing"), patch(
        "psutil.cpu_freq", return_value=[]
    ), patch("platform.processor", return_value="arm"):
        cpus = cpu.cpu_info()
    assert cpus == [{"cpu": 0, "model_name": "arm"}]


def test_cpu_count_none_is_an_error() -> None:
    with patch("psutil.cpu_count", return_value=None):
        with pytest.raises(RuntimeError):
            cpu.cpu_count()


def test_disk_partitions_split_options() -> None:
    parts = [sdiskpart("/dev/disk1s1", "/", "apfs", "rw,local,journaled")]
    with patch("psutil.disk_partitions", return_value=parts):
        result = disk.disk_partitions()
    assert result == [
        {"device": "/dev/disk1s1", "mountpoint": "/", "fstype": "apfs", "opts": ["rw", "local", "journaled"]}
    ]


def test_is_nobrowse() -> None:
    assert disk.is_nobrowse({"opts": ["ro", "nobrowse"]})
    assert not disk.is_nobrowse({"opts": ["rw", "browse"]})
    assert not disk.is_nobrowse({})


def test_disk_io_counters_keyed_by_device() -> None:
    counters = {"sda": sdiskio(1, 2, 512, 1024)}
    with patch("psutil.disk_io_counters", return_value=counters):
        result = disk.disk_io_counters()
    assert result["sda"]["name"] == "sda"
    assert result["sda"]["write_bytes"] == 1024


def test_disk_io_counters_none_is_an_error() -> None:
    with patch("psutil.disk_io_counters", return_value=None):
        with pytest.raises(RuntimeError):
            disk.disk_io_counters()


def test_parse_swaps() -> None:
    devices = memory.parse_swaps(SWAPS)
    assert devices == [
        {"name": "/swapfile", "type": "file", "used_bytes": 1024 * 1024, "free_bytes": (2097148 - 1024) * 1024},
        {"name": "/dev/nvme0n1p3", "type": "partition", "used_bytes": 0, "free_bytes": 8388604 * 1024},
    ]


def test_parse_swaps_header_only() -> None:
    assert memory.parse_swaps("Filename\tType\tSize\tUsed\tPriority\n") == []


def test_parse_swaps_bad_header() -> None:
    with pytest.raises(ValueError):
        memory.parse_swaps("garbage\n")


def test_swap_devices_unsupported_platform() -> None:
    with patch.object(memory.sys, "platform", "darwin"):
        with pytest.raises(NotImplementedError):
            memory.swap_devices()


def test_sensor_temperatures_flattened() -> None:
    temps = {
        "coretemp": [shwtemp("Package id 0", 48.0, 100.0, 100.0), shwtemp("", 45.0, None, None)],
        "nvme": [shwtemp("Composite", 38.85, 84.85, 84.85)],
    }
    with patch.object(sensors.psutil, "sensors_temperatures", return_value=temps, create=True):
        result = sensors.sensor_temperatures()

    assert [t["sensor_key"] for t in result] == ["coretemp_Package id 0", "coretemp_1", "nvme_Composite"]
    assert result[0]["temperature"] == 48.0
    assert result[1]["high"] is None


def test_sensor_temperatures_missing_api(monkeypatch) -> None:
    monkeypatch.delattr(sensors.psutil, "sensors_temperatures", raising=False)
    with pytest.raises(NotImplementedError):
        sensors.sensor_temperatures()


def test_runtime_info_fields() -> None:
    info = host.runtime_info()
    assert set(info) >= {"os", "arch", "num_cpu", "version"}
    assert info["num_cpu"] >= 1


def test_host_info_fields() -> None:
    with patch("psutil.boot_time", return_value=1_000.0), patch(
        "psutil.pids", return_value=[1, 2, 3]
    ), patch.object(host.time, "time", return_value=4_600.0):
        info = host.host_info()
    assert info["uptime"] == 3_600
    assert info["boot_time"] == 1_000
    assert info["procs"] == 3
    assert info["hostname"]
