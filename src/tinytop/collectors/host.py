"""Host and runtime identity readers."""

from __future__ import annotations

import os
import platform
import socket
import sys
import time
from pathlib import Path
from typing import Any

import psutil

MACHINE_ID_PATHS = (Path("/etc/machine-id"), Path("/var/lib/dbus/machine-id"))


def runtime_info() -> dict[str, Any]:
    return {
        "os": sys.platform,
        "arch": platform.machine(),
        "num_cpu": os.cpu_count() or 0,
        "version": platform.python_version(),
        "implementation": platform.python_implementation(),
    }


def _host_id() -> str | None:
    for path in MACHINE_ID_PATHS:
        try:
            value = path.read_text().strip()
        except OSError:
            continue
        if value:
            return value
    return None


def _os_release() -> tuple[str, str, str]:
    """(platform, family, version) of the running OS."""
    if sys.platform.startswith("linux"):
        try:
            release = platform.freedesktop_os_release()
        except OSError:
            return "linux", "", ""
        return (
            release.get("ID", "linux"),
            release.get("ID_LIKE", release.get("ID", "")),
            release.get("VERSION_ID", ""),
        )
    if sys.platform == "darwin":
        return "darwin", "Standalone Workstation", platform.mac_ver()[0]
    return platform.system().lower(), "", platform.version()


def host_info() -> dict[str, Any]:
    boot_time = int(psutil.boot_time())
    os_platform, family, version = _os_release()
    return {
        "hostname": socket.gethostname(),
        "uptime": max(0, int(time.time()) - boot_time),
        "boot_time": boot_time,
        "procs": len(psutil.pids()),
        "os": platform.system().lower(),
        "platform": os_platform,
        "platform_family": family,
        "platform_version": version,
        "kernel_version": platform.release(),
        "kernel_arch": platform.machine(),
        "host_id": _host_id(),
    }
