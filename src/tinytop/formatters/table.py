"""Table formatter for human-readable output."""

from __future__ import annotations

from typing import Any

from ..models import Ok, Snapshot
from ..utils import bytes_to_human, format_uptime
from .base import BaseFormatter


class TableFormatter(BaseFormatter):
    """Format snapshot as human-readable table."""

    def format(self, snapshot: Snapshot) -> str:
        lines: list[str] = []

        host: dict[str, Any] = snapshot.value("host_info", {})
        lines.append(f"{'=' * 60}")
        lines.append(f"  System Snapshot - {host.get('hostname', 'N/A')}")
        lines.append(f"{'=' * 60}")

        # Host
        if host:
            lines.append("")
            lines.append("HOST")
            lines.append(
                f"  OS:        {host.get('platform', '')} {host.get('platform_version', '')}".rstrip()
            )
            lines.append(f"  Kernel:    {host.get('kernel_version', '')} ({host.get('kernel_arch', '')})")
            lines.append(f"  Uptime:    {format_uptime(host.get('uptime', 0))}")
            lines.append(f"  Processes: {host.get('procs', 0)}")

        # CPU
        cpus: list[dict[str, Any]] = snapshot.value("cpu_info", [])
        lines.append("")
        lines.append("CPU")
        lines.append(f"  Cores:     {snapshot.value('cpu_cores', 0)} logical")
        if cpus:
            lines.append(f"  Model:     {cpus[0].get('model_name', 'N/A')}")

        # Memory
        vm: dict[str, Any] = snapshot.value("mem_info", {})
        lines.append("")
        lines.append("MEMORY")
        lines.append(
            f"  Used:      {bytes_to_human(vm.get('used', 0))} / {bytes_to_human(vm.get('total', 0))} ({vm.get('percent', 0):.1f}%)"
        )
        lines.append(f"  Available: {bytes_to_human(vm.get('available', 0))}")

        swap = snapshot.fields.get("swap_info")
        if isinstance(swap, Ok):
            sw = swap.value
            if sw.get("total", 0) > 0:
                lines.append(
                    f"  Swap:      {bytes_to_human(sw.get('used', 0))} / {bytes_to_human(sw.get('total', 0))} ({sw.get('percent', 0):.1f}%)"
                )
        elif swap is not None:
            lines.append(f"  Swap:      unavailable ({swap.reason})")

        # Disk
        partitions = snapshot.value("partitions", ())
        if partitions:
            lines.append("")
            lines.append("DISK")
            for part in partitions:
                mp = part.partition.get("mountpoint", "N/A")
                if isinstance(part.usage, Ok):
                    u = part.usage.value
                    lines.append(
                        f"  {mp:15} {bytes_to_human(u.get('used', 0)):>10} / {bytes_to_human(u.get('total', 0)):>10} ({u.get('percent', 0):.1f}%)"
                    )
                else:
                    lines.append(f"  {mp:15} unavailable ({part.usage.reason})")

        # Sensors
        temps = snapshot.fields.get("sensor_temperatures")
        if isinstance(temps, Ok) and temps.value:
            lines.append("")
            lines.append("SENSORS")
            for t in temps.value:
                lines.append(f"  {t.get('sensor_key', 'N/A')[:30]:30} {t.get('temperature', 0):>6.1f} C")

        lines.append("")
        lines.append(f"{'=' * 60}")

        return "\n".join(lines)
