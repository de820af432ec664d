"""Shared utility functions."""

from __future__ import annotations

import sys
from typing import TextIO


def bytes_to_human(n: int | float) -> str:
    """Convert bytes to human-readable string (e.g. 1.00 MB)."""
    value = float(n)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if abs(value) < 1024.0:
            return f"{value:.2f} {unit}"
        value /= 1024.0
    return f"{value:.2f} PB"


def format_uptime(seconds: float) -> str:
    """Format uptime in human-readable format."""
    days, remainder = divmod(int(seconds), 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")

    return " ".join(parts)


def output_text(data: str, stream: TextIO | None = None) -> None:
    """Write *data* plus a newline to *stream* (default stdout) and flush."""
    out = stream if stream is not None else sys.stdout
    out.write(data + "\n")
    out.flush()
