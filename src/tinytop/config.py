from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass, field

from .errors import ConfigError

_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(text: str) -> float:
    """Parse ``1s``, ``500ms``, ``1m30s`` or a bare number of seconds.

    Returns seconds as a float. Raises ``ValueError`` on anything else.
    """
    raw = text.strip()
    if not raw:
        raise ValueError("empty duration")

    try:
        value = float(raw)
    except ValueError:
        pass
    else:
        if not math.isfinite(value):
            raise ValueError(f"invalid duration: {text!r}")
        return value

    sign = 1.0
    if raw[0] in "+-":
        sign = -1.0 if raw[0] == "-" else 1.0
        raw = raw[1:]

    total = 0.0
    pos = 0
    while pos < len(raw):
        match = _DURATION_PART.match(raw, pos)
        if match is None:
            raise ValueError(f"invalid duration: {text!r}")
        total += float(match.group(1)) * _UNITS[match.group(2)]
        pos = match.end()

    if pos == 0:
        raise ValueError(f"invalid duration: {text!r}")
    return sign * total


def format_duration(seconds: float) -> str:
    """Render seconds compactly, e.g. ``1s``, ``500ms``, ``2m0s``."""
    if seconds == 0:
        return "0s"
    if abs(seconds) < 1:
        ms = seconds * 1000
        return f"{ms:g}ms"
    if abs(seconds) < 60:
        return f"{seconds:g}s"
    minutes, secs = divmod(seconds, 60)
    if minutes < 60:
        return f"{int(minutes)}m{secs:g}s"
    hours, minutes = divmod(minutes, 60)
    return f"{int(hours)}h{int(minutes)}m{secs:g}s"


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _get_duration(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return parse_duration(raw)
    except ValueError:
        return default


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw not in {"0", "false", "False"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Environment-backed defaults for the command line."""

    service_name: str = field(default_factory=lambda: _get_str("SERVICE_NAME", "tinytop"))
    default_interval_seconds: float = field(
        default_factory=lambda: _get_duration("TINYTOP_INTERVAL", 1.0)
    )
    default_duration_seconds: float = field(
        default_factory=lambda: _get_duration("TINYTOP_DURATION", 1.0)
    )
    default_log_file: str = field(
        default_factory=lambda: _get_str("TINYTOP_LOG_FILE", "tinytop.log")
    )
    log_to_stdout: bool = field(default_factory=lambda: _get_bool("TINYTOP_STDOUT", False))
    log_level: str = field(default_factory=lambda: _get_str("LOG_LEVEL", "INFO"))


settings = Settings()


@dataclass(frozen=True, slots=True)
class Config:
    """Run configuration, validated once and never mutated."""

    interval: float
    duration: float
    log_file: str = "tinytop.log"
    log_to_stdout: bool = False
    output_format: str = "json"
    output_file: str | None = None

    def __post_init__(self) -> None:
        if not (math.isfinite(self.interval) and math.isfinite(self.duration)):
            raise ConfigError(
                f"interval and duration must be finite, got {self.interval!r} and {self.duration!r}"
            )
        if not self.interval > 0:
            raise ConfigError(f"interval must be positive, got {format_duration(self.interval)}")
        if not self.duration > 0:
            raise ConfigError(f"duration must be positive, got {format_duration(self.duration)}")
