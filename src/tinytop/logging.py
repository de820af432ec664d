from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .errors import ConfigError, StartupError

LOGGER_NAME = "tinytop"

# Structured extras copied from log records when present.
EXTRA_KEYS = (
    "user",
    "sudo",
    "interval",
    "duration",
    "subsystem",
    "error",
    "mountpoint",
    "passes",
    "reason",
    "host_info",
    "cpu_info",
)


def _timestamp(record: logging.LogRecord) -> str:
    ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _extras(record: logging.LogRecord) -> dict[str, Any]:
    return {key: getattr(record, key) for key in EXTRA_KEYS if hasattr(record, key)}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": _timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_extras(record))

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable ``ts LEVEL message key=value`` lines for the terminal."""

    def format(self, record: logging.LogRecord) -> str:
        parts = [_timestamp(record), f"{record.levelname:<7}", record.getMessage()]
        for key, value in _extras(record).items():
            if isinstance(value, (dict, list)):
                value = json.dumps(value, ensure_ascii=False, default=str)
            parts.append(f"{key}={value}")
        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(
    log_file: str,
    *,
    to_stdout: bool = False,
    level: str = "INFO",
) -> logging.Logger:
    """Build the process-wide logging handle.

    - JSON lines to *log_file* (truncated on open).
    - Optional human-readable copy on stdout.
    - Reconfiguring replaces the previous handlers.
    """
    log_level = level.upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"unknown log level: {level!r}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    try:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    except OSError as e:
        raise StartupError(f"cannot open log file {log_file!r}: {e}") from e
    file_handler.setLevel(log_level)
    file_handler.setFormatter(JsonFormatter())
    logger.addHandler(file_handler)

    if to_stdout:
        console = logging.StreamHandler(stream=sys.stdout)
        console.setLevel(log_level)
        console.setFormatter(ConsoleFormatter())
        logger.addHandler(console)

    return logger


def close_logging(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
