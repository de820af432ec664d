from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    """A controlled, user-facing error.

    Use this for invalid flags, unwritable log destinations, etc.
    """

    exit_code: int
    code: str
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.code}: {self.message}"


class ConfigError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(exit_code=2, code="config_error", message=message)


class StartupError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(exit_code=1, code="startup_error", message=message)


@dataclass(eq=False)
class SubsystemError(Exception):
    """A mandatory subsystem query failed; the assembly pass is void."""

    subsystem: str
    error: str

    def __str__(self) -> str:
        return f"{self.subsystem}: {self.error}"
