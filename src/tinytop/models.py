"""Snapshot data model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A subsystem result that was read successfully."""

    value: T


@dataclass(frozen=True, slots=True)
class Unavailable:
    """A subsystem result that could not be read, with the reason why."""

    reason: str


Result = Ok[Any] | Unavailable


def _render(name: str, result: Result, out: dict[str, Any]) -> None:
    # Failed fields stay present as null and carry a sibling "<name>_err".
    if isinstance(result, Ok):
        out[name] = result.value
    else:
        out[name] = None
        out[f"{name}_err"] = result.reason


@dataclass(frozen=True, slots=True)
class PartitionUsage:
    partition: Mapping[str, Any]
    usage: Result

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"partition": dict(self.partition)}
        _render("usage", self.usage, out)
        return out


@dataclass(frozen=True, slots=True)
class Snapshot:
    """One point-in-time aggregation of every subsystem result.

    The field mapping is read-only; the values inside each ``Ok`` are plain
    data built fresh by every pass and are not frozen.
    """

    fields: Mapping[str, Result] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __getitem__(self, name: str) -> Result:
        return self.fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def value(self, name: str, default: Any = None) -> Any:
        """Return the populated value of *name*, or *default* if unavailable."""
        result = self.fields.get(name)
        if isinstance(result, Ok):
            return result.value
        return default

    def errors(self) -> dict[str, str]:
        """Reasons for every unavailable field, partitions included."""
        out: dict[str, str] = {}
        for name, result in self.fields.items():
            if isinstance(result, Unavailable):
                out[name] = result.reason
        for part in self.value("partitions", []):
            if isinstance(part.usage, Unavailable):
                out[f"partitions[{part.partition.get('mountpoint')}]"] = part.usage.reason
        return out

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for name, result in self.fields.items():
            if name == "partitions" and isinstance(result, Ok):
                out[name] = [p.to_dict() for p in result.value]
            else:
                _render(name, result, out)
        return out
