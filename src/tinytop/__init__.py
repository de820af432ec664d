"""
tinytop

Point-in-time and periodic host metrics sampler: CPU, memory, disk and sensor
state, emitted as JSON on a fixed interval until a duration elapses or the
process is interrupted.
"""

from __future__ import annotations

from .assembler import SnapshotAssembler
from .models import Ok, Snapshot, Unavailable
from .scheduler import RunOutcome, Scheduler, StopReason

__all__ = [
    "Ok",
    "RunOutcome",
    "Scheduler",
    "Snapshot",
    "SnapshotAssembler",
    "StopReason",
    "Unavailable",
    "__version__",
]

__version__ = "0.1.0"
