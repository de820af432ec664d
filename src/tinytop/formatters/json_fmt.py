"""JSON formatter."""

from __future__ import annotations

import json

from ..models import Snapshot
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Format snapshot as indented JSON; failed fields carry a ``*_err`` sibling."""

    def format(self, snapshot: Snapshot) -> str:
        return json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2, default=str)
