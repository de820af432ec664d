"""Output sink: serialize each snapshot and emit it."""

from __future__ import annotations

import logging
from typing import TextIO

from .errors import StartupError
from .formatters import BaseFormatter, JsonFormatter
from .models import Snapshot
from .utils import output_text


class StreamSink:
    """Write one formatted document per snapshot to stdout or a file.

    An output file is opened for appending up front, so an unusable path
    fails before the first pass rather than after it.
    """

    def __init__(
        self,
        formatter: BaseFormatter | None = None,
        output_file: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.formatter = formatter or JsonFormatter()
        self.output_file = output_file
        self.log = logger or logging.getLogger("tinytop.sink")
        self.emitted = 0
        self._stream: TextIO | None = None

        if output_file:
            try:
                self._stream = open(output_file, "a", encoding="utf-8")
            except OSError as e:
                raise StartupError(f"cannot open output file {output_file!r}: {e}") from e

    def __call__(self, snapshot: Snapshot) -> None:
        output_text(self.formatter.format(snapshot), self._stream)
        self.emitted += 1

        errors = snapshot.errors()
        self.log.debug(
            "Snapshot emitted",
            extra={"passes": self.emitted, "error": errors or None},
        )

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None
