from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from domain import ClockPort

from .clock import SystemClock


class StructuredLogger:
    """Writes one JSON object per log event, one event per line."""

    def __init__(
        self,
        *,
        stream: TextIO | None = None,
        clock: ClockPort | None = None,
        name: str = "config-store",
    ) -> None:
        self._stream = stream
        self._clock = clock or SystemClock()
        self._name = name

    def info(self, message: str, **fields: Any) -> None:
        self._emit("info", message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._emit("warning", message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._emit("error", message, fields)

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        payload = {
            "ts": self._clock.now().isoformat(),
            "logger": self._name,
            "level": level,
            "message": message,
            "fields": fields,
        }
        # Resolved per call so pytest's capsys sees the current stderr.
        stream = self._stream or sys.stderr
        print(json.dumps(payload, sort_keys=True, default=str), file=stream)
