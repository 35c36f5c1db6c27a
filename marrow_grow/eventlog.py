from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from marrow_grow.types import Severity


@dataclass
class LogEntry:
    tick: int
    message: str
    severity: Severity
    at: float


class EventLog:
    """Player-facing message log keeping only the most recent entries."""

    def __init__(self, max_entries: int = 10) -> None:
        self._events: deque[LogEntry] = deque(maxlen=max_entries)

    def emit(self, tick: int, message: str, severity: Severity = Severity.INFO,
             at: float = 0.0) -> LogEntry:
        entry = LogEntry(tick=tick, message=message, severity=severity, at=at)
        self._events.append(entry)
        return entry

    def entries(self) -> list[LogEntry]:
        """Newest first."""
        return list(reversed(self._events))

    def query(self, severity: Severity | None = None) -> list[LogEntry]:
        result = self.entries()
        if severity is not None:
            result = [e for e in result if e.severity is severity]
        return result

    def last(self, severity: Severity | None = None) -> LogEntry | None:
        for e in reversed(self._events):
            if severity is None or e.severity is severity:
                return e
        return None

    def snapshot(self) -> list[dict]:
        return [
            {"tick": e.tick, "message": e.message, "type": e.severity.value, "at": e.at}
            for e in self.entries()
        ]

    def __len__(self) -> int:
        return len(self._events)
