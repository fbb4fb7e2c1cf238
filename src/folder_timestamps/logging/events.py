"""Structured JSONL scan diagnostics."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path

ENUMERATION_FAILED = "enumeration_failed"
STAT_FAILED = "stat_failed"


@dataclass(slots=True, frozen=True)
class ScanEvent:
    """One recoverable failure observed during a scan."""

    timestamp: str
    kind: str
    path: str
    message: str


EventHandler = Callable[[ScanEvent], None]


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_event(kind: str, path: str, error: OSError) -> ScanEvent:
    """Build a timestamped event from an absorbed filesystem error."""
    message = error.strerror or str(error)
    return ScanEvent(timestamp=utc_timestamp(), kind=kind, path=path, message=message)


def describe_event(event: ScanEvent) -> str:
    """Return the human-readable diagnostic line for an event."""
    if event.kind == ENUMERATION_FAILED:
        return f"Error scanning directory {event.path}: {event.message}"
    if event.kind == STAT_FAILED:
        return f"Could not read timestamps for {event.path}: {event.message}"
    return f"{event.kind} {event.path}: {event.message}"


class JsonlEventLog:
    """Append-only JSONL event log."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, event: ScanEvent) -> None:
        """Append an event as one JSON object per line."""
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(event), sort_keys=True))
            handle.write("\n")
