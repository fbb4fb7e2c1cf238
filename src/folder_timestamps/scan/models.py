"""Typed models for directory scan results."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class FileTimes:
    """Creation and modification times reported for one file."""

    created: datetime | None
    modified: datetime | None

    @classmethod
    def empty(cls) -> FileTimes:
        """Return times for a file whose timestamps are unavailable."""
        return cls(created=None, modified=None)


@dataclass(slots=True, frozen=True)
class DirectoryRecord:
    """Aggregated timestamps and file counts for one visited directory."""

    path: str
    latest_created: datetime | None = None
    latest_modified: datetime | None = None
    file_count: int = 0
    cumulative_file_count: int = 0

    def to_public_dict(self) -> dict[str, object]:
        """Return a serializable snapshot of the record."""
        return {
            "path": self.path,
            "latest_created": _isoformat(self.latest_created),
            "latest_modified": _isoformat(self.latest_modified),
            "file_count": self.file_count,
            "cumulative_file_count": self.cumulative_file_count,
        }


@dataclass(slots=True, frozen=True)
class ScanSummary:
    """Totals reported below the scan table."""

    folder_count: int
    total_files: int


def later(current: datetime | None, candidate: datetime | None) -> datetime | None:
    """Return the later of two optional timestamps, ignoring absent values."""
    if candidate is None:
        return current
    if current is None or candidate > current:
        return candidate
    return current


def summarize(records: Sequence[DirectoryRecord]) -> ScanSummary:
    """Summarize a scan result whose first element is the root record."""
    if not records:
        return ScanSummary(folder_count=0, total_files=0)
    return ScanSummary(folder_count=len(records), total_files=records[0].cumulative_file_count)


def _isoformat(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat()
