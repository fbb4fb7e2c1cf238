"""Root-relative display strings and cell formatting for report rows."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from folder_timestamps.scan import DirectoryRecord

ROOT_LABEL = "(root)"
MISSING_DATE = "-"


@dataclass(slots=True, frozen=True)
class ReportRow:
    """Display-ready cells for one directory record."""

    folder: str
    created: str
    modified: str
    files: str


def display_path(path: str, root: str, *, sep: str = os.sep) -> str:
    """Return ``path`` relative to ``root`` behind the root label."""
    if path == root:
        return ROOT_LABEL
    prefix = root if root.endswith(sep) else f"{root}{sep}"
    if not path.startswith(prefix):
        return path
    relative = path[len(prefix) :].replace(sep, "/").replace("\\", "/")
    return f"{ROOT_LABEL}/{relative}"


def format_date(value: datetime | None, *, utc: bool = False) -> str:
    """Format a timestamp as ``YYYY-MM-DD`` or the missing-date marker."""
    if value is None:
        return MISSING_DATE
    localized = value.astimezone(UTC) if utc else value.astimezone()
    return localized.strftime("%Y-%m-%d")


def format_file_counts(record: DirectoryRecord) -> str:
    """Return ``"<direct> (<cumulative>)"`` for a record."""
    return f"{record.file_count} ({record.cumulative_file_count})"


def build_rows(
    records: Sequence[DirectoryRecord],
    root: str,
    *,
    utc: bool = False,
    sep: str = os.sep,
) -> list[ReportRow]:
    """Format every record with the same display rules."""
    return [
        ReportRow(
            folder=display_path(record.path, root, sep=sep),
            created=format_date(record.latest_created, utc=utc),
            modified=format_date(record.latest_modified, utc=utc),
            files=format_file_counts(record),
        )
        for record in records
    ]
