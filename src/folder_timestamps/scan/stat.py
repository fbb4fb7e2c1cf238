"""Filesystem timestamp access for individual files."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from datetime import UTC, datetime

from folder_timestamps.scan.models import FileTimes

StatAccessor = Callable[[str], FileTimes]


def read_file_times(path: str) -> FileTimes:
    """Return creation and modification times for ``path``.

    Raises ``OSError`` when the file cannot be stat'ed. Creation time is
    ``None`` on platforms that do not expose a birth time.
    """
    stat = os.stat(path, follow_symlinks=False)
    return FileTimes(
        created=_from_epoch(_birth_time(stat)),
        modified=_from_epoch(stat.st_mtime),
    )


def _birth_time(stat: os.stat_result) -> float | None:
    birthtime = getattr(stat, "st_birthtime", None)
    if birthtime is not None:
        return float(birthtime)
    # st_ctime is the creation time on Windows before st_birthtime existed.
    if sys.platform == "win32":
        return float(stat.st_ctime)
    return None


def _from_epoch(value: float | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromtimestamp(value, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None
