from __future__ import annotations

import os
from datetime import UTC, datetime
from pathlib import Path

import pytest

from folder_timestamps.scan import read_file_times


def test_modified_time_matches_os_stat(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")
    os.utime(target, (1_700_000_000, 1_700_000_000))

    times = read_file_times(str(target))

    assert times.modified == datetime.fromtimestamp(1_700_000_000, tz=UTC)
    if times.created is not None:
        assert times.created.tzinfo is not None


def test_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_file_times(str(tmp_path / "missing.txt"))
