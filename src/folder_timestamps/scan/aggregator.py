"""Recursive directory scan with bottom-up timestamp and count aggregation."""

from __future__ import annotations

import os

from folder_timestamps.logging import (
    ENUMERATION_FAILED,
    STAT_FAILED,
    EventHandler,
    build_event,
)
from folder_timestamps.scan.models import DirectoryRecord, FileTimes, later
from folder_timestamps.scan.stat import StatAccessor, read_file_times

_FILE = "file"
_DIRECTORY = "directory"


def scan_directory(
    directory: str,
    *,
    read_times: StatAccessor = read_file_times,
    on_event: EventHandler | None = None,
) -> tuple[DirectoryRecord, ...]:
    """Scan ``directory`` and every subdirectory below it.

    Returns one record per visited directory. The first element is the record
    for ``directory`` itself; each subtree follows in name order of discovery,
    with every child's own record placed ahead of its descendants.

    Enumeration and stat failures are reported through ``on_event`` and never
    abort the scan: an unreadable directory still yields an empty record.
    """
    file_count = 0
    cumulative_file_count = 0
    latest_created = None
    latest_modified = None
    descendants: list[DirectoryRecord] = []

    for name, kind in _list_entries(directory, on_event):
        full_path = os.path.join(directory, name)
        if kind == _FILE:
            file_count += 1
            cumulative_file_count += 1
            times = _safe_file_times(full_path, read_times, on_event)
            latest_created = later(latest_created, times.created)
            latest_modified = later(latest_modified, times.modified)
            continue
        subtree = scan_directory(full_path, read_times=read_times, on_event=on_event)
        descendants.extend(subtree)
        child = subtree[0]
        cumulative_file_count += child.cumulative_file_count
        latest_created = later(latest_created, child.latest_created)
        latest_modified = later(latest_modified, child.latest_modified)

    record = DirectoryRecord(
        path=directory,
        latest_created=latest_created,
        latest_modified=latest_modified,
        file_count=file_count,
        cumulative_file_count=cumulative_file_count,
    )
    return (record, *descendants)


def _list_entries(directory: str, on_event: EventHandler | None) -> list[tuple[str, str]]:
    """Return ``(name, kind)`` pairs for plain files and real directories."""
    try:
        with os.scandir(directory) as entries:
            ordered_entries = sorted(entries, key=lambda item: item.name)
    except OSError as exc:
        _emit(on_event, ENUMERATION_FAILED, directory, exc)
        return []

    output: list[tuple[str, str]] = []
    for entry in ordered_entries:
        # Symlinks are never followed, which keeps the walk free of cycles.
        try:
            if entry.is_symlink():
                continue
            if entry.is_file(follow_symlinks=False):
                output.append((entry.name, _FILE))
            elif entry.is_dir(follow_symlinks=False):
                output.append((entry.name, _DIRECTORY))
        except OSError as exc:
            _emit(on_event, STAT_FAILED, os.path.join(directory, entry.name), exc)
    return output


def _safe_file_times(
    path: str, read_times: StatAccessor, on_event: EventHandler | None
) -> FileTimes:
    try:
        return read_times(path)
    except OSError as exc:
        _emit(on_event, STAT_FAILED, path, exc)
        return FileTimes.empty()


def _emit(on_event: EventHandler | None, kind: str, path: str, error: OSError) -> None:
    if on_event is None:
        return
    on_event(build_event(kind, path, error))
