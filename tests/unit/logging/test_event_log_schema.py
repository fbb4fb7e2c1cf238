from __future__ import annotations

import json
from pathlib import Path

from folder_timestamps.logging import (
    ENUMERATION_FAILED,
    STAT_FAILED,
    JsonlEventLog,
    ScanEvent,
    build_event,
    describe_event,
)


def test_event_log_writes_jsonl_schema(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "events.jsonl"
    log = JsonlEventLog(path)
    error = PermissionError(13, "Permission denied", "/data/locked")

    log.append(build_event(ENUMERATION_FAILED, "/data/locked", error))

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert set(event.keys()) == {"kind", "message", "path", "timestamp"}
    assert event["kind"] == ENUMERATION_FAILED
    assert event["path"] == "/data/locked"
    assert event["message"] == "Permission denied"
    assert event["timestamp"].endswith("Z")


def test_append_keeps_earlier_lines(tmp_path: Path) -> None:
    path = tmp_path / "events.jsonl"
    log = JsonlEventLog(path)
    for index in range(3):
        log.append(
            ScanEvent(
                timestamp=f"2024-01-0{index + 1}T00:00:00.000Z",
                kind=STAT_FAILED,
                path=f"/data/{index}.txt",
                message="No such file or directory",
            )
        )

    entries = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]

    assert [entry["path"] for entry in entries] == ["/data/0.txt", "/data/1.txt", "/data/2.txt"]


def test_event_descriptions_name_the_failed_path() -> None:
    listing = ScanEvent("t", ENUMERATION_FAILED, "/data/locked", "Permission denied")
    stat = ScanEvent("t", STAT_FAILED, "/data/gone.txt", "No such file or directory")

    assert describe_event(listing) == "Error scanning directory /data/locked: Permission denied"
    assert (
        describe_event(stat)
        == "Could not read timestamps for /data/gone.txt: No such file or directory"
    )


def test_build_event_falls_back_to_exception_text() -> None:
    event = build_event(STAT_FAILED, "/x", OSError("custom failure"))

    assert event.message == "custom failure"
