"""Structured diagnostics utilities."""

from .events import (
    ENUMERATION_FAILED,
    STAT_FAILED,
    EventHandler,
    JsonlEventLog,
    ScanEvent,
    build_event,
    describe_event,
    utc_timestamp,
)

__all__ = [
    "ENUMERATION_FAILED",
    "EventHandler",
    "JsonlEventLog",
    "STAT_FAILED",
    "ScanEvent",
    "build_event",
    "describe_event",
    "utc_timestamp",
]
