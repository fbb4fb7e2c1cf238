"""Directory scanning and aggregation package."""

from .aggregator import scan_directory
from .models import DirectoryRecord, FileTimes, ScanSummary, later, summarize
from .stat import StatAccessor, read_file_times

__all__ = [
    "DirectoryRecord",
    "FileTimes",
    "ScanSummary",
    "StatAccessor",
    "later",
    "read_file_times",
    "scan_directory",
    "summarize",
]
