"""Console table and JSON rendering for scan reports."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TextIO

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from folder_timestamps.report.display import ReportRow, display_path
from folder_timestamps.scan import DirectoryRecord, ScanSummary

HEADERS = ("Folder Path", "Created", "Modified", "Files")
DATE_COLUMN_WIDTH = 12
NO_FOLDERS_MESSAGE = "No folders found."


def _column_widths(rows: Sequence[ReportRow]) -> tuple[int, int, int, int]:
    folder = max([cell_len(HEADERS[0]), *(cell_len(row.folder) for row in rows)])
    files = max([cell_len(HEADERS[3]), *(cell_len(row.files) for row in rows)])
    return folder, DATE_COLUMN_WIDTH, DATE_COLUMN_WIDTH, files


def build_table(rows: Sequence[ReportRow]) -> Table:
    """Build a box-drawn table with one line per report row."""
    widths = _column_widths(rows)
    table = Table(box=box.SQUARE, header_style="bold", expand=False)
    for header, width in zip(HEADERS, widths, strict=True):
        table.add_column(header, min_width=width, no_wrap=True)
    for row in rows:
        # Text cells keep bracketed folder names from being parsed as markup.
        table.add_row(Text(row.folder), Text(row.created), Text(row.modified), Text(row.files))
    return table


def render_table(rows: Sequence[ReportRow], summary: ScanSummary, stream: TextIO) -> None:
    """Write the report table followed by the summary lines."""
    if not rows:
        stream.write(f"{NO_FOLDERS_MESSAGE}\n")
        return
    # Borders and one space of padding on each side of every column.
    width = sum(_column_widths(rows)) + 3 * len(HEADERS) + 1
    console = Console(
        file=stream,
        width=width,
        color_system="auto" if stream.isatty() else None,
        highlight=False,
        soft_wrap=False,
    )
    console.print(build_table(rows))
    stream.write(f"\nTotal folders analyzed: {summary.folder_count}\n")
    stream.write(f"Total files: {summary.total_files}\n")


def build_json_report(
    records: Sequence[DirectoryRecord],
    summary: ScanSummary,
    root: str,
    settings: dict[str, object] | None = None,
) -> dict[str, object]:
    """Return a serializable report mirroring the table contents.

    ``settings`` is the effective configuration snapshot, included when given.
    """
    folders: list[dict[str, object]] = []
    for record in records:
        payload = record.to_public_dict()
        payload["display_path"] = display_path(record.path, root)
        folders.append(payload)
    report: dict[str, object] = {
        "root": root,
        "folders": folders,
        "summary": {
            "folder_count": summary.folder_count,
            "total_files": summary.total_files,
        },
    }
    if settings is not None:
        report["config"] = settings
    return report


def render_json(
    records: Sequence[DirectoryRecord],
    summary: ScanSummary,
    root: str,
    stream: TextIO,
    settings: dict[str, object] | None = None,
) -> None:
    """Write the JSON report as one sorted-keys document."""
    payload = build_json_report(records, summary, root, settings)
    stream.write(json.dumps(payload, sort_keys=True, indent=2))
    stream.write("\n")
