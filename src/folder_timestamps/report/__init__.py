"""Report formatting package."""

from .display import (
    MISSING_DATE,
    ROOT_LABEL,
    ReportRow,
    build_rows,
    display_path,
    format_date,
    format_file_counts,
)
from .table import (
    HEADERS,
    NO_FOLDERS_MESSAGE,
    build_json_report,
    build_table,
    render_json,
    render_table,
)

__all__ = [
    "HEADERS",
    "MISSING_DATE",
    "NO_FOLDERS_MESSAGE",
    "ROOT_LABEL",
    "ReportRow",
    "build_json_report",
    "build_rows",
    "build_table",
    "display_path",
    "format_date",
    "format_file_counts",
    "render_json",
    "render_table",
]
