"""Command-line entrypoint for the folder timestamps analyzer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from folder_timestamps import __version__
from folder_timestamps.config import AppConfig, CliOverrides, load_effective_config
from folder_timestamps.logging import EventHandler, JsonlEventLog, ScanEvent, describe_event
from folder_timestamps.paths import is_valid_directory, normalize_path
from folder_timestamps.report import build_rows, render_json, render_table
from folder_timestamps.scan import scan_directory, summarize

PROG = "folder-timestamps"

HELP_TEXT = f"""\
Folder Timestamps Analyzer

DESCRIPTION:
    Recursively scans a directory and reports the latest created and
    modified file timestamps for each folder in the hierarchy.

USAGE:
    {PROG} <directory-path> [options]

ARGUMENTS:
    <directory-path>    Path to the root directory to analyze

OPTIONS:
    --help, -h          Show this help message
    --version           Show the version and exit
    --utc               Show dates in UTC instead of local time
    --json              Print the report as JSON instead of a table
    --event-log PATH    Append scan diagnostics to a JSONL file
    --quiet             Do not echo scan diagnostics on stderr

EXAMPLES:
    {PROG} /path/to/folder
    {PROG} ./my-project
    {PROG} C:\\Users\\Documents

OUTPUT FORMAT:
    Displays a table with four columns:
    - Folder Path (shown as (root)/subdirectory)
    - Created (latest file creation date in the folder tree)
    - Modified (latest file modification date in the folder tree)
    - Files (format: current (total) - files in folder and cumulative count)

CONFIGURATION:
    An optional folder_timestamps.toml in the analyzed directory may set
    [report] utc / format and [diagnostics] echo / event_log.
    Command-line options take precedence.

NOTES:
    - Requires read permissions for the target directory
    - Recursively processes all subdirectories
    - Symbolic links are not followed
    - Created dates need a platform that exposes file birth times
      (macOS, Windows); elsewhere the Created column shows "-"
    - Empty folders show no dates
    - The root folder shows the latest dates from all its contents

VERSION: {__version__}
"""


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser; help is handled by ``main`` to control exit codes."""
    parser = argparse.ArgumentParser(prog=PROG, add_help=False)
    parser.add_argument("directory", nargs="?", default=None)
    parser.add_argument("--version", action="store_true")
    parser.add_argument("--utc", action="store_true", default=None)
    parser.add_argument("--json", action="store_true", default=False)
    parser.add_argument("--event-log", required=False, default=None)
    parser.add_argument("--quiet", action="store_true", default=False)
    return parser


def build_overrides(args: argparse.Namespace) -> CliOverrides:
    """Translate parsed arguments into config overrides."""
    return CliOverrides(
        utc=args.utc,
        output_format="json" if args.json else None,
        echo=False if args.quiet else None,
        event_log=Path(args.event_log) if args.event_log is not None else None,
    )


def build_event_handler(config: AppConfig, err_stream: TextIO) -> EventHandler:
    """Return a handler echoing and/or persisting scan diagnostics."""
    event_log = (
        JsonlEventLog(config.diagnostics.event_log)
        if config.diagnostics.event_log is not None
        else None
    )
    echo = config.diagnostics.echo

    def handle(event: ScanEvent) -> None:
        if echo:
            err_stream.write(f"{describe_event(event)}\n")
        if event_log is not None:
            event_log.append(event)

    return handle


def run_scan(config: AppConfig, root: str, on_event: EventHandler, out_stream: TextIO) -> None:
    """Scan ``root`` and write the configured report."""
    if config.report.output_format == "json":
        records = scan_directory(root, on_event=on_event)
        render_json(
            records, summarize(records), root, out_stream, settings=config.to_public_dict()
        )
        return
    out_stream.write(f"Analyzing folder: {root}\n\n")
    records = scan_directory(root, on_event=on_event)
    rows = build_rows(records, root, utc=config.report.utc)
    render_table(rows, summarize(records), out_stream)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the analyzer process."""
    raw_args = sys.argv[1:] if argv is None else argv
    if not raw_args:
        sys.stdout.write(HELP_TEXT)
        return 1

    if "-h" in raw_args or "--help" in raw_args:
        sys.stdout.write(HELP_TEXT)
        return 0

    # Tokens beyond the directory and known options are ignored.
    args, _unknown = build_arg_parser().parse_known_args(raw_args)
    if args.version:
        sys.stdout.write(f"{PROG} {__version__}\n")
        return 0
    if args.directory is None:
        sys.stdout.write(HELP_TEXT)
        return 1

    if not is_valid_directory(args.directory):
        sys.stderr.write(f"Error: '{args.directory}' is not a valid directory.\n")
        sys.stderr.write("Use --help for usage information.\n")
        return 1

    root = normalize_path(args.directory)
    try:
        config = load_effective_config(Path(root), overrides=build_overrides(args))
        on_event = build_event_handler(config, sys.stderr)
    except (OSError, ValueError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1

    run_scan(config, root, on_event, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
