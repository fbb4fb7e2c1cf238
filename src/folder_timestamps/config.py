"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "folder_timestamps.toml"
OUTPUT_FORMATS = ("table", "json")


@dataclass(slots=True, frozen=True)
class ReportConfig:
    """Report presentation settings."""

    utc: bool = False
    output_format: str = "table"


@dataclass(slots=True, frozen=True)
class DiagnosticsConfig:
    """Where recoverable scan failures are reported."""

    echo: bool = True
    event_log: Path | None = None


@dataclass(slots=True, frozen=True)
class AppConfig:
    """Fully merged configuration for one scan."""

    root: Path
    report: ReportConfig
    diagnostics: DiagnosticsConfig

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot."""
        return {
            "root": str(self.root),
            "report": {
                "utc": self.report.utc,
                "format": self.report.output_format,
            },
            "diagnostics": {
                "echo": self.diagnostics.echo,
                "event_log": (
                    str(self.diagnostics.event_log)
                    if self.diagnostics.event_log is not None
                    else None
                ),
            },
        }


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional command-line overrides applied at highest precedence."""

    utc: bool | None = None
    output_format: str | None = None
    echo: bool | None = None
    event_log: Path | None = None


def default_config(root: Path) -> AppConfig:
    """Build default config for a scan root."""
    return AppConfig(
        root=root.resolve(),
        report=ReportConfig(),
        diagnostics=DiagnosticsConfig(),
    )


def load_config_file(root: Path) -> dict[str, object]:
    """Load optional folder_timestamps.toml from the scan root."""
    config_path = root / CONFIG_FILE_NAME
    if not config_path.is_file():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _optional_bool(payload: dict[str, object], section: str, field: str, default: bool) -> bool:
    if field not in payload:
        return default
    value = payload[field]
    if not isinstance(value, bool):
        raise ValueError(f"Config field '{section}.{field}' must be a boolean.")
    return value


def _output_format(value: object, name: str) -> str:
    if not isinstance(value, str) or value not in OUTPUT_FORMATS:
        choices = ", ".join(OUTPUT_FORMATS)
        raise ValueError(f"Config field '{name}' must be one of: {choices}.")
    return value


def merge_config(base: AppConfig, payload: dict[str, object], overrides: CliOverrides) -> AppConfig:
    """Merge defaults, config file, then command-line overrides."""
    report_payload = _get_table(payload, "report")
    diagnostics_payload = _get_table(payload, "diagnostics")

    utc = _optional_bool(report_payload, "report", "utc", base.report.utc)
    output_format = base.report.output_format
    if "format" in report_payload:
        output_format = _output_format(report_payload["format"], "report.format")

    echo = _optional_bool(diagnostics_payload, "diagnostics", "echo", base.diagnostics.echo)
    event_log = base.diagnostics.event_log
    if "event_log" in diagnostics_payload:
        raw_event_log = diagnostics_payload["event_log"]
        if not isinstance(raw_event_log, str) or not raw_event_log.strip():
            raise ValueError("Config field 'diagnostics.event_log' must be a non-empty string.")
        event_log = (base.root / raw_event_log).resolve()
        if not event_log.is_relative_to(base.root):
            raise ValueError(
                "Config field 'diagnostics.event_log' must stay inside the analyzed directory."
            )

    merged = AppConfig(
        root=base.root,
        report=ReportConfig(utc=utc, output_format=output_format),
        diagnostics=DiagnosticsConfig(echo=echo, event_log=event_log),
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: AppConfig, overrides: CliOverrides) -> AppConfig:
    """Apply command-line overrides at highest precedence."""
    output_format = config.report.output_format
    if overrides.output_format is not None:
        output_format = _output_format(overrides.output_format, "overrides.output_format")
    report = ReportConfig(
        utc=overrides.utc if overrides.utc is not None else config.report.utc,
        output_format=output_format,
    )
    event_log = config.diagnostics.event_log
    if overrides.event_log is not None:
        event_log = overrides.event_log.resolve()
    diagnostics = DiagnosticsConfig(
        echo=overrides.echo if overrides.echo is not None else config.diagnostics.echo,
        event_log=event_log,
    )
    return AppConfig(root=config.root, report=report, diagnostics=diagnostics)


def load_effective_config(root: Path, overrides: CliOverrides | None = None) -> AppConfig:
    """Load effective config using merge order defaults -> config file -> overrides."""
    base = default_config(root)
    payload = load_config_file(base.root)
    return merge_config(base, payload, overrides or CliOverrides())
