# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from datafortress.core.constants import SourceType
from datafortress.core.exceptions import DataFortressError, ExportError
from datafortress.models.report import AuditReport

app = typer.Typer(
    name="datafortress",
    help="Risk assessment from SQL health, AD membership and backup log exports",
    no_args_is_help=True,
)


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"
    JSON_SUMMARY = "json-summary"
    TEXT = "text"


@app.command()
def audit(
    sql: Annotated[
        Path | None, typer.Option("--sql", help="sp_Blitz health check CSV export")
    ] = None,
    ad: Annotated[
        Path | None, typer.Option("--ad", help="AD group membership CSV export")
    ] = None,
    backup: Annotated[
        Path | None, typer.Option("--backup", help="Backup job event log CSV export")
    ] = None,
    client: Annotated[
        str | None, typer.Option("--client", "-c", help="Client name for the report header")
    ] = None,
    fmt: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    no_validate: Annotated[
        bool,
        typer.Option("--no-validate", help="Accept exports that fail header fingerprinting"),
    ] = False,
    ci_mode: Annotated[
        bool,
        typer.Option("--ci-mode", help="Exit with a code derived from the overall risk"),
    ] = False,
) -> None:
    """Analyze up to three CSV exports and produce a fused risk report."""
    from datafortress.ci.exit_codes import CIExitCode, severity_to_exit_code
    from datafortress.core.config import get_settings
    from datafortress.core.logging import setup_logging
    from datafortress.engine.pipeline import AuditPipeline
    from datafortress.ingestion.fingerprint import load_source

    error_code = int(CIExitCode.AUDIT_ERROR) if ci_mode else 1
    try:
        settings = get_settings()
    except DataFortressError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(error_code) from exc
    setup_logging(settings.log_level, settings.log_format)

    inputs = {SourceType.SQL: sql, SourceType.AD: ad, SourceType.BACKUP: backup}
    if not any(inputs.values()):
        typer.echo("Supply at least one of --sql, --ad or --backup.", err=True)
        raise typer.Exit(error_code)

    records: dict[SourceType, tuple[dict[str, str], ...] | None] = {}
    for slot, path in inputs.items():
        if path is None:
            records[slot] = None
            continue
        try:
            records[slot] = load_source(path, slot, strict=not no_validate).records
        except DataFortressError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(error_code) from exc

    report = AuditPipeline(settings=settings).run(
        sql=records[SourceType.SQL],
        ad=records[SourceType.AD],
        backup=records[SourceType.BACKUP],
        client_name=client,
    )
    try:
        _output_report(report, fmt or OutputFormat(settings.default_format), output)
    except DataFortressError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(error_code) from exc

    if ci_mode:
        raise typer.Exit(int(severity_to_exit_code(report.overall)))


def _output_report(report: AuditReport, fmt: OutputFormat, output: Path | None) -> None:
    if fmt == OutputFormat.CONSOLE:
        from datafortress.cli.formatters.console import format_report
        format_report(report)
    elif fmt == OutputFormat.JSON:
        from datafortress.cli.formatters.json_fmt import format_json
        _write_output(format_json(report), output)
    elif fmt == OutputFormat.JSON_SUMMARY:
        from datafortress.cli.formatters.json_fmt import format_json_summary
        _write_output(format_json_summary(report), output)
    elif fmt == OutputFormat.TEXT:
        from datafortress.cli.formatters.text import format_text
        _write_output(format_text(report), output)


def _write_output(text: str, output: Path | None) -> None:
    if output:
        try:
            output.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ExportError(f"Failed to write {output}: {exc}") from exc
        typer.echo(f"Output written to {output}")
    else:
        sys.stdout.write(text + "\n")


@app.command()
def validate(
    path: Annotated[Path, typer.Argument(help="CSV export to check")],
    slot: Annotated[
        SourceType | None,
        typer.Option("--slot", "-s", help="Source slot the file is meant for"),
    ] = None,
) -> None:
    """Check which source type a CSV export fingerprints as."""
    from datafortress.ingestion.csv_reader import read_csv_file
    from datafortress.ingestion.fingerprint import detect_source_type, validate_upload

    try:
        parsed = read_csv_file(path)
    except DataFortressError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    if slot is None:
        detected = detect_source_type(parsed.headers)
        if detected is None:
            typer.echo("Unknown file format. Ensure it's a valid CSV export.", err=True)
            raise typer.Exit(1)
        typer.echo(f"{path}: {detected.display_name} ({len(parsed.records)} records)")
        return

    result = validate_upload(slot, parsed)
    if not result.valid:
        typer.echo(f"{path}: {result.error}", err=True)
        raise typer.Exit(1)
    typer.echo(f"{path}: verified as {slot.display_name} ({len(parsed.records)} records)")


@app.command()
def version() -> None:
    """Show version information."""
    from datafortress import __version__

    typer.echo(f"datafortress v{__version__}")
