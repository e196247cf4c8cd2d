# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for audit reports."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from datafortress import __version__
from datafortress.core.constants import BackupStatus, Severity
from datafortress.models.report import AuditReport
from datafortress.models.verdict import BackupVerdict, SourceVerdict

console = Console()

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "bold green",
    Severity.UNKNOWN: "dim",
}

STATUS_COLORS: dict[BackupStatus, str] = {
    BackupStatus.FAIL: "bold red",
    BackupStatus.PASS: "bold green",
    BackupStatus.UNKNOWN: "dim",
}


def _source_table(title: str, verdict: SourceVerdict) -> Table:
    risk_color = SEVERITY_COLORS[verdict.risk]
    table = Table(title=f"{title}  [{risk_color}]{verdict.risk}[/{risk_color}]", expand=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Finding", style="bold")
    table.add_column("Details")
    for finding in verdict.findings:
        sev_color = SEVERITY_COLORS[finding.severity]
        table.add_row(
            Text(finding.severity, style=sev_color),
            escape(finding.title),
            f"{escape(finding.description)}\n[dim italic]{escape(finding.impact)}[/dim italic]",
        )
    return table


def _backup_table(verdict: BackupVerdict) -> Table:
    status_color = STATUS_COLORS[verdict.status]
    table = Table(
        title=f"Backup Integrity  [{status_color}]{verdict.status}[/{status_color}]",
        show_header=False,
        expand=True,
    )
    table.add_column("key", style="dim")
    table.add_column("value")
    last = verdict.last_success_timestamp
    latest = verdict.most_recent_log_timestamp
    table.add_row("Hours since success:", f"{verdict.hours_since_success:.1f}h")
    table.add_row("Last success:", last.isoformat() if last else "NEVER")
    table.add_row("Most recent log:", latest.isoformat() if latest else "-")
    table.add_row("Failures since success:", str(verdict.failure_count_since_success))
    if verdict.unparseable_timestamps:
        table.add_row("Unreadable timestamps:", str(verdict.unparseable_timestamps))
    return table


def format_report(report: AuditReport) -> None:
    """Print an audit report to the console with Rich formatting."""
    console.print()
    console.print(f"[bold]datafortress v{__version__}[/bold] - Risk Assessment & Audit Tool")
    console.print()

    overall_color = SEVERITY_COLORS[report.overall]
    headline = (
        "Immediate action required."
        if report.overall == Severity.CRITICAL
        else "Systems appear healthy."
    )
    console.print(
        Panel(
            f"[{overall_color}]OVERALL RISK: {report.overall}[/{overall_color}]\n"
            f"The organization is currently operating at a {report.overall} risk level. {headline}",
            title=escape(report.client_name) or None,
            style=overall_color,
        )
    )
    console.print()

    for title, verdict in (("SQL Health", report.sql), ("AD Security", report.ad)):
        if verdict.findings:
            console.print(_source_table(title, verdict))
        else:
            risk_color = SEVERITY_COLORS[verdict.risk]
            console.print(
                f"  {title}: [{risk_color}]{verdict.risk}[/{risk_color}]"
                + ("  no data supplied" if verdict.risk == Severity.UNKNOWN else "  no issues")
            )
        console.print()

    console.print(_backup_table(report.backup))
    console.print()

    console.print("[bold]Immediate Actions[/bold]")
    for item in report.remediation:
        item_color = SEVERITY_COLORS[item.severity]
        console.print(f"  {item.priority}. [{item_color}]{item.title}[/{item_color}]")
        console.print(f"     {escape(item.rationale)}", style="dim")
    console.print()
