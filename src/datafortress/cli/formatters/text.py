# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Plain-text summary for hand-off to clients."""

from __future__ import annotations

from datetime import date

from datafortress.core.constants import BackupStatus
from datafortress.models.report import AuditReport


def format_text(report: AuditReport, generated_on: date | None = None) -> str:
    """Return the downloadable plain-text summary of *report*."""
    generated_on = generated_on or date.today()
    lines = [
        "DATA FORTRESS REPORT",
        f"Client: {report.client_name}",
        f"Date: {generated_on.isoformat()}",
        f"RISK: {report.overall}",
        "",
        "FINDINGS:",
    ]
    findings: list[str] = []
    if report.backup.status == BackupStatus.FAIL:
        findings.append(f"- BACKUPS FAILED (Gap: {report.backup.hours_since_success:.1f}h)")
    findings.extend(f"- SQL: {f.title}" for f in report.sql.findings)
    findings.extend(f"- AD: {f.title}" for f in report.ad.findings)
    lines.extend(findings or ["- None"])

    lines.extend(["", "NEXT STEPS:"])
    lines.extend(
        f"{item.priority}. {item.title}: {item.rationale}" for item in report.remediation
    )
    return "\n".join(lines)
