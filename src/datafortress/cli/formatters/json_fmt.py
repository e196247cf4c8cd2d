# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

import json

from datafortress.models.report import AuditReport


def format_json(report: AuditReport) -> str:
    """Return the audit report as formatted JSON string."""
    return report.model_dump_json(indent=2)


def format_json_summary(report: AuditReport) -> str:
    """Return a compact JSON summary (no full findings detail)."""
    data = {
        "client_name": report.client_name,
        "overall": report.overall,
        "sql_risk": report.sql.risk,
        "sql_finding_count": len(report.sql.findings),
        "ad_risk": report.ad.risk,
        "ad_finding_count": len(report.ad.findings),
        "backup_status": report.backup.status,
        "backup_hours_since_success": round(report.backup.hours_since_success, 1),
        "remediation": [item.title for item in report.remediation],
    }
    return json.dumps(data, indent=2)
