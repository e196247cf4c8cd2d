# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the console, JSON and plain-text report formatters."""

from __future__ import annotations

import json
from datetime import date
from io import StringIO

import pytest
from rich.console import Console

from datafortress import audit, audit_files
from datafortress.cli.formatters import console as console_fmt
from datafortress.cli.formatters.json_fmt import format_json, format_json_summary
from datafortress.cli.formatters.text import format_text

REPORT_DATE = date(2025, 12, 22)


@pytest.fixture
def critical_report(exports_dir):
    return audit_files(
        sql_path=exports_dir / "sp_blitz.csv",
        ad_path=exports_dir / "ad_members.csv",
        backup_path=exports_dir / "backup_failing.csv",
        client_name="Acme Corp",
    )


@pytest.fixture
def rich_output(monkeypatch) -> StringIO:
    buffer = StringIO()
    monkeypatch.setattr(
        console_fmt, "console", Console(file=buffer, width=160, color_system=None)
    )
    return buffer


class TestTextFormatter:
    def test_critical_report(self, critical_report):
        text = format_text(critical_report, generated_on=REPORT_DATE)
        assert text.splitlines() == [
            "DATA FORTRESS REPORT",
            "Client: Acme Corp",
            "Date: 2025-12-22",
            "RISK: CRITICAL",
            "",
            "FINDINGS:",
            "- BACKUPS FAILED (Gap: 72.0h)",
            "- SQL: No Backups: HR",
            "- SQL: Config Issue: Last good DBCC CHECKDB over 2 weeks old",
            "- SQL: Corruption Risk: Finance",
            "- SQL: Config Issue: Auto-Shrink Enabled",
            "- AD: Unsecured Admin: svc_backup",
            "- AD: Unsecured Admin: msp.support",
            "",
            "NEXT STEPS:",
            "1. Restore backup integrity: No successful backup for 72.0h (limit 24h). "
            "Last success: 2025-12-18 02:00 UTC. 3 failed job(s) since.",
            "2. Remove service and generic accounts from admin groups: "
            "2 flagged: Unsecured Admin: svc_backup; Unsecured Admin: msp.support.",
            "3. Resolve SQL Server health findings: No Backups: HR; Corruption Risk: Finance; "
            "Config Issue: Last good DBCC CHECKDB over 2 weeks old; "
            "Config Issue: Auto-Shrink Enabled.",
        ]

    def test_empty_report(self):
        text = format_text(audit(client_name="Initech"), generated_on=REPORT_DATE)
        lines = text.splitlines()
        assert "RISK: LOW" in lines
        assert lines[lines.index("FINDINGS:") + 1] == "- None"
        assert lines[-1] == "1. Routine Maintenance: Schedule next review in 90 days."

    def test_defaults_to_today(self):
        text = format_text(audit())
        assert f"Date: {date.today().isoformat()}" in text


class TestJsonFormatter:
    def test_full_report(self, critical_report):
        data = json.loads(format_json(critical_report))
        assert data["client_name"] == "Acme Corp"
        assert data["overall"] == "CRITICAL"
        assert data["backup"]["status"] == "FAIL"
        assert data["backup"]["last_success_timestamp"].startswith("2025-12-18T02:00:00")
        assert len(data["sql"]["findings"]) == 4
        assert data["sql"]["findings"][0]["rule_id"] == "SQL-001"
        assert data["ad"]["finding_count_by_severity"] == {"CRITICAL": 2}
        assert [item["priority"] for item in data["remediation"]] == [1, 2, 3]

    def test_summary(self, critical_report):
        data = json.loads(format_json_summary(critical_report))
        assert data == {
            "client_name": "Acme Corp",
            "overall": "CRITICAL",
            "sql_risk": "CRITICAL",
            "sql_finding_count": 4,
            "ad_risk": "CRITICAL",
            "ad_finding_count": 2,
            "backup_status": "FAIL",
            "backup_hours_since_success": 72.0,
            "remediation": [
                "Restore backup integrity",
                "Remove service and generic accounts from admin groups",
                "Resolve SQL Server health findings",
            ],
        }


class TestConsoleFormatter:
    def test_critical_report(self, critical_report, rich_output):
        console_fmt.format_report(critical_report)
        output = rich_output.getvalue()
        assert "OVERALL RISK: CRITICAL" in output
        assert "Immediate action required." in output
        assert "No Backups: HR" in output
        assert "Unsecured Admin: svc_backup" in output
        assert "72.0h" in output
        assert "1. Restore backup integrity" in output

    def test_empty_report(self, rich_output):
        console_fmt.format_report(audit())
        output = rich_output.getvalue()
        assert "OVERALL RISK: LOW" in output
        assert "Systems appear healthy." in output
        assert "no data supplied" in output
        assert "NEVER" in output
        assert "Routine Maintenance" in output

    def test_markup_in_data_is_not_interpreted(self, rich_output):
        report = audit(
            ad=[{"GroupName": "Domain Admins", "SamAccountName": "[bold]svc_test[/bold]"}],
            client_name="[red]Evil[/red]",
        )
        console_fmt.format_report(report)
        output = rich_output.getvalue()
        assert "Unsecured Admin: [bold]svc_test[/bold]" in output
