# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for CLI commands: audit, validate, version."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from datafortress import __version__
from datafortress.cli.app import app

runner = CliRunner()


# ---------------------------------------------------------------------------
# audit
# ---------------------------------------------------------------------------


class TestAudit:
    """Test the audit CLI command."""

    def test_requires_an_input(self):
        result = runner.invoke(app, ["audit"])
        assert result.exit_code == 1
        assert "Supply at least one of" in result.output

    def test_json_output(self, exports_dir):
        result = runner.invoke(
            app, ["audit", "--sql", str(exports_dir / "sp_blitz.csv"), "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["overall"] == "CRITICAL"
        assert data["client_name"] == "Acme Corp"
        assert data["ad"]["risk"] == "UNKNOWN"

    def test_client_option(self, exports_dir):
        result = runner.invoke(
            app,
            ["audit", "--ad", str(exports_dir / "ad_members.csv"), "-c", "Globex", "-f", "json"],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["client_name"] == "Globex"

    def test_client_from_environment(self, exports_dir, monkeypatch):
        monkeypatch.setenv("DATAFORTRESS_CLIENT_NAME", "Initech")
        result = runner.invoke(
            app, ["audit", "--ad", str(exports_dir / "ad_members.csv"), "-f", "json"]
        )
        assert json.loads(result.stdout)["client_name"] == "Initech"

    def test_default_format_from_environment(self, exports_dir, monkeypatch):
        monkeypatch.setenv("DATAFORTRESS_DEFAULT_FORMAT", "text")
        result = runner.invoke(app, ["audit", "--backup", str(exports_dir / "backup_failing.csv")])
        assert result.exit_code == 0
        assert result.stdout.startswith("DATA FORTRESS REPORT")

    def test_invalid_configuration(self, exports_dir, monkeypatch):
        monkeypatch.setenv("DATAFORTRESS_LOG_FORMAT", "xml")
        result = runner.invoke(app, ["audit", "--sql", str(exports_dir / "sp_blitz.csv")])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_console_output(self, exports_dir):
        result = runner.invoke(
            app, ["audit", "--backup", str(exports_dir / "backup_failing.csv"), "-f", "console"]
        )
        assert result.exit_code == 0
        assert "OVERALL RISK: CRITICAL" in result.output
        assert "Immediate Actions" in result.output

    def test_text_output_to_file(self, exports_dir, tmp_path):
        out = tmp_path / "report.txt"
        result = runner.invoke(
            app,
            [
                "audit",
                "--backup", str(exports_dir / "backup_failing.csv"),
                "--format", "text",
                "--output", str(out),
            ],
        )
        assert result.exit_code == 0
        assert f"Output written to {out}" in result.output
        content = out.read_text()
        assert "RISK: CRITICAL" in content
        assert "- BACKUPS FAILED (Gap: 72.0h)" in content

    def test_json_summary_output(self, exports_dir):
        result = runner.invoke(
            app, ["audit", "--ad", str(exports_dir / "ad_members.csv"), "-f", "json-summary"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["overall"] == "CRITICAL"
        assert data["ad_finding_count"] == 2
        assert data["sql_risk"] == "UNKNOWN"

    def test_unwritable_output(self, exports_dir, tmp_path):
        out = tmp_path / "missing" / "report.txt"
        result = runner.invoke(
            app,
            ["audit", "--backup", str(exports_dir / "backup_failing.csv"), "-f", "text", "-o", str(out)],
        )
        assert result.exit_code == 1
        assert "Error: Failed to write" in result.output
        assert not out.exists()

    def test_unwritable_output_ci_mode(self, exports_dir, tmp_path):
        out = tmp_path / "missing" / "report.json"
        result = runner.invoke(
            app,
            [
                "audit",
                "--backup", str(exports_dir / "backup_healthy_ps.csv"),
                "-f", "json",
                "-o", str(out),
                "--ci-mode",
            ],
        )
        assert result.exit_code == 2

    def test_oversized_cell(self, tmp_path):
        export = tmp_path / "huge.csv"
        export.write_text('Message,TimeCreated\n"' + "x" * 200_000 + '",2025-01-01\n')
        result = runner.invoke(app, ["audit", "--backup", str(export)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Malformed CSV" in result.output

    def test_wrong_slot_rejected(self, exports_dir):
        result = runner.invoke(app, ["audit", "--sql", str(exports_dir / "ad_members.csv")])
        assert result.exit_code == 1
        assert "This appears to be a AD Security file" in result.output

    def test_wrong_slot_accepted_without_validation(self, exports_dir):
        result = runner.invoke(
            app,
            ["audit", "--sql", str(exports_dir / "ad_members.csv"), "--no-validate", "-f", "json"],
        )
        assert result.exit_code == 0

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["audit", "--sql", str(tmp_path / "nope.csv")])
        assert result.exit_code == 1
        assert "Failed to read" in result.output


class TestAuditCiMode:
    """Exit codes in --ci-mode follow the overall severity."""

    def test_critical_exits_1(self, exports_dir):
        result = runner.invoke(
            app, ["audit", "--sql", str(exports_dir / "sp_blitz.csv"), "-f", "json", "--ci-mode"]
        )
        assert result.exit_code == 1

    def test_low_exits_0(self, exports_dir):
        result = runner.invoke(
            app,
            ["audit", "--backup", str(exports_dir / "backup_healthy_ps.csv"), "-f", "json", "--ci-mode"],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["overall"] == "LOW"

    def test_high_exits_3(self, tmp_path):
        export = tmp_path / "blitz.csv"
        export.write_text(
            "Priority,Finding,DatabaseName\n20,Database Corruption Check Never Run,Finance\n"
        )
        result = runner.invoke(app, ["audit", "--sql", str(export), "-f", "json", "--ci-mode"])
        assert result.exit_code == 3

    def test_mismatch_exits_2(self, exports_dir):
        result = runner.invoke(
            app, ["audit", "--backup", str(exports_dir / "sp_blitz.csv"), "--ci-mode"]
        )
        assert result.exit_code == 2

    def test_no_inputs_exits_2(self):
        result = runner.invoke(app, ["audit", "--ci-mode"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidate:
    """Test the validate CLI command."""

    def test_detects_type(self, exports_dir):
        result = runner.invoke(app, ["validate", str(exports_dir / "ad_members.csv")])
        assert result.exit_code == 0
        assert "AD Security (5 records)" in result.output

    def test_matching_slot(self, exports_dir):
        result = runner.invoke(
            app, ["validate", str(exports_dir / "backup_healthy_ps.csv"), "--slot", "backup"]
        )
        assert result.exit_code == 0
        assert "verified as Backup Integrity (3 records)" in result.output

    def test_mismatched_slot(self, exports_dir):
        result = runner.invoke(
            app, ["validate", str(exports_dir / "sp_blitz.csv"), "-s", "ad"]
        )
        assert result.exit_code == 1
        assert "This appears to be a SQL Health file" in result.output

    def test_unknown_format(self, tmp_path):
        export = tmp_path / "other.csv"
        export.write_text("Foo,Bar\n1,2\n")
        result = runner.invoke(app, ["validate", str(export)])
        assert result.exit_code == 1
        assert "Unknown file format" in result.output


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"datafortress v{__version__}" in result.output
