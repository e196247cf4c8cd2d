# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Declarative rule tables for the source classifiers.

Each table entry maps a case-insensitive match pattern to a severity and
the text templates used to build the resulting finding. Control flow in
the classifiers never inspects rule content directly, so a new entry only
needs to be added here.
"""

from __future__ import annotations

from dataclasses import dataclass

from datafortress.core.constants import Severity, SourceType
from datafortress.models.finding import Finding


@dataclass(frozen=True, slots=True)
class MatchRule:
    """A substring rule. ``pattern=None`` marks the table's fallback entry."""

    rule_id: str
    source: SourceType
    pattern: str | None
    severity: Severity
    title: str
    description: str
    impact: str

    def matches(self, text: str) -> bool:
        return self.pattern is None or self.pattern in text.lower()

    def build(self, **values: str) -> Finding:
        return Finding(
            rule_id=self.rule_id,
            source=self.source,
            severity=self.severity,
            title=self.title.format(**values),
            description=self.description.format(**values).strip(),
            impact=self.impact.format(**values),
        )


# ---------------------------------------------------------------------------
# SQL Server health checks (sp_Blitz style exports)
# ---------------------------------------------------------------------------

SQL_RULES: tuple[MatchRule, ...] = (
    MatchRule(
        rule_id="SQL-001",
        source=SourceType.SQL,
        pattern="backups not performed",
        severity=Severity.CRITICAL,
        title="No Backups: {database}",
        description="Database '{database}' has not been backed up recently. {details}",
        impact="Total data loss of recent transactions in event of crash.",
    ),
    MatchRule(
        rule_id="SQL-002",
        source=SourceType.SQL,
        pattern="corruption check",
        severity=Severity.HIGH,
        title="Corruption Risk: {database}",
        description="DBCC CHECKDB never run on '{database}'.",
        impact="Database may contain silent corruption making backups useless.",
    ),
    MatchRule(
        rule_id="SQL-900",
        source=SourceType.SQL,
        pattern=None,
        severity=Severity.MEDIUM,
        title="Config Issue: {finding}",
        description="{details}",
        impact="Performance or stability risk.",
    ),
)


def match_sql_rule(finding_text: str) -> MatchRule:
    """Return the first SQL rule matching *finding_text* (fallback included)."""
    for entry in SQL_RULES[:-1]:
        if entry.matches(finding_text):
            return entry
    # The last entry is the fallback.
    return SQL_RULES[-1]


# ---------------------------------------------------------------------------
# Active Directory privileged group membership
# ---------------------------------------------------------------------------

ADMIN_GROUP_MARKER = "admin"

RED_FLAG_KEYWORDS: tuple[str, ...] = (
    "temp",
    "scanner",
    "backup",
    "service",
    "test",
    "msp",
    "vendor",
    "printer",
    "copy",
)

AD_UNSECURED_ADMIN = MatchRule(
    rule_id="AD-001",
    source=SourceType.AD,
    pattern=ADMIN_GROUP_MARKER,
    severity=Severity.CRITICAL,
    title="Unsecured Admin: {sam}",
    description=(
        "Account '{name}' is in '{group}'. "
        "This appears to be a service or generic account (matched: {keywords})."
    ),
    impact="High risk of credential theft. Service accounts should not be Domain Admins.",
)


def red_flag_keywords(account_text: str) -> list[str]:
    """Return the red-flag keywords contained in *account_text*, in table order."""
    lowered = account_text.lower()
    return [kw for kw in RED_FLAG_KEYWORDS if kw in lowered]


# ---------------------------------------------------------------------------
# Backup job event logs
# ---------------------------------------------------------------------------

SUCCESS_MARKERS: tuple[str, ...] = ("successfully", "succeeded")
FAILURE_MARKERS: tuple[str, ...] = ("fail", "error")


def is_success_message(message: str) -> bool:
    lowered = message.lower()
    return any(marker in lowered for marker in SUCCESS_MARKERS)


def is_failure_message(message: str) -> bool:
    lowered = message.lower()
    return any(marker in lowered for marker in FAILURE_MARKERS)
