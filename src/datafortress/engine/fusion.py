# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Fusion of per-source verdicts into one overall severity and remediation plan."""

from __future__ import annotations

from datafortress.core.constants import (
    BACKUP_MAX_GAP_HOURS,
    ROUTINE_REVIEW_DAYS,
    BackupStatus,
    Severity,
    SourceType,
)
from datafortress.engine.severity import (
    aggregate_severity,
    known_or_low,
    max_severity,
    severity_sort_key,
)
from datafortress.models.report import AuditReport, RemediationItem
from datafortress.models.verdict import BackupVerdict, SourceVerdict


def fuse_overall(
    sql_risk: Severity,
    ad_risk: Severity,
    backup_status: BackupStatus,
) -> Severity:
    """Return the overall severity as a single total-order maximum.

    UNKNOWN inputs count as LOW; a failed backup counts as CRITICAL.
    """
    backup_level = Severity.CRITICAL if backup_status == BackupStatus.FAIL else Severity.LOW
    return max_severity(
        Severity.LOW,
        known_or_low(sql_risk),
        known_or_low(ad_risk),
        backup_level,
    )


def _backup_item(backup: BackupVerdict) -> RemediationItem:
    last = (
        backup.last_success_timestamp.strftime("%Y-%m-%d %H:%M UTC")
        if backup.last_success_timestamp
        else "never"
    )
    return RemediationItem(
        priority=1,
        title="Restore backup integrity",
        rationale=(
            f"No successful backup for {backup.hours_since_success:.1f}h "
            f"(limit {BACKUP_MAX_GAP_HOURS:.0f}h). Last success: {last}. "
            f"{backup.failure_count_since_success} failed job(s) since."
        ),
        severity=Severity.CRITICAL,
        source=SourceType.BACKUP,
    )


def _ad_item(ad: SourceVerdict) -> RemediationItem:
    return RemediationItem(
        priority=1,
        title="Remove service and generic accounts from admin groups",
        rationale=f"{len(ad.findings)} flagged: " + "; ".join(f.title for f in ad.findings) + ".",
        severity=aggregate_severity(ad.findings),
        source=SourceType.AD,
    )


def _sql_item(sql: SourceVerdict) -> RemediationItem:
    ranked = sorted(sql.findings, key=lambda f: severity_sort_key(f.severity))
    return RemediationItem(
        priority=1,
        title="Resolve SQL Server health findings",
        rationale="; ".join(f.title for f in ranked) + ".",
        severity=aggregate_severity(sql.findings),
        source=SourceType.SQL,
    )


def _routine_item() -> RemediationItem:
    return RemediationItem(
        priority=1,
        title="Routine Maintenance",
        rationale=f"Schedule next review in {ROUTINE_REVIEW_DAYS} days.",
        severity=Severity.LOW,
    )


def build_remediation_plan(
    sql: SourceVerdict,
    ad: SourceVerdict,
    backup: BackupVerdict,
    overall: Severity,
) -> tuple[RemediationItem, ...]:
    """Order remediation work: backups, then AD, then SQL.

    Anything below CRITICAL overall gets the single routine review item.
    """
    if overall != Severity.CRITICAL:
        return (_routine_item(),)

    items: list[RemediationItem] = []
    if backup.status == BackupStatus.FAIL:
        items.append(_backup_item(backup))
    if ad.findings:
        items.append(_ad_item(ad))
    if sql.findings:
        items.append(_sql_item(sql))

    return tuple(
        item.model_copy(update={"priority": index})
        for index, item in enumerate(items, start=1)
    )


def build_report(
    sql: SourceVerdict,
    ad: SourceVerdict,
    backup: BackupVerdict,
    client_name: str = "",
) -> AuditReport:
    """Fuse three verdicts into the immutable audit report."""
    overall = fuse_overall(sql.risk, ad.risk, backup.status)
    return AuditReport(
        client_name=client_name,
        sql=sql,
        ad=ad,
        backup=backup,
        overall=overall,
        remediation=build_remediation_plan(sql, ad, backup, overall),
    )
