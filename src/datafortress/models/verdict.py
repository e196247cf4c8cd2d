# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-source verdict models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

from datafortress.core.constants import BackupStatus, Severity, SourceType
from datafortress.models.finding import Finding


class SourceVerdict(BaseModel):
    """Aggregate risk plus findings for one rule-based source (SQL or AD)."""

    model_config = ConfigDict(frozen=True)

    source: SourceType
    risk: Severity = Severity.UNKNOWN
    findings: tuple[Finding, ...] = ()
    record_count: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def finding_count_by_severity(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for f in self.findings:
            counts[f.severity] = counts.get(f.severity, 0) + 1
        return counts


class BackupVerdict(BaseModel):
    """Backup health measured as the gap since the last successful job."""

    model_config = ConfigDict(frozen=True)

    status: BackupStatus = BackupStatus.UNKNOWN
    hours_since_success: float = 0.0
    last_success_timestamp: datetime | None = None
    most_recent_log_timestamp: datetime | None = None
    failure_count_since_success: int = 0
    record_count: int = 0
    unparseable_timestamps: int = Field(
        default=0,
        description="Rows whose timestamp could not be read; sorted as oldest",
    )

    @property
    def as_severity(self) -> Severity:
        if self.status == BackupStatus.FAIL:
            return Severity.CRITICAL
        return Severity.LOW
