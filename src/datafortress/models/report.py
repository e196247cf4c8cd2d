# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Fused audit report models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from datafortress.core.constants import Severity, SourceType
from datafortress.models.verdict import BackupVerdict, SourceVerdict


class RemediationItem(BaseModel):
    """One entry in the prioritized remediation plan."""

    model_config = ConfigDict(frozen=True)

    priority: int = Field(ge=1)
    title: str
    rationale: str
    severity: Severity
    source: SourceType | None = None


class AuditReport(BaseModel):
    """Terminal output of one audit run; read-only for exporters."""

    model_config = ConfigDict(frozen=True)

    client_name: str = ""
    sql: SourceVerdict = Field(default_factory=lambda: SourceVerdict(source=SourceType.SQL))
    ad: SourceVerdict = Field(default_factory=lambda: SourceVerdict(source=SourceType.AD))
    backup: BackupVerdict = Field(default_factory=BackupVerdict)
    overall: Severity = Severity.LOW
    remediation: tuple[RemediationItem, ...] = ()
