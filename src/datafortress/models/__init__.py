# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for datafortress."""

from datafortress.models.finding import Finding
from datafortress.models.record import Record, RecordSet, field_value
from datafortress.models.report import AuditReport, RemediationItem
from datafortress.models.verdict import BackupVerdict, SourceVerdict

__all__ = [
    "AuditReport",
    "BackupVerdict",
    "Finding",
    "Record",
    "RecordSet",
    "RemediationItem",
    "SourceVerdict",
    "field_value",
]
