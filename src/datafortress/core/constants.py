# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, severity ranks, and threshold constants."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum


class Severity(StrEnum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    UNKNOWN = "UNKNOWN"

    @property
    def rank(self) -> int:
        return SEVERITY_RANK[self]


class BackupStatus(StrEnum):
    PASS = "PASS"
    FAIL = "FAIL"
    UNKNOWN = "UNKNOWN"


class SourceType(StrEnum):
    SQL = "sql"
    AD = "ad"
    BACKUP = "backup"

    @property
    def display_name(self) -> str:
        return SOURCE_DISPLAY_NAMES[self]


# UNKNOWN ranks below LOW so it can never win a maximum against real data.
SEVERITY_RANK: dict[Severity, int] = {
    Severity.UNKNOWN: 0,
    Severity.LOW: 1,
    Severity.MEDIUM: 2,
    Severity.HIGH: 3,
    Severity.CRITICAL: 4,
}

SOURCE_DISPLAY_NAMES: dict[SourceType, str] = {
    SourceType.SQL: "SQL Health",
    SourceType.AD: "AD Security",
    SourceType.BACKUP: "Backup Integrity",
}

# SQL health checks
SQL_ACTIONABLE_PRIORITY = 50
SQL_UNPARSEABLE_PRIORITY = 999

# Backup integrity
BACKUP_MAX_GAP_HOURS = 24.0
EPOCH_FLOOR = datetime(1970, 1, 1, tzinfo=UTC)

ROUTINE_REVIEW_DAYS = 90
