# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Backup job event log classifier.

Backup health is a continuous measurement: hours between the most recent
log entry and the last successful job, compared against a fixed 24 hour
threshold. The most recent log entry rather than the wall clock is the
reference, so a log captured yesterday and analyzed today reads the same.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from datafortress.classifiers.base import BaseClassifier
from datafortress.classifiers.registry import classifier
from datafortress.classifiers.rules import is_failure_message, is_success_message
from datafortress.classifiers.timestamps import ParsedTimestamp, parse_timestamp
from datafortress.core.constants import (
    BACKUP_MAX_GAP_HOURS,
    EPOCH_FLOOR,
    BackupStatus,
    SourceType,
)
from datafortress.models.record import Record, RecordSet, field_value
from datafortress.models.verdict import BackupVerdict

logger = logging.getLogger("datafortress.classifiers.backup")

TIMESTAMP_FIELDS = ("TimeCreated", "TimeGenerated")


@dataclass(frozen=True, slots=True)
class LogEntry:
    timestamp: ParsedTimestamp
    message: str

    @classmethod
    def from_record(cls, record: Record) -> LogEntry:
        return cls(
            timestamp=parse_timestamp(field_value(record, *TIMESTAMP_FIELDS)),
            message=field_value(record, "Message"),
        )


def _utc_now() -> datetime:
    return datetime.now(UTC)


@classifier
class BackupIntegrityClassifier(BaseClassifier):
    """Measures the gap since the last successful backup job."""

    source_type = SourceType.BACKUP

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock

    def classify(self, records: RecordSet | None) -> BackupVerdict:
        if not records:
            return BackupVerdict(status=BackupStatus.UNKNOWN)

        entries = [LogEntry.from_record(r) for r in records]
        # Stable sort: newest first, unparseable timestamps last.
        ordered = sorted(entries, key=lambda e: e.timestamp.sort_key, reverse=True)

        parsed = [e.timestamp.instant for e in ordered if e.timestamp.instant is not None]
        most_recent = parsed[0] if parsed else None

        last_success = next(
            (
                e.timestamp.instant
                for e in ordered
                if e.timestamp.is_valid and is_success_message(e.message)
            ),
            None,
        )

        failures = sum(
            1
            for e in ordered
            if is_failure_message(e.message)
            and (last_success is None or e.timestamp.is_after(last_success))
        )

        reference = most_recent or self._clock()
        effective_success = last_success or EPOCH_FLOOR
        hours = (reference - effective_success).total_seconds() / 3600

        status = BackupStatus.FAIL if hours > BACKUP_MAX_GAP_HOURS else BackupStatus.PASS
        unparseable = len(entries) - len(parsed)

        logger.debug(
            "Backup classifier: %d records (%d unparseable), gap=%.1fh, failures=%d, status=%s",
            len(entries),
            unparseable,
            hours,
            failures,
            status,
            extra={"source": self.source_type},
        )
        return BackupVerdict(
            status=status,
            hours_since_success=hours,
            last_success_timestamp=last_success,
            most_recent_log_timestamp=most_recent,
            failure_count_since_success=failures,
            record_count=len(entries),
            unparseable_timestamps=unparseable,
        )
