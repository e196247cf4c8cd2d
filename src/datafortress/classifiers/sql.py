# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SQL Server health check classifier."""

from __future__ import annotations

import logging
import re

from datafortress.classifiers.base import BaseClassifier
from datafortress.classifiers.registry import classifier
from datafortress.classifiers.rules import match_sql_rule
from datafortress.core.constants import (
    SQL_ACTIONABLE_PRIORITY,
    SQL_UNPARSEABLE_PRIORITY,
    Severity,
    SourceType,
)
from datafortress.engine.severity import aggregate_severity
from datafortress.models.finding import Finding
from datafortress.models.record import Record, RecordSet, field_value
from datafortress.models.verdict import SourceVerdict

logger = logging.getLogger("datafortress.classifiers.sql")

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_priority(raw: str) -> int:
    """Read the leading integer of an sp_Blitz priority.

    ``"10.0"`` and ``"10 (High)"`` read as 10; a value with no leading
    digits is deprioritized.
    """
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return SQL_UNPARSEABLE_PRIORITY
    return int(match.group(1))


@classifier
class SqlHealthClassifier(BaseClassifier):
    """Flags actionable sp_Blitz rows (priority <= 50) by finding text."""

    source_type = SourceType.SQL

    def classify(self, records: RecordSet | None) -> SourceVerdict:
        if not records:
            return SourceVerdict(source=self.source_type, risk=Severity.UNKNOWN)

        findings = tuple(
            finding
            for finding in (self.classify_record(r) for r in records)
            if finding is not None
        )
        risk = aggregate_severity(findings)

        logger.debug(
            "SQL classifier: %d records, %d findings, risk=%s",
            len(records),
            len(findings),
            risk,
            extra={"source": self.source_type},
        )
        return SourceVerdict(
            source=self.source_type,
            risk=risk,
            findings=findings,
            record_count=len(records),
        )

    def classify_record(self, record: Record) -> Finding | None:
        priority = parse_priority(field_value(record, "Priority"))
        if priority > SQL_ACTIONABLE_PRIORITY:
            return None

        finding_text = field_value(record, "Finding").strip()
        entry = match_sql_rule(finding_text)
        return entry.build(
            database=field_value(record, "DatabaseName").strip() or "Unknown",
            details=field_value(record, "Details").strip(),
            finding=finding_text or "Unspecified",
        )
