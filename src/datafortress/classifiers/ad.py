# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Active Directory privileged group membership classifier."""

from __future__ import annotations

import logging

from datafortress.classifiers.base import BaseClassifier
from datafortress.classifiers.registry import classifier
from datafortress.classifiers.rules import ADMIN_GROUP_MARKER, AD_UNSECURED_ADMIN, red_flag_keywords
from datafortress.core.constants import Severity, SourceType
from datafortress.engine.severity import aggregate_severity
from datafortress.models.finding import Finding
from datafortress.models.record import Record, RecordSet, field_value
from datafortress.models.verdict import SourceVerdict

logger = logging.getLogger("datafortress.classifiers.ad")


@classifier
class AdSecurityClassifier(BaseClassifier):
    """Flags service-like or generic accounts that sit in admin groups."""

    source_type = SourceType.AD

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
            "AD classifier: %d records, %d findings, risk=%s",
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
        group = field_value(record, "GroupName")
        if ADMIN_GROUP_MARKER not in group.lower():
            return None

        name = field_value(record, "Name")
        sam = field_value(record, "SamAccountName")
        keywords = red_flag_keywords(f"{name} {sam}")
        if not keywords:
            return None

        return AD_UNSECURED_ADMIN.build(
            sam=sam.strip(),
            name=name.strip(),
            group=group.strip(),
            keywords=", ".join(keywords),
        )
