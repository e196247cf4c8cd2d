# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Audit pipeline orchestrator: runs the three classifiers and fuses them."""

from __future__ import annotations

import logging
import time
import uuid

import datafortress.classifiers  # noqa: F401  (registers classifiers)
from datafortress.classifiers.registry import ClassifierRegistry
from datafortress.core.config import Settings, get_settings
from datafortress.core.constants import SourceType
from datafortress.engine.fusion import build_report
from datafortress.models.record import RecordSet
from datafortress.models.report import AuditReport

logger = logging.getLogger("datafortress.engine.pipeline")


class AuditPipeline:
    """Classifies each supplied export and builds the fused report.

    The classifiers share no state, so the order they run in is not
    observable in the result.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def run(
        self,
        sql: RecordSet | None = None,
        ad: RecordSet | None = None,
        backup: RecordSet | None = None,
        client_name: str | None = None,
    ) -> AuditReport:
        """Run one audit round over up to three record sets.

        Args:
            sql: sp_Blitz health check rows.
            ad: AD group membership rows.
            backup: Backup job event log rows.
            client_name: Report header; defaults to the configured name.

        Returns:
            The fused, immutable AuditReport.
        """
        audit_id = uuid.uuid4().hex[:12]
        start_time = time.monotonic()

        sql_verdict = ClassifierRegistry.get(SourceType.SQL).classify(sql)
        ad_verdict = ClassifierRegistry.get(SourceType.AD).classify(ad)
        backup_verdict = ClassifierRegistry.get(SourceType.BACKUP).classify(backup)

        report = build_report(
            sql_verdict,
            ad_verdict,
            backup_verdict,
            client_name=self._settings.client_name if client_name is None else client_name,
        )

        elapsed_ms = (time.monotonic() - start_time) * 1000
        logger.info(
            "Audit %s complete: overall=%s sql=%s ad=%s backup=%s remediation=%d duration=%.1fms",
            audit_id,
            report.overall,
            sql_verdict.risk,
            ad_verdict.risk,
            backup_verdict.status,
            len(report.remediation),
            elapsed_ms,
            extra={"audit_id": audit_id},
        )
        return report
