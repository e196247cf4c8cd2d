# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding datafortress in other tools.

Usage::

    from datafortress import audit, audit_files

    report = audit(sql=sql_rows, ad=ad_rows, backup=backup_rows)
    print(report.overall)

    report = audit_files(sql_path="blitz.csv", backup_path="backups.csv")
"""

from __future__ import annotations

import logging
from pathlib import Path

from datafortress.core.config import Settings
from datafortress.core.constants import SourceType
from datafortress.engine.pipeline import AuditPipeline
from datafortress.ingestion.fingerprint import load_source
from datafortress.models.record import RecordSet
from datafortress.models.report import AuditReport

logger = logging.getLogger("datafortress.sdk")


def audit(
    sql: RecordSet | None = None,
    ad: RecordSet | None = None,
    backup: RecordSet | None = None,
    *,
    client_name: str | None = None,
    settings: Settings | None = None,
) -> AuditReport:
    """Classify already-parsed records and return the fused report.

    Any source may be ``None`` or empty; it is then reported as UNKNOWN
    and does not affect the overall severity.
    """
    return AuditPipeline(settings=settings).run(
        sql=sql, ad=ad, backup=backup, client_name=client_name
    )


def audit_files(
    sql_path: str | Path | None = None,
    ad_path: str | Path | None = None,
    backup_path: str | Path | None = None,
    *,
    client_name: str | None = None,
    strict: bool = True,
    settings: Settings | None = None,
) -> AuditReport:
    """Read CSV exports from disk, validate their slots, and audit them.

    Raises:
        IngestionError: If a file cannot be read or tokenized as CSV.
        FormatMismatchError: If ``strict`` and a file fingerprints as the
            wrong source type.
    """
    paths = {SourceType.SQL: sql_path, SourceType.AD: ad_path, SourceType.BACKUP: backup_path}
    records = {
        slot: load_source(path, slot, strict=strict).records if path is not None else None
        for slot, path in paths.items()
    }
    logger.debug(
        "Loaded exports: %s",
        {slot.value: len(rows) if rows is not None else None for slot, rows in records.items()},
    )
    return audit(
        sql=records[SourceType.SQL],
        ad=records[SourceType.AD],
        backup=records[SourceType.BACKUP],
        client_name=client_name,
        settings=settings,
    )
