# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CSV ingestion and upload fingerprinting for audit exports."""

from datafortress.ingestion.csv_reader import ParsedCsv, parse_csv, read_csv_file
from datafortress.ingestion.fingerprint import (
    UploadValidation,
    detect_source_type,
    load_source,
    validate_upload,
)

__all__ = [
    "ParsedCsv",
    "UploadValidation",
    "detect_source_type",
    "load_source",
    "parse_csv",
    "read_csv_file",
    "validate_upload",
]
