# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Header fingerprinting to catch exports uploaded to the wrong source slot.

This is a usability guard, not a security boundary: the classifiers stay
total on mismatched data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel

from datafortress.core.constants import SourceType
from datafortress.core.exceptions import FormatMismatchError
from datafortress.ingestion.csv_reader import ParsedCsv, read_csv_file

logger = logging.getLogger(__name__)

# Checked in order; the first fingerprint fully present wins.
FINGERPRINTS: tuple[tuple[SourceType, frozenset[str]], ...] = (
    (SourceType.SQL, frozenset({"priority", "finding"})),
    (SourceType.AD, frozenset({"groupname", "samaccountname"})),
    (SourceType.BACKUP, frozenset({"message"})),
)

EMPTY_FILE_ERROR = "File is empty or unreadable."
UNKNOWN_FORMAT_ERROR = "Unknown file format. Ensure it's a valid CSV export."


class UploadValidation(BaseModel):
    """Outcome of checking one export against its intended slot."""

    slot: SourceType
    valid: bool
    detected: SourceType | None = None
    error: str | None = None


def detect_source_type(headers: Iterable[str]) -> SourceType | None:
    """Return the source type whose fingerprint the headers contain."""
    normalized = {h.strip().lower() for h in headers}
    for source_type, required in FINGERPRINTS:
        if required <= normalized:
            return source_type
    return None


def validate_upload(slot: SourceType, parsed: ParsedCsv) -> UploadValidation:
    """Check a parsed export against the slot it was supplied for."""
    if not parsed.records:
        return UploadValidation(slot=slot, valid=False, error=EMPTY_FILE_ERROR)

    detected = detect_source_type(parsed.headers)
    if detected is None:
        return UploadValidation(slot=slot, valid=False, error=UNKNOWN_FORMAT_ERROR)

    if detected != slot:
        return UploadValidation(
            slot=slot,
            valid=False,
            detected=detected,
            error=(
                f"This appears to be a {detected.display_name} file. "
                "Please upload to the correct slot."
            ),
        )

    return UploadValidation(slot=slot, valid=True, detected=detected)


def load_source(path: str | Path, slot: SourceType, *, strict: bool = True) -> ParsedCsv:
    """Read an export and validate it for *slot*.

    With ``strict`` a failed validation raises FormatMismatchError; otherwise
    it is logged and the parsed data is returned unchanged.

    Raises:
        IngestionError: If the file cannot be read.
        FormatMismatchError: On a failed validation in strict mode.
    """
    parsed = read_csv_file(path)
    validation = validate_upload(slot, parsed)
    if not validation.valid:
        message = f"{path}: {validation.error}"
        if strict:
            raise FormatMismatchError(
                message,
                detected=validation.detected.value if validation.detected else None,
            )
        logger.warning("Accepting %s export despite failed validation: %s", slot, message)
    return parsed
