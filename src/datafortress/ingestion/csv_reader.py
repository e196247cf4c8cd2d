# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Parse CSV exports into ordered, field-keyed records.

Malformed rows are recovered rather than rejected: short rows are padded
with empty strings, surplus cells are dropped, blank lines are skipped.
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path

from datafortress.core.exceptions import IngestionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedCsv:
    headers: tuple[str, ...] = ()
    records: tuple[dict[str, str], ...] = ()
    recovered_rows: int = field(default=0, compare=False)


def _clean_cell(value: str) -> str:
    return value.strip().strip('"').strip()


def parse_csv(text: str) -> ParsedCsv:
    """Parse CSV *text*; the first non-blank line is the header row.

    Raises:
        IngestionError: If the csv module cannot tokenize the text, e.g. a
            cell beyond the field size limit.
    """
    text = text.lstrip("\ufeff")
    reader = csv.reader(io.StringIO(text, newline=""), skipinitialspace=True)

    headers: tuple[str, ...] | None = None
    records: list[dict[str, str]] = []
    recovered = 0

    try:
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            if headers is None:
                # Windows PowerShell Export-Csv prepends "#TYPE <dotnet type>".
                if row[0].lstrip().startswith("#TYPE"):
                    continue
                headers = tuple(_clean_cell(cell) for cell in row)
                continue
            if len(row) != len(headers):
                recovered += 1
            cells = [_clean_cell(cell) for cell in row[: len(headers)]]
            cells.extend([""] * (len(headers) - len(cells)))
            records.append(dict(zip(headers, cells, strict=True)))
    except csv.Error as exc:
        raise IngestionError(f"Malformed CSV near line {reader.line_num}: {exc}") from exc

    if recovered:
        logger.warning("Recovered %d malformed CSV row(s)", recovered)
    return ParsedCsv(headers=headers or (), records=tuple(records), recovered_rows=recovered)


def read_csv_file(path: str | Path) -> ParsedCsv:
    """Read and parse a CSV export from disk.

    Raises:
        IngestionError: If the file cannot be read.
    """
    file_path = Path(path)
    try:
        raw = file_path.read_bytes()
    except OSError as exc:
        raise IngestionError(f"Failed to read {file_path}: {exc}") from exc

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        # PowerShell 5 Export-Csv writes the ANSI code page by default.
        logger.debug("%s is not UTF-8, decoding as latin-1", file_path)
        text = raw.decode("latin-1")
    return parse_csv(text)
