# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Record type and tolerant field access for parsed CSV rows."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

Record = Mapping[str, object]
RecordSet = Sequence[Record]


def field_value(record: Record, *names: str) -> str:
    """Return the first present column among *names*, compared case-insensitively.

    Absent columns and ``None`` values count as missing; a present but
    blank column is returned as ``""`` only if no later name is present
    with a non-blank value. Non-string cells are coerced with ``str()``.
    """
    lowered = {str(k).strip().lower(): v for k, v in record.items()}
    fallback = ""
    for name in names:
        value = lowered.get(name.lower())
        if value is None:
            continue
        text = value if isinstance(value, str) else str(value)
        if text.strip():
            return text
        fallback = fallback or text
    return fallback
