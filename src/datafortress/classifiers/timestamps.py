# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Explicit timestamp parse results for event log exports.

Windows event exports arrive in several shapes depending on the tool that
produced them: ISO-8601 from ``ConvertTo-Json``/``Get-WinEvent | Select``,
locale formatted ``M/D/YYYY h:mm:ss AM`` from ``Export-Csv``, and the
``/Date(ms)/`` form from older JSON serializers. Anything else is kept as an
unparseable result rather than dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime

# Unparseable timestamps sort as the oldest possible instant.
OLDEST = datetime.min.replace(tzinfo=UTC)

_MS_DATE_RE = re.compile(r"^/Date\((-?\d+)(?:[+-]\d{4})?\)/$")

_FALLBACK_FORMATS = (
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
)


@dataclass(frozen=True, slots=True)
class ParsedTimestamp:
    raw: str
    instant: datetime | None = None

    @property
    def is_valid(self) -> bool:
        return self.instant is not None

    @property
    def sort_key(self) -> datetime:
        return self.instant if self.instant is not None else OLDEST

    def is_after(self, other: datetime | None) -> bool:
        """Strictly later than *other*; unparseable values are never after anything."""
        if self.instant is None:
            return False
        if other is None:
            return True
        return self.instant > other


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_timestamp(raw: str) -> ParsedTimestamp:
    """Parse *raw* into a UTC instant, or an unparseable result. Never raises."""
    text = raw.strip()
    if not text:
        return ParsedTimestamp(raw=raw)

    ms_match = _MS_DATE_RE.match(text)
    if ms_match:
        try:
            instant = datetime.fromtimestamp(int(ms_match.group(1)) / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return ParsedTimestamp(raw=raw)
        return ParsedTimestamp(raw=raw, instant=instant)

    try:
        return ParsedTimestamp(raw=raw, instant=_to_utc(datetime.fromisoformat(text)))
    except (OverflowError, ValueError):
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return ParsedTimestamp(raw=raw, instant=_to_utc(datetime.strptime(text, fmt)))
        except ValueError:
            continue

    return ParsedTimestamp(raw=raw)
