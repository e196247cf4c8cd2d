# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Severity ordering helpers shared by the classifiers and the fusion engine."""

from __future__ import annotations

from collections.abc import Iterable

from datafortress.core.constants import SEVERITY_RANK, Severity
from datafortress.models.finding import Finding


def max_severity(*levels: Severity) -> Severity:
    """Return the highest of *levels* under the rank table (UNKNOWN if none)."""
    if not levels:
        return Severity.UNKNOWN
    return max(levels, key=lambda s: SEVERITY_RANK[s])


def known_or_low(level: Severity) -> Severity:
    """Map UNKNOWN to LOW so missing data neither escalates nor suppresses."""
    return Severity.LOW if level == Severity.UNKNOWN else level


def aggregate_severity(findings: Iterable[Finding], floor: Severity = Severity.LOW) -> Severity:
    """Return the highest severity across all findings, never below *floor*."""
    return max_severity(floor, *(f.severity for f in findings))


def severity_sort_key(level: Severity) -> int:
    """Sort key placing the most severe level first."""
    return -SEVERITY_RANK[level]
