# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Standardized exit codes for CI/CD and scheduled-task integrations.

Exit codes:
    0: LOW: no actionable risk
    1: CRITICAL: immediate remediation required
    2: ERROR: audit could not complete (unreadable or mismatched input)
    3: ELEVATED: MEDIUM or HIGH overall risk
"""

from __future__ import annotations

from enum import IntEnum

from datafortress.core.constants import Severity


class CIExitCode(IntEnum):
    """Exit codes used by datafortress in CI mode."""

    LOW = 0
    CRITICAL = 1
    AUDIT_ERROR = 2
    ELEVATED = 3


_SEVERITY_MAP: dict[Severity, CIExitCode] = {
    Severity.UNKNOWN: CIExitCode.LOW,
    Severity.LOW: CIExitCode.LOW,
    Severity.MEDIUM: CIExitCode.ELEVATED,
    Severity.HIGH: CIExitCode.ELEVATED,
    Severity.CRITICAL: CIExitCode.CRITICAL,
}


def severity_to_exit_code(severity: Severity | str) -> CIExitCode:
    """Convert an overall severity to a CI exit code.

    Raises:
        ValueError: If the severity string is not recognized.
    """
    normalized = str(severity).upper().strip()
    try:
        return _SEVERITY_MAP[Severity(normalized)]
    except ValueError:
        msg = f"Unknown severity: {severity!r}. Expected one of: {', '.join(_SEVERITY_MAP)}"
        raise ValueError(msg) from None
