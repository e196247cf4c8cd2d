# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Audit finding models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from datafortress.core.constants import Severity, SourceType


class Finding(BaseModel):
    """A single flagged issue produced by a source classifier."""

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(description="Rule table entry that produced this finding, e.g. SQL-001")
    source: SourceType
    severity: Severity
    title: str
    description: str = ""
    impact: str = ""
