# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Abstract base classifier interface for all audit sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from datafortress.core.constants import SourceType
from datafortress.models.record import RecordSet


class BaseClassifier(ABC):
    """All source classifiers must implement this interface.

    ``classify`` is total: it must return a well-formed verdict for any
    input, including ``None``, an empty sequence, missing columns and
    garbage values.
    """

    source_type: SourceType

    @abstractmethod
    def classify(self, records: RecordSet | None) -> BaseModel:
        """Analyze the records of one export and return the source verdict."""
        ...
