# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Classifier registration and discovery."""

from __future__ import annotations

from typing import TypeVar

from datafortress.classifiers.base import BaseClassifier
from datafortress.core.constants import SourceType

T = TypeVar("T", bound=BaseClassifier)


class ClassifierRegistry:
    """Central registry of one classifier per source type."""

    _classifiers: dict[SourceType, type[BaseClassifier]] = {}

    @classmethod
    def register(cls, classifier_class: type[T]) -> type[T]:
        cls._classifiers[classifier_class.source_type] = classifier_class
        return classifier_class

    @classmethod
    def get(cls, source_type: SourceType) -> BaseClassifier:
        try:
            return cls._classifiers[source_type]()
        except KeyError:
            raise LookupError(f"No classifier registered for {source_type!r}") from None

    @classmethod
    def get_all(cls) -> list[type[BaseClassifier]]:
        return list(cls._classifiers.values())


def classifier(cls: type[T]) -> type[T]:
    """Decorator to register a classifier class."""
    return ClassifierRegistry.register(cls)
