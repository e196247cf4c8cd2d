# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Source classifiers; importing this package registers all of them."""

from datafortress.classifiers.ad import AdSecurityClassifier
from datafortress.classifiers.backup import BackupIntegrityClassifier
from datafortress.classifiers.registry import ClassifierRegistry, classifier
from datafortress.classifiers.sql import SqlHealthClassifier

__all__ = [
    "AdSecurityClassifier",
    "BackupIntegrityClassifier",
    "ClassifierRegistry",
    "SqlHealthClassifier",
    "classifier",
]
