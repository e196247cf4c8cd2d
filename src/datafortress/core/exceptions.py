# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for datafortress.

The classification core never raises these; they belong to ingestion
and the command-line surface.
"""


class DataFortressError(Exception):
    """Base exception for all datafortress errors."""


class ConfigurationError(DataFortressError):
    """Invalid or missing configuration."""


class IngestionError(DataFortressError):
    """Failed to read an audit export from disk."""


class FormatMismatchError(DataFortressError):
    """An export was supplied for the wrong source slot or is unrecognized."""

    def __init__(self, message: str, detected: str | None = None) -> None:
        super().__init__(message)
        self.detected = detected


class ExportError(DataFortressError):
    """Failed to write a rendered report."""
