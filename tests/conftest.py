# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "exports"


@pytest.fixture
def exports_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """Keep a developer's .env or DATAFORTRESS_* variables out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("DATAFORTRESS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers the CLI installs so they never outlive a test's streams."""
    import logging

    yield
    logger = logging.getLogger("datafortress")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
