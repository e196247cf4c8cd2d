# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Structured logging with sensitive data redaction."""

import logging
import json
import re
import sys
from datetime import UTC, datetime
from typing import Any


# Backup job messages occasionally echo connection strings or tokens.
REDACT_PATTERNS = [
    re.compile(r"((?:password|pwd)\s*=\s*)[^;\s\"']+", re.IGNORECASE),
    re.compile(r"(Bearer\s+[a-zA-Z0-9\-._~+/]{6})[a-zA-Z0-9\-._~+/]*"),
]

# Set through ``extra=`` by the pipeline and the classifiers.
CONTEXT_FIELDS = ("audit_id", "source")


def redact_sensitive(text: str) -> str:
    for pattern in REDACT_PATTERNS:
        text = pattern.sub(r"\1[REDACTED]", text)
    return text


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_sensitive(record.getMessage()),
        }
        for key in CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                log_entry[key] = str(value)
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = redact_sensitive(str(record.exc_info[1]))
        return json.dumps(log_entry)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        return redact_sensitive(msg)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    root = logging.getLogger("datafortress")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            TextFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    root.addHandler(handler)
