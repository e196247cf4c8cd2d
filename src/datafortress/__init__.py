# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""datafortress - Risk assessment from SQL, AD and backup audit exports."""

__version__ = "1.4.0"

from datafortress.sdk import audit, audit_files

__all__ = [
    "__version__",
    "audit",
    "audit_files",
]
