# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Severity ordering, fusion policy and the audit pipeline."""
