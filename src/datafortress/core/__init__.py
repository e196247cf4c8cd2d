# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Core configuration, constants, exceptions and logging."""
