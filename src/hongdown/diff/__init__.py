#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/diff/__init__.py
"""Unified diffs between a document and its formatted form."""

from hongdown.diff.unified import UnifiedDiffRenderer, colorize_diff, unified_diff

__all__ = ["UnifiedDiffRenderer", "colorize_diff", "unified_diff"]
