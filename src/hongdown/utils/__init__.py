#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/utils/__init__.py
"""Utility modules for hongdown.

This package contains the character-level escaping functions and the text
measurement helpers used by the renderers.
"""

from hongdown.utils.escape import (
    escape_table_cell,
    escape_text,
    format_code_span,
    is_valid_code_span,
    normalize_whitespace,
)
from hongdown.utils.text import display_width

__all__ = [
    "display_width",
    "escape_table_cell",
    "escape_text",
    "format_code_span",
    "is_valid_code_span",
    "normalize_whitespace",
]
