#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for hongdown.

This module centralizes the defaults of the house style and the literal
types used by the configuration record and the renderers.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

UnorderedMarker = Literal["-", "*", "+"]
OrderedMarker = Literal[".", ")"]
FenceChar = Literal["~", "`"]
Alignment = Literal["left", "center", "right"]

UNORDERED_MARKERS: tuple[str, ...] = ("-", "*", "+")
ORDERED_MARKERS: tuple[str, ...] = (".", ")")
FENCE_CHARS: tuple[str, ...] = ("~", "`")

# =============================================================================
# Settings File
# =============================================================================

CONFIG_FILE_NAME = ".hongdown.toml"

# =============================================================================
# House Style Defaults
# =============================================================================

DEFAULT_LINE_WIDTH = 80

DEFAULT_SETEXT_H1 = True
DEFAULT_SETEXT_H2 = True

DEFAULT_UNORDERED_MARKER: UnorderedMarker = "-"
DEFAULT_LEADING_SPACES = 1
DEFAULT_TRAILING_SPACES = 2
DEFAULT_INDENT_WIDTH = 4

DEFAULT_ODD_LEVEL_MARKER: OrderedMarker = "."
DEFAULT_EVEN_LEVEL_MARKER: OrderedMarker = ")"

DEFAULT_FENCE_CHAR: FenceChar = "~"
DEFAULT_MIN_FENCE_LENGTH = 4
DEFAULT_SPACE_AFTER_FENCE = True
DEFAULT_CODE_LANGUAGE = "text"

# =============================================================================
# Rendering
# =============================================================================

# An alignment marker needs at least three characters (":-:")
MIN_TABLE_COLUMN_WIDTH = 3

THEMATIC_BREAK = "* * *"
BLOCK_QUOTE_PREFIX = "> "

# =============================================================================
# Dependencies
# =============================================================================

# (install name, import name, version specifier)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
