#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/options/__init__.py
"""Configuration records for the formatter and the parser."""

from hongdown.options.base import CloneFrozenMixin, ConfigSection
from hongdown.options.config import (
    CodeBlockConfig,
    Config,
    HeadingConfig,
    ListConfig,
    OrderedListConfig,
)
from hongdown.options.markdown import MarkdownParserOptions

__all__ = [
    "CloneFrozenMixin",
    "CodeBlockConfig",
    "Config",
    "ConfigSection",
    "HeadingConfig",
    "ListConfig",
    "MarkdownParserOptions",
    "OrderedListConfig",
]
