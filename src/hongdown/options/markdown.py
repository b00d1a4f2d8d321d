#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/options/markdown.py
"""Options for the Markdown parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from hongdown.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class MarkdownParserOptions(CloneFrozenMixin):
    """Configuration options for Markdown parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse GFM pipe tables
    parse_strikethrough : bool, default True
        Whether to parse ``~~strikethrough~~``

    """

    parse_tables: bool = field(default=True, metadata={"help": "Parse table syntax (GFM pipe tables)"})
    parse_strikethrough: bool = field(default=True, metadata={"help": "Parse strikethrough syntax (~~text~~)"})
