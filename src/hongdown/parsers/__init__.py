#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/parsers/__init__.py
"""Parsers that build the document tree from Markdown text."""

from hongdown.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = ["MarkdownParser", "markdown_to_ast"]
