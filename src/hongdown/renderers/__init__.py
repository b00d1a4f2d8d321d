#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/hongdown/renderers/__init__.py
"""Renderers that turn the document tree back into Markdown text.

The MarkdownRenderer walks the tree and delegates code blocks and tables to
their formatters in :mod:`hongdown.renderers.code` and
:mod:`hongdown.renderers.table`.

Examples
--------
Render a tree to Markdown:

    >>> from hongdown.ast import Document, Heading, Text
    >>> from hongdown.renderers import MarkdownRenderer
    >>> doc = Document(children=[Heading(level=1, children=[Text(literal="Title")])])
    >>> MarkdownRenderer().render_to_string(doc)
    'Title\\n=====\\n'

"""

from hongdown.renderers.context import RenderContext
from hongdown.renderers.markdown import MarkdownRenderer, serialize

__all__ = ["MarkdownRenderer", "RenderContext", "serialize"]
