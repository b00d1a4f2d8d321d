#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The module consists of two components:

- nodes: AST node classes representing document structure
- visitors: Visitor base class for exhaustive per-kind traversal

Examples
--------
Basic usage:

    >>> from hongdown.ast import Document, Heading, Paragraph, Text
    >>> from hongdown.renderers.markdown import serialize
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text(literal="Title")]),
    ...     Paragraph(children=[Text(literal="Hello world")])
    ... ])
    >>> print(serialize(doc), end="")
    Title
    =====
    <BLANKLINE>
    Hello world

"""

from hongdown.ast.nodes import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from hongdown.ast.visitors import NodeVisitor

__all__ = [
    # Base
    "Node",
    "NodeVisitor",
    # Block nodes
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "HTMLBlock",
    # Inline nodes
    "Text",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "CodeSpan",
    "Link",
    "Image",
    "LineBreak",
    "HTMLInline",
]
