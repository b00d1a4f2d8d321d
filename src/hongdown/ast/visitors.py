#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for traversing and processing
AST nodes. Every node kind has an abstract ``visit_*`` method, so a visitor
that forgets a kind cannot be instantiated.

Visit methods receive the node plus whatever extra positional arguments were
passed to ``node.accept(visitor, *args)``; the markdown renderer uses this to
thread its immutable render context through the recursion.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node kind. All visit
    methods accept a node followed by optional extra arguments and return
    Any (the markdown renderer returns the rendered text of the subtree).

    Examples
    --------
    A visitor must cover every node kind before it can be instantiated:

        >>> class Incomplete(NodeVisitor):
        ...     def visit_text(self, node, *args):
        ...         return node.literal
        ...
        >>> Incomplete()
        Traceback (most recent call last):
        TypeError: Can't instantiate abstract class Incomplete ...

    """

    # Block-level nodes

    @abstractmethod
    def visit_document(self, node: Document, *args: Any) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading, *args: Any) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, *args: Any) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock, *args: Any) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote, *args: Any) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_list(self, node: List, *args: Any) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem, *args: Any) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_table(self, node: Table, *args: Any) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow, *args: Any) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell, *args: Any) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak, *args: Any) -> Any:
        """Visit a ThematicBreak node."""

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock, *args: Any) -> Any:
        """Visit an HTMLBlock node."""

    # Inline nodes

    @abstractmethod
    def visit_text(self, node: Text, *args: Any) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis, *args: Any) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_strong(self, node: Strong, *args: Any) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough, *args: Any) -> Any:
        """Visit a Strikethrough node."""

    @abstractmethod
    def visit_code_span(self, node: CodeSpan, *args: Any) -> Any:
        """Visit a CodeSpan node."""

    @abstractmethod
    def visit_link(self, node: Link, *args: Any) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image, *args: Any) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak, *args: Any) -> Any:
        """Visit a LineBreak node."""

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline, *args: Any) -> Any:
        """Visit an HTMLInline node."""
