#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy the serializer consumes. The tree is
produced by a parser (see :mod:`hongdown.parsers.markdown`) or built by hand,
and is never mutated while rendering.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, HTMLBlock

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Strikethrough, CodeSpan
    - Link, Image, LineBreak, HTMLInline

Container nodes own an ordered ``children`` list; leaf nodes own a
``literal`` string.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from hongdown.constants import Alignment


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        *args : Any
            Extra arguments forwarded to the visit method (for example the
            render context)

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self, *args)


@dataclass
class Heading(Node):
    """Heading node with level 1-6.

    Parameters
    ----------
    level : int
        Heading level, 1 (largest) through 6
    children : list of Node, default = empty list
        Inline content of the heading

    """

    level: int
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the heading level."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self, *args)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self, *args)


@dataclass
class CodeBlock(Node):
    """Code block node.

    Parameters
    ----------
    literal : str
        Code content, not parsed as markdown. Normally ends with a newline.
    info : str, default = ""
        Info string following the opening fence (language and attributes)

    """

    literal: str
    info: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self, *args)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self, *args)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    children : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Ordinal of the first item of an ordered list
    tight : bool, default = True
        Whether the list is tight (no blank lines between items)

    """

    ordered: bool = False
    children: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self, *args)


@dataclass
class ListItem(Node):
    """List item node containing block content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, *args)


@dataclass
class Table(Node):
    """Table node (GFM extension).

    The first row is the header row. ``alignments`` fixes the column count;
    no row may have more cells than there are alignments.

    Parameters
    ----------
    children : list of TableRow, default = empty list
        Header row followed by the body rows
    alignments : list of {'left', 'center', 'right', None}, default = empty list
        Column alignment for each column

    """

    children: list[TableRow] = field(default_factory=list)
    alignments: list[Optional[Alignment]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self, *args)


@dataclass
class TableRow(Node):
    """Table row node containing cells."""

    children: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self, *args)


@dataclass
class TableCell(Node):
    """Table cell node containing inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self, *args)


@dataclass
class ThematicBreak(Node):
    """Thematic break (horizontal rule) node."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_thematic_break``."""
        return visitor.visit_thematic_break(self, *args)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node, emitted verbatim."""

    literal: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_html_block``."""
        return visitor.visit_html_block(self, *args)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    literal : str
        Text content, unescaped

    """

    literal: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self, *args)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self, *args)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self, *args)


@dataclass
class Strikethrough(Node):
    """Strikethrough node (GFM extension)."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_strikethrough``."""
        return visitor.visit_strikethrough(self, *args)


@dataclass
class CodeSpan(Node):
    """Inline code node.

    Parameters
    ----------
    literal : str
        Code content without delimiters
    metadata : dict, default = empty dict
        May hold ``"source"``, the exact source text of the span recovered
        by position, which is reused when it is a valid code span

    """

    literal: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_code_span``."""
        return visitor.visit_code_span(self, *args)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str
        Link destination
    children : list of Node, default = empty list
        Inline content forming the link label
    title : str, default = ""
        Link title; omitted from output when empty

    """

    url: str
    children: list[Node] = field(default_factory=list)
    title: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self, *args)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source
    alt_text : str, default = ""
        Alternative text
    title : str, default = ""
        Image title; omitted from output when empty

    """

    url: str
    alt_text: str = ""
    title: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self, *args)


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for soft breaks (newline in source), False for hard breaks

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_line_break``."""
        return visitor.visit_line_break(self, *args)


@dataclass
class HTMLInline(Node):
    """Inline raw HTML node, emitted verbatim."""

    literal: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_html_inline``."""
        return visitor.visit_html_inline(self, *args)
