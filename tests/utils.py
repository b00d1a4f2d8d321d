"""Test utilities for the hongdown test suite.

This module provides small builders for document trees so that tests can
state the structure they render without repeating constructor boilerplate.
"""

from hongdown.ast import (
    Document,
    List,
    ListItem,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
)


def para(text: str) -> Paragraph:
    """Create a paragraph holding a single text node."""
    return Paragraph(children=[Text(literal=text)])


def doc(*blocks) -> Document:
    """Create a document from block nodes."""
    return Document(children=list(blocks))


def item(*blocks) -> ListItem:
    """Create a list item; plain strings become paragraphs."""
    return ListItem(children=[para(b) if isinstance(b, str) else b for b in blocks])


def bullet_list(*items, tight: bool = True) -> List:
    """Create an unordered list."""
    return List(ordered=False, children=list(items), tight=tight)


def ordered_list(*items, start: int = 1, tight: bool = True) -> List:
    """Create an ordered list."""
    return List(ordered=True, children=list(items), start=start, tight=tight)


def cell(text: str) -> TableCell:
    """Create a table cell holding a single text node."""
    return TableCell(children=[Text(literal=text)])


def table(rows, alignments) -> Table:
    """Create a table from rows of strings; the first row is the header."""
    table_rows = [
        TableRow(children=[cell(text) for text in row], is_header=index == 0) for index, row in enumerate(rows)
    ]
    return Table(children=table_rows, alignments=list(alignments))
