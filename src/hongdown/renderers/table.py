#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/renderers/table.py
"""Pipe table formatting.

Tables are laid out in two passes. The measure pass renders every cell,
escapes its pipes and records the widest cell of each column (never narrower
than three columns, the room an alignment marker needs). The emit pass then
writes the header row, the alignment row and the body rows, padding each
cell to its column width.

"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from hongdown.ast.nodes import Table, TableRow
from hongdown.constants import MIN_TABLE_COLUMN_WIDTH, Alignment
from hongdown.exceptions import ContractViolationError
from hongdown.renderers.context import RenderContext
from hongdown.utils.escape import escape_table_cell
from hongdown.utils.text import display_width, pad_to_width


def render_cells(table: Table, render_row: Callable[[TableRow], Sequence[str]]) -> list[list[str]]:
    """Render and pipe-escape every cell of a table.

    Parameters
    ----------
    table : Table
        Table node; its alignment list fixes the column count
    render_row : callable
        Renders the inline content of each cell of one row to text

    Returns
    -------
    list of list of str
        Escaped cell text, row by row

    Raises
    ------
    ContractViolationError
        If a row has more cells than the table has alignments

    """
    num_cols = len(table.alignments)
    rendered: list[list[str]] = []
    for index, row in enumerate(table.children):
        if len(row.children) > num_cols:
            raise ContractViolationError(
                f"table row {index} has {len(row.children)} cells but only {num_cols} column alignments",
                rendering_stage="table",
            )
        rendered.append([escape_table_cell(cell) for cell in render_row(row)])
    return rendered


def measure_columns(rows: Sequence[Sequence[str]], num_cols: int) -> list[int]:
    """Compute the width of each column across all rows.

    Parameters
    ----------
    rows : sequence of sequence of str
        Escaped cell text, row by row
    num_cols : int
        Number of columns

    Returns
    -------
    list of int
        Display width of the widest cell per column, at least 3

    """
    widths = [MIN_TABLE_COLUMN_WIDTH] * num_cols
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], display_width(cell))
    return widths


def alignment_marker(alignment: Optional[Alignment], width: int) -> str:
    """Return the separator-row cell for a column.

    Examples
    --------
        >>> alignment_marker("center", 5)
        ':---:'
        >>> alignment_marker("left", 3)
        ':--'
        >>> alignment_marker(None, 4)
        '----'

    """
    if alignment == "center":
        return ":" + "-" * (width - 2) + ":"
    if alignment == "left":
        return ":" + "-" * (width - 1)
    if alignment == "right":
        return "-" * (width - 1) + ":"
    return "-" * width


def _format_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return "|" + "".join(f" {pad_to_width(cell, widths[i])} |" for i, cell in enumerate(cells))


def format_table(table: Table, render_row: Callable[[TableRow], Sequence[str]], context: RenderContext) -> str:
    """Render a table as an aligned pipe table.

    Parameters
    ----------
    table : Table
        Table node; the first row is the header
    render_row : callable
        Renders the inline content of each cell of one row to text
    context : RenderContext
        Current indentation context; every row after the first is prefixed
        with ``context.prefix``

    Returns
    -------
    str
        The table without a trailing newline, or an empty string when the
        table has no rows

    """
    if not table.children:
        return ""

    rows = render_cells(table, render_row)
    widths = measure_columns(rows, len(table.alignments))

    lines = [_format_row(rows[0], widths)]
    separator = "".join(f" {alignment_marker(alignment, widths[i])} |" for i, alignment in enumerate(table.alignments))
    lines.append("|" + separator)
    lines.extend(_format_row(row, widths) for row in rows[1:])
    return ("\n" + context.prefix).join(lines)
