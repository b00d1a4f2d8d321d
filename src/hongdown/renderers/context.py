#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/renderers/context.py
"""Render context threaded through the markdown serializer.

The context is an immutable value. Entering a scope (a block quote, a list
item, a list) produces a new context for the recursive call; leaving the scope
needs no restore step because the caller still holds its own value.

"""

from __future__ import annotations

from dataclasses import dataclass, replace

from hongdown.constants import BLOCK_QUOTE_PREFIX


@dataclass(frozen=True)
class RenderContext:
    """Indentation and nesting state for one point of the tree walk.

    Parameters
    ----------
    prefix : str, default ""
        Text that starts every continuation line emitted at this point: the
        accumulated block-quote markers and list-item indentation. The first
        line of a block is never prefixed by the block itself because the
        caller has already positioned it (after a list marker, after a quote
        marker, or after a previous line's prefix).
    in_block_quote : bool, default False
        Whether some ancestor is a block quote
    list_depth : int, default 0
        Number of enclosing lists of any kind
    ordered_depth : int, default 0
        Number of enclosing ordered lists; selects the ordered marker parity
    ordered : bool, default False
        Whether the innermost enclosing list is ordered
    ordinal : int, default 0
        Number of the list item being rendered, for ordered lists
    tight : bool, default False
        Whether sibling blocks are joined without blank lines (inside an item
        of a tight list)
    single_line : bool, default False
        Whether inline content must stay on one line (headings, table cells);
        hard breaks render as a space
    alternate_marker : bool, default False
        Whether the innermost list uses the other bullet or ordered delimiter,
        so that it does not continue a preceding sibling list of the same kind

    """

    prefix: str = ""
    in_block_quote: bool = False
    list_depth: int = 0
    ordered_depth: int = 0
    ordered: bool = False
    ordinal: int = 0
    tight: bool = False
    single_line: bool = False
    alternate_marker: bool = False

    @property
    def blank_line(self) -> str:
        """The prefix for an empty line, without trailing whitespace."""
        return self.prefix.rstrip()

    @property
    def block_separator(self) -> str:
        """Text placed between two sibling blocks in this context."""
        if self.tight:
            return "\n" + self.prefix
        return "\n" + self.blank_line + "\n" + self.prefix

    def line_prefix(self, line: str) -> str:
        """Return the prefix for a continuation line with the given content."""
        return self.prefix if line else self.blank_line

    def enter_block_quote(self) -> RenderContext:
        """Return the context for the children of a block quote."""
        return replace(self, prefix=self.prefix + BLOCK_QUOTE_PREFIX, in_block_quote=True, tight=False)

    def enter_list(self, ordered: bool, tight: bool, alternate_marker: bool = False) -> RenderContext:
        """Return the context for the items of a list."""
        return replace(
            self,
            list_depth=self.list_depth + 1,
            ordered_depth=self.ordered_depth + 1 if ordered else self.ordered_depth,
            ordered=ordered,
            ordinal=0,
            tight=tight,
            alternate_marker=alternate_marker,
        )

    def with_alternate_marker(self, alternate_marker: bool) -> RenderContext:
        """Return this context with the given marker choice for the next list."""
        return replace(self, alternate_marker=alternate_marker)

    def with_ordinal(self, ordinal: int) -> RenderContext:
        """Return the context for the list item numbered ``ordinal``."""
        return replace(self, ordinal=ordinal)

    def enter_list_item(self, indent: int) -> RenderContext:
        """Return the context for the blocks inside a list item."""
        return replace(self, prefix=self.prefix + " " * indent)

    def enter_single_line(self) -> RenderContext:
        """Return the context for inline content that must fit on one line."""
        return replace(self, single_line=True)
