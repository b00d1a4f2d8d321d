#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/renderers/markdown.py
"""Markdown serialization of the document tree.

This module provides the MarkdownRenderer class which converts a document
tree back into canonical Markdown text under the configured house style.

The renderer uses the visitor pattern. Every ``visit_*`` method receives the
node and an immutable :class:`RenderContext` and returns the rendered text of
that subtree; containers concatenate the text of their children. A block's
first line is never prefixed by the block itself, every later line starts with
``context.prefix`` (block-quote markers and list indentation), and blank lines
carry that prefix with trailing whitespace removed.

"""

from __future__ import annotations

from typing import Sequence

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
from hongdown.constants import BLOCK_QUOTE_PREFIX, THEMATIC_BREAK
from hongdown.options.config import Config
from hongdown.renderers.code import format_code_block
from hongdown.renderers.context import RenderContext
from hongdown.renderers.table import format_table
from hongdown.utils.escape import (
    escape_text,
    format_code_span,
    format_link_target,
    is_valid_code_span,
    normalize_whitespace,
)
from hongdown.utils.text import display_width


class MarkdownRenderer(NodeVisitor):
    """Render a document tree to Markdown text.

    Rendering is deterministic and does not modify the tree. Re-parsing the
    output and rendering it again with the same configuration reproduces the
    output exactly.

    Parameters
    ----------
    config : Config or None, default = None
        Formatting configuration

    Examples
    --------
    Basic usage:

        >>> from hongdown.ast import Document, Heading, Text
        >>> from hongdown.renderers.markdown import MarkdownRenderer
        >>> doc = Document(children=[Heading(level=3, children=[Text(literal="Title")])])
        >>> MarkdownRenderer().render_to_string(doc)
        '### Title\\n'

    """

    def __init__(self, config: Config | None = None):
        """Initialize the Markdown renderer with a configuration."""
        self.config = config or Config()

    def render_to_string(self, doc: Document) -> str:
        """Render a document tree to a Markdown string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Markdown text ending with a single newline, or an empty string for
            a document without content

        """
        return doc.accept(self, RenderContext())

    def _render_blocks(self, children: Sequence[Node], ctx: RenderContext) -> str:
        """Render sibling blocks and join them with the context's separator.

        Blocks that render to nothing are dropped so they leave no stray
        blank line behind. A list that directly follows a list of the same
        kind switches to the other marker; with the same marker a parser
        would read both as one loose list.

        """
        blocks: list[str] = []
        previous: Node | None = None
        previous_alternate = False

        for child in children:
            alternate = False
            if isinstance(child, List):
                alternate = (
                    isinstance(previous, List) and previous.ordered == child.ordered and not previous_alternate
                )
                block = child.accept(self, ctx.with_alternate_marker(alternate))
            else:
                block = child.accept(self, ctx)

            if block:
                blocks.append(block)
                previous = child
                previous_alternate = alternate

        return ctx.block_separator.join(blocks)

    def _render_inline(self, children: Sequence[Node], ctx: RenderContext) -> str:
        """Render a run of inline nodes.

        Adjacent text nodes and soft breaks are merged before escaping, so
        that whitespace is normalized across node boundaries and the escaping
        lookaround sees the neighbouring characters. Text following a hard
        break loses its leading whitespace, which a parser would drop from the
        continuation line anyway.

        Emphasis and strong emphasis that directly follow a ``*`` are
        delimited with ``_`` instead, since ``*a**b*`` would read back as one
        delimiter run.

        """
        parts: list[str] = []
        nodes: list[Node | None] = []
        pending: list[str] = []
        after_hard_break = False

        for child in children:
            if isinstance(child, Text):
                pending.append(child.literal)
                continue
            if isinstance(child, LineBreak) and (child.soft or ctx.single_line):
                pending.append("\n")
                continue

            if pending:
                parts.append(self._render_text_run("".join(pending), after_hard_break))
                nodes.append(None)
                pending = []
            parts.append(child.accept(self, ctx))
            nodes.append(child)
            after_hard_break = isinstance(child, LineBreak)

        if pending:
            parts.append(self._render_text_run("".join(pending), after_hard_break))
            nodes.append(None)

        for i in range(1, len(parts)):
            if not (isinstance(nodes[i], (Emphasis, Strong)) and parts[i - 1].endswith("*")):
                continue
            following = parts[i + 1][:1] if i + 1 < len(parts) else ""
            preceding = parts[i - 2][-1:] if i >= 2 else ""
            # an underscore can neither open after nor close before a word character
            if not following.isalnum():
                parts[i] = _underscore_delimited(parts[i], nodes[i])
            elif isinstance(nodes[i - 1], (Emphasis, Strong)) and not preceding.isalnum():
                parts[i - 1] = _underscore_delimited(parts[i - 1], nodes[i - 1])
        return "".join(parts)

    @staticmethod
    def _render_text_run(text: str, after_hard_break: bool) -> str:
        text = normalize_whitespace(text)
        if after_hard_break:
            text = text.lstrip(" ")
        return escape_text(text)

    def _list_item_marker(self, ctx: RenderContext) -> str:
        """Return the marker (with its surrounding spaces) for the current item.

        Unordered items use ``leading_spaces``, the bullet and
        ``trailing_spaces``. Ordered items use ``leading_spaces``, the ordinal
        and the marker for the current ordered depth, padded with spaces up to
        ``indent_width`` and followed by at least one space. A list in
        alternate-marker mode swaps the bullet (``-`` and ``*``) or the
        ordered delimiter (``.`` and ``)``).

        """
        list_config = self.config.list
        leading = " " * list_config.leading_spaces
        if not ctx.ordered:
            bullet = list_config.unordered_marker
            if ctx.alternate_marker:
                bullet = "*" if bullet == "-" else "-"
            return leading + bullet + " " * list_config.trailing_spaces

        delimiter = self.config.ordered_list.marker_for_depth(ctx.ordered_depth)
        if ctx.alternate_marker:
            delimiter = ")" if delimiter == "." else "."
        marker = f"{leading}{ctx.ordinal}{delimiter}"
        return marker + " " * max(1, list_config.indent_width - len(marker))

    def visit_document(self, node: Document, ctx: RenderContext) -> str:
        """Render a Document node.

        Parameters
        ----------
        node : Document
            Document to render
        ctx : RenderContext
            Top-level context

        Returns
        -------
        str
            Blocks separated by blank lines, ending with a newline

        """
        body = self._render_blocks(node.children, ctx)
        return body + "\n" if body else ""

    def visit_heading(self, node: Heading, ctx: RenderContext) -> str:
        """Render a Heading node.

        Levels 1 and 2 use an underline when the configuration asks for it;
        the underline matches the display width of the heading text. Empty
        headings and levels 3 to 6 use the ``#`` prefix.

        """
        content = self._render_inline(node.children, ctx.enter_single_line()).strip()

        heading_config = self.config.heading
        setext = (node.level == 1 and heading_config.setext_h1) or (node.level == 2 and heading_config.setext_h2)
        if setext and content:
            underline_char = "=" if node.level == 1 else "-"
            return f"{content}\n{ctx.prefix}{underline_char * display_width(content)}"

        hashes = "#" * node.level
        return f"{hashes} {content}" if content else hashes

    def visit_paragraph(self, node: Paragraph, ctx: RenderContext) -> str:
        """Render a Paragraph node."""
        return self._render_inline(node.children, ctx).strip()

    def visit_code_block(self, node: CodeBlock, ctx: RenderContext) -> str:
        """Render a CodeBlock node."""
        return format_code_block(node.literal, node.info, self.config.code_block, ctx)

    def visit_block_quote(self, node: BlockQuote, ctx: RenderContext) -> str:
        """Render a BlockQuote node.

        Nested quotes compose because the quote marker becomes part of the
        prefix of every line the children emit.

        """
        inner = self._render_blocks(node.children, ctx.enter_block_quote())
        if not inner:
            return BLOCK_QUOTE_PREFIX.rstrip()
        return BLOCK_QUOTE_PREFIX + inner

    def visit_list(self, node: List, ctx: RenderContext) -> str:
        """Render a List node.

        Items of a tight list follow each other directly; items of a loose
        list are separated by a blank line.

        """
        list_ctx = ctx.enter_list(node.ordered, node.tight, ctx.alternate_marker)
        items = [item.accept(self, list_ctx.with_ordinal(node.start + i)) for i, item in enumerate(node.children)]
        return list_ctx.block_separator.join(items)

    def visit_list_item(self, node: ListItem, ctx: RenderContext) -> str:
        """Render a ListItem node.

        The first block follows the marker on the same line; later lines are
        indented by ``indent_width`` for unordered items and by the marker
        width for ordered items.

        """
        marker = self._list_item_marker(ctx)
        indent = len(marker) if ctx.ordered else self.config.list.indent_width
        body = self._render_blocks(node.children, ctx.enter_list_item(indent))
        if not body:
            return marker.rstrip()
        return marker + body

    def visit_table(self, node: Table, ctx: RenderContext) -> str:
        """Render a Table node as an aligned pipe table."""
        return format_table(node, lambda row: row.accept(self, ctx), ctx)

    def visit_table_row(self, node: TableRow, ctx: RenderContext) -> list[str]:
        """Render the cells of a TableRow node.

        Returns
        -------
        list of str
            Unescaped, unpadded cell text; the table formatter lays it out

        """
        return [cell.accept(self, ctx) for cell in node.children]

    def visit_table_cell(self, node: TableCell, ctx: RenderContext) -> str:
        """Render a TableCell node on a single line."""
        return self._render_inline(node.children, ctx.enter_single_line()).strip()

    def visit_thematic_break(self, node: ThematicBreak, ctx: RenderContext) -> str:
        """Render a ThematicBreak node."""
        return THEMATIC_BREAK

    def visit_html_block(self, node: HTMLBlock, ctx: RenderContext) -> str:
        """Render an HTMLBlock node verbatim."""
        lines = node.literal.rstrip("\n").split("\n")
        output = [lines[0]]
        for line in lines[1:]:
            output.append(ctx.line_prefix(line) + line)
        return "\n".join(output)

    def visit_text(self, node: Text, ctx: RenderContext) -> str:
        """Render a Text node."""
        return escape_text(normalize_whitespace(node.literal))

    def visit_emphasis(self, node: Emphasis, ctx: RenderContext) -> str:
        """Render an Emphasis node."""
        return f"*{self._render_inline(node.children, ctx)}*"

    def visit_strong(self, node: Strong, ctx: RenderContext) -> str:
        """Render a Strong node."""
        return f"**{self._render_inline(node.children, ctx)}**"

    def visit_strikethrough(self, node: Strikethrough, ctx: RenderContext) -> str:
        """Render a Strikethrough node."""
        return f"~~{self._render_inline(node.children, ctx)}~~"

    def visit_code_span(self, node: CodeSpan, ctx: RenderContext) -> str:
        """Render a CodeSpan node.

        Source text recovered by the parser is reused when it is a complete
        code span; otherwise the delimiter is chosen from the literal.

        """
        source = node.metadata.get("source")
        if source and is_valid_code_span(source):
            return source
        return format_code_span(node.literal)

    def visit_link(self, node: Link, ctx: RenderContext) -> str:
        """Render a Link node as an inline link."""
        label = self._render_inline(node.children, ctx)
        return f"[{label}]({format_link_target(node.url, node.title)})"

    def visit_image(self, node: Image, ctx: RenderContext) -> str:
        """Render an Image node."""
        alt = escape_text(normalize_whitespace(node.alt_text))
        return f"![{alt}]({format_link_target(node.url, node.title)})"

    def visit_line_break(self, node: LineBreak, ctx: RenderContext) -> str:
        """Render a LineBreak node.

        Hard breaks become a backslash at the end of the line; the next line
        carries the current prefix. Soft breaks, and hard breaks in headings
        and table cells, become a single space.

        """
        if node.soft or ctx.single_line:
            return " "
        return "\\\n" + ctx.prefix

    def visit_html_inline(self, node: HTMLInline, ctx: RenderContext) -> str:
        """Render an HTMLInline node verbatim."""
        if ctx.single_line:
            return node.literal.replace("\n", " ")
        return node.literal.replace("\n", "\n" + ctx.prefix)


def _underscore_delimited(rendered: str, node: Node | None) -> str:
    """Swap the outer ``*`` delimiters of rendered emphasis for ``_``."""
    width = 1 if isinstance(node, Emphasis) else 2
    return "_" * width + rendered[width:-width] + "_" * width


def serialize(root: Document, config: Config | None = None) -> str:
    """Render a document tree to canonical Markdown text.

    Parameters
    ----------
    root : Document
        Root of the document tree
    config : Config or None, default = None
        Formatting configuration; built-in defaults when None

    Returns
    -------
    str
        The rendered document

    Raises
    ------
    ContractViolationError
        If the tree breaks an invariant the renderer depends on, such as a
        table row wider than the table's alignment list

    Examples
    --------
        >>> from hongdown.ast import Document, Paragraph, Text
        >>> serialize(Document(children=[Paragraph(children=[Text(literal="a_b *c*")])]))
        'a_b \\\\*c\\\\*\\n'

    """
    return MarkdownRenderer(config).render_to_string(root)
