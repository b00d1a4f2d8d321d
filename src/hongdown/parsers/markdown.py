#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/parsers/markdown.py
"""Markdown to document tree conversion.

This module builds the document tree the serializer consumes from mistune's
token stream. Only the node kinds the serializer knows are produced; tokens
without a counterpart (blank-line markers) are dropped.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from hongdown.ast import (
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
from hongdown.constants import DEPS_MARKDOWN
from hongdown.exceptions import ParsingError
from hongdown.options.markdown import MarkdownParserOptions
from hongdown.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class MarkdownParser:
    r"""Parse Markdown text into a document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\n\nThis is **bold**.")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise TypeError(f"Expected MarkdownParserOptions, got {type(options).__name__}")
        self.options = options or MarkdownParserOptions()

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into a Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Markdown text, UTF-8 bytes, a path to a file, or a readable stream.
            A ``str`` is always treated as Markdown text, never as a path.

        Returns
        -------
        Document
            Root of the document tree

        Raises
        ------
        ParsingError
            If the input cannot be decoded or mistune fails
        DependencyError
            If mistune is not installed

        """
        text = self._load_text_content(input_data)

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        try:
            tokens, _state = markdown.parse(text)
        except Exception as e:
            raise ParsingError(f"mistune failed to parse the document: {e}", original_error=e) from e

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        logger.debug("Parsed %d top-level blocks", len(children))
        return Document(children=children)

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load Markdown text from the supported input types."""
        try:
            if isinstance(input_data, str):
                return input_data
            if isinstance(input_data, bytes):
                return input_data.decode("utf-8-sig")
            if isinstance(input_data, Path):
                return input_data.read_text(encoding="utf-8-sig")
            data = input_data.read()
        except UnicodeDecodeError as e:
            raise ParsingError("Markdown input is not valid UTF-8", original_error=e) from e
        if isinstance(data, bytes):
            try:
                return data.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise ParsingError("Markdown input is not valid UTF-8", original_error=e) from e
        return data

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of block-level mistune tokens into nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Optional[Node]:
        """Process a single block-level mistune token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting node, or None for tokens with no counterpart

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is the content of tight list items
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(literal=token.get("raw", ""))

        if token_type != "blank_line":
            logger.debug("Skipping unsupported block token: %s", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token."""
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1)
        return Heading(level=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process fenced and indented code block tokens."""
        attrs = token.get("attrs", {})
        info = attrs.get("info") or ""
        return CodeBlock(literal=token.get("raw", ""), info=info.strip())

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Tightness is carried at the token's top level; the start number is
        only present in the attributes when it is not 1.

        """
        attrs = token.get("attrs", {})
        items = [
            ListItem(children=self._process_tokens(item.get("children", [])))
            for item in token.get("children", [])
            if item.get("type") == "list_item"
        ]
        return List(
            ordered=attrs.get("ordered", False),
            children=items,
            start=attrs.get("start", 1),
            tight=token.get("tight", True),
        )

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        The header cells are direct children of ``table_head``; body rows are
        ``table_row`` children of ``table_body``. The column alignments are
        taken from the header cells.

        """
        rows: list[TableRow] = []
        alignments = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                cells = []
                for cell_token in section.get("children", []):
                    alignments.append(cell_token.get("attrs", {}).get("align"))
                    cells.append(TableCell(children=self._process_inline_tokens(cell_token.get("children", []))))
                rows.insert(0, TableRow(children=cells, is_header=True))
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    cells = [
                        TableCell(children=self._process_inline_tokens(cell_token.get("children", [])))
                        for cell_token in row_token.get("children", [])
                    ]
                    rows.append(TableRow(children=cells))

        return Table(children=rows, alignments=alignments)

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens, merging adjacent text tokens."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is None:
                continue
            if isinstance(node, Text) and nodes and isinstance(nodes[-1], Text):
                nodes[-1] = Text(literal=nodes[-1].literal + node.literal)
            else:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token."""
        return Text(literal=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        """Handle strong token."""
        return Strong(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token."""
        return Emphasis(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        """Handle strikethrough token."""
        return Strikethrough(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> CodeSpan:
        """Handle codespan token."""
        return CodeSpan(literal=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {})
        return Link(
            url=attrs.get("url", ""),
            children=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title") or "",
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the alt text is the plain text of its children."""
        attrs = token.get("attrs", {})
        return Image(
            url=attrs.get("url", ""),
            alt_text=_plain_text(token.get("children", [])),
            title=attrs.get("title") or "",
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle hard line break token."""
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle soft line break token."""
        return LineBreak(soft=True)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        """Handle inline_html token."""
        return HTMLInline(literal=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Optional[Node]:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline node, or None for unsupported tokens

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug("Skipping unsupported inline token: %s", token_type)
        return None


def _plain_text(tokens: list[dict[str, Any]]) -> str:
    """Concatenate the text of inline tokens, dropping their markup."""
    parts = []
    for token in tokens:
        if "raw" in token and token.get("type") in ("text", "codespan"):
            parts.append(token["raw"])
        elif token.get("type") == "softbreak":
            parts.append(" ")
        elif "children" in token:
            parts.append(_plain_text(token["children"]))
    return "".join(parts)


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to a document tree.

    This is a convenience function that creates a parser and parses the
    markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        Root of the document tree

    Examples
    --------
    >>> from hongdown.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownParser(options).parse(markdown_content)
