#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/utils/escape.py
"""Markdown escaping utilities.

This module holds the pure, character-level functions the serializer uses to
make literal text safe to emit: inline-text escaping, code-span delimiter
selection and table-cell pipe escaping. Each function is a single left-to-right
pass with at most one character of lookaround.

"""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")

# Escaped wherever they appear
_ALWAYS_ESCAPE = frozenset("*\\`")


def normalize_whitespace(text: str) -> str:
    """Collapse every run of whitespace (newlines included) to one space.

    Parameters
    ----------
    text : str
        Text to normalize

    Returns
    -------
    str
        Text with whitespace runs collapsed

    Examples
    --------
        >>> normalize_whitespace("a  \\n  b")
        'a b'

    """
    return _WHITESPACE_RUN.sub(" ", text)


def escape_text(text: str) -> str:
    r"""Escape characters that a Markdown parser could read as syntax.

    Escaping is context-aware so that output stays readable:

    - ``*``, ``\`` and ``\``` are always escaped.
    - ``_`` is escaped unless both neighbours are alphanumeric; intraword
      underscores (``snake_case``) never open or close emphasis.
    - ``[`` is escaped unless it is the last character or is followed by
      another ``[``.
    - ``]`` is escaped only where it could close a link: not first, not last,
      not preceded by ``]``, and followed by ``(`` or ``[``.

    Every other character is copied unchanged.

    Parameters
    ----------
    text : str
        Literal text content

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_text("a_b")
        'a_b'
        >>> escape_text("_b")
        '\\_b'
        >>> escape_text("[note]")
        '\\[note]'

    """
    result: list[str] = []
    last = len(text) - 1
    for i, char in enumerate(text):
        if char in _ALWAYS_ESCAPE:
            result.append("\\")
        elif char == "_":
            prev_alnum = i > 0 and text[i - 1].isalnum()
            next_alnum = i < last and text[i + 1].isalnum()
            if not (prev_alnum and next_alnum):
                result.append("\\")
        elif char == "[":
            if i < last and text[i + 1] != "[":
                result.append("\\")
        elif char == "]":
            if 0 < i < last and text[i - 1] != "]" and text[i + 1] in "([":
                result.append("\\")
        result.append(char)
    return "".join(result)


def longest_backtick_run(content: str) -> int:
    """Return the length of the longest run of consecutive backticks."""
    longest = 0
    current = 0
    for char in content:
        if char == "`":
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def format_code_span(content: str) -> str:
    """Wrap content in a code span that cannot be confused with it.

    The delimiter is one backtick longer than the longest backtick run in the
    content. The content is padded with one space on each side when it starts
    or ends with a backtick, or when it starts or ends with a space without
    being all spaces (a parser strips one space from each side of such spans).

    Parameters
    ----------
    content : str
        Literal code content

    Returns
    -------
    str
        Code span markup

    Examples
    --------
        >>> format_code_span("a `b` c")
        '``a `b` c``'
        >>> format_code_span("`x")
        '`` `x ``'

    """
    delimiter = "`" * (longest_backtick_run(content) + 1)

    needs_space = False
    if content:
        first, last = content[0], content[-1]
        if first == "`" or last == "`":
            needs_space = True
        elif (first == " " or last == " ") and content.strip(" "):
            needs_space = True

    if needs_space:
        return f"{delimiter} {content} {delimiter}"
    return f"{delimiter}{content}{delimiter}"


def is_valid_code_span(source: str) -> bool:
    """Check whether source text is a complete code span.

    Used to validate text recovered by source position rather than by tree
    walk: the text must open with at least one backtick, close with the same
    number, and the delimiters must not make up more than half the string.

    Parameters
    ----------
    source : str
        Candidate code span source

    Returns
    -------
    bool
        True if ``source`` has matching opening and closing delimiters

    Examples
    --------
        >>> is_valid_code_span("``foo``")
        True
        >>> is_valid_code_span("``foo`")
        False

    """
    if not source:
        return False

    leading = len(source) - len(source.lstrip("`"))
    if leading == 0:
        return False

    trailing = len(source) - len(source.rstrip("`"))
    return leading == trailing and leading <= len(source) // 2


def escape_table_cell(content: str) -> str:
    r"""Escape unescaped pipe characters in rendered table cell content.

    A character already preceded by an unconsumed backslash is copied through
    with its escape intact, so existing escapes are never doubled.

    Parameters
    ----------
    content : str
        Rendered inline content of a cell

    Returns
    -------
    str
        Content safe to place between cell delimiters

    Examples
    --------
        >>> escape_table_cell("a|b")
        'a\\|b'
        >>> escape_table_cell("a\\|b")
        'a\\|b'

    """
    result: list[str] = []
    i = 0
    length = len(content)
    while i < length:
        char = content[i]
        if char == "\\" and i + 1 < length:
            result.append(content[i : i + 2])
            i += 2
            continue
        if char == "|":
            result.append("\\")
        result.append(char)
        i += 1
    return "".join(result)


def _has_balanced_parens(url: str) -> bool:
    depth = 0
    for char in url:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def format_link_target(url: str, title: str = "") -> str:
    """Format the parenthesized part of an inline link or image.

    Destinations containing whitespace or unbalanced parentheses (and empty
    destinations followed by a title) are wrapped in angle brackets. Quotes
    and backslashes inside the title are backslash-escaped.

    Parameters
    ----------
    url : str
        Link destination
    title : str, default ""
        Link title; omitted when empty

    Returns
    -------
    str
        Destination and optional title, without the surrounding parentheses

    Examples
    --------
        >>> format_link_target("https://example.com")
        'https://example.com'
        >>> format_link_target("a b.md", 'say "hi"')
        '<a b.md> "say \\\\"hi\\\\""'

    """
    if _WHITESPACE_RUN.search(url) or not _has_balanced_parens(url) or (not url and title):
        destination = "<" + url.replace("<", "\\<").replace(">", "\\>") + ">"
    else:
        destination = url

    if not title:
        return destination
    escaped_title = title.replace("\\", "\\\\").replace('"', '\\"')
    return f'{destination} "{escaped_title}"'
