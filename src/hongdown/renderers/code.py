#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/renderers/code.py
"""Fenced code block formatting.

The fence is always at least one character longer than the longest run of
the fence character that starts any content line, so no content line can
close the block early. The same algorithm serves every indentation context:
at top level, inside block quotes, inside list items, and any combination,
because the context only contributes the prefix of continuation lines.

"""

from __future__ import annotations

from hongdown.options.config import CodeBlockConfig
from hongdown.renderers.context import RenderContext


def split_code_lines(literal: str) -> list[str]:
    """Split a code literal into lines, dropping the final line terminator.

    Examples
    --------
        >>> split_code_lines("a\\n\\nb\\n")
        ['a', '', 'b']
        >>> split_code_lines("")
        []

    """
    if not literal:
        return []
    if literal.endswith("\n"):
        literal = literal[:-1]
    return [line.rstrip("\r") for line in literal.split("\n")]


def longest_leading_fence_run(lines: list[str], fence_char: str) -> int:
    """Return the longest run of ``fence_char`` that opens any line.

    Leading spaces are skipped, since a closing fence may be indented.

    Parameters
    ----------
    lines : list of str
        Content lines of the code block
    fence_char : str
        ``"~"`` or ``"`"``

    Returns
    -------
    int
        Length of the longest leading run, 0 if no line starts with the
        fence character

    """
    longest = 0
    for line in lines:
        stripped = line.lstrip(" ")
        run = len(stripped) - len(stripped.lstrip(fence_char))
        longest = max(longest, run)
    return longest


def select_fence(lines: list[str], info: str, config: CodeBlockConfig) -> str:
    """Choose the fence for a code block.

    Backtick fences cannot carry an info string containing a backtick; such
    blocks fall back to tildes.

    Returns
    -------
    str
        The fence string, used for both the opening and the closing line

    """
    fence_char = config.fence_char
    if fence_char == "`" and "`" in info:
        fence_char = "~"
    length = max(config.min_fence_length, longest_leading_fence_run(lines, fence_char) + 1)
    return fence_char * length


def format_code_block(literal: str, info: str, config: CodeBlockConfig, context: RenderContext) -> str:
    """Render a fenced code block.

    Parameters
    ----------
    literal : str
        Code content
    info : str
        Info string; ``config.default_language`` is used when it is empty
    config : CodeBlockConfig
        Fence settings
    context : RenderContext
        Current indentation context

    Returns
    -------
    str
        The block without a trailing newline. The opening fence line carries
        no prefix (the caller has positioned it); content and closing lines
        carry ``context.prefix``, and empty content lines carry the prefix
        without trailing whitespace.

    """
    lines = split_code_lines(literal)
    info = info.strip() or config.default_language
    fence = select_fence(lines, info, config)

    opening = fence
    if info:
        opening += (" " if config.space_after_fence else "") + info

    output = [opening]
    for line in lines:
        output.append(context.line_prefix(line) + line)
    output.append(context.prefix + fence)
    return "\n".join(output)
