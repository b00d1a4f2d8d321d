#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/diff/unified.py
"""Unified diff generation with optional ANSI colors.

The diff compares the original text of a document with its formatted form,
in the format standard diff tools and patch understand.
"""

from __future__ import annotations

import difflib
from typing import Iterator

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
BOLD = "\033[1m"
RESET = "\033[0m"


def unified_diff(original: str, formatted: str, path: str = "<stdin>", context_lines: int = 3) -> Iterator[str]:
    """Yield the lines of a unified diff from ``original`` to ``formatted``.

    Parameters
    ----------
    original : str
        Text before formatting
    formatted : str
        Text after formatting
    path : str, default "<stdin>"
        Name shown in the file headers
    context_lines : int, default 3
        Number of unchanged lines around each change

    Yields
    ------
    str
        Diff lines, each ending with a newline; nothing when the texts are
        equal

    """
    original_lines = original.splitlines(keepends=True)
    formatted_lines = formatted.splitlines(keepends=True)
    for line in difflib.unified_diff(
        original_lines,
        formatted_lines,
        fromfile=f"{path} (original)",
        tofile=f"{path} (formatted)",
        n=context_lines,
    ):
        yield line if line.endswith("\n") else line + "\n\\ No newline at end of file\n"


class UnifiedDiffRenderer:
    """Render unified diff with optional ANSI colors.

    This renderer adds color codes to standard unified diff output:
    - Red for deletions (lines starting with -)
    - Green for additions (lines starting with +)
    - Cyan for hunk headers (lines starting with @@)
    - Bold for file headers (lines starting with --- or +++)

    Parameters
    ----------
    use_color : bool, default = True
        If True, add ANSI color codes to output

    """

    def __init__(self, use_color: bool = True):
        """Initialize the unified diff renderer."""
        self.use_color = use_color

    def render(self, diff_lines: Iterator[str]) -> Iterator[str]:
        """Render unified diff with optional colors.

        Parameters
        ----------
        diff_lines : Iterator[str]
            Lines of unified diff output

        Yields
        ------
        str
            Colorized diff lines (or original lines if color disabled)

        """
        if not self.use_color:
            yield from diff_lines
            return

        for line in diff_lines:
            body = line.rstrip("\n")
            ending = line[len(body) :]
            if line.startswith("---") or line.startswith("+++"):
                yield f"{BOLD}{body}{RESET}{ending}"
            elif line.startswith("@@"):
                yield f"{CYAN}{body}{RESET}{ending}"
            elif line.startswith("+"):
                yield f"{GREEN}{body}{RESET}{ending}"
            elif line.startswith("-"):
                yield f"{RED}{body}{RESET}{ending}"
            else:
                yield line


def colorize_diff(diff_lines: Iterator[str], use_color: bool = True) -> Iterator[str]:
    """Colorize unified diff output.

    Parameters
    ----------
    diff_lines : Iterator[str]
        Lines of unified diff output
    use_color : bool, default = True
        If True, add ANSI color codes

    Yields
    ------
    str
        Colorized diff lines

    """
    yield from UnifiedDiffRenderer(use_color=use_color).render(diff_lines)
