#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/utils/text.py
"""Text measurement utilities.

Functions
---------
display_width : Number of terminal columns a string occupies
pad_to_width : Left-justify a string to a display width

Examples
--------
    >>> display_width("abc")
    3
    >>> display_width("한국어")
    6

"""

from __future__ import annotations

import unicodedata


def char_width(char: str) -> int:
    """Return the number of columns a single character occupies.

    East Asian wide and fullwidth characters take two columns, combining
    marks and zero-width format characters take none.

    """
    if unicodedata.combining(char) or unicodedata.category(char) in ("Mn", "Me", "Cf"):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the display width of ``text`` in columns.

    Parameters
    ----------
    text : str
        Single-line text to measure

    Returns
    -------
    int
        Sum of the widths of all characters

    """
    return sum(char_width(char) for char in text)


def pad_to_width(text: str, width: int) -> str:
    """Pad ``text`` with trailing spaces up to ``width`` display columns."""
    return text + " " * max(0, width - display_width(text))
