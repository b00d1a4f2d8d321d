"""hongdown - A Markdown formatter with a canonical house style.

hongdown parses a Markdown document and renders it back as text under a
configurable house style: heading underline style, list markers and spacing,
alternating ordered-list markers, code fence character and length, and
aligned pipe tables. Rendering the output again gives the same text, and
characters are escaped only where a parser could misread them as syntax.

Requirements
------------
- Python 3.10+
- mistune 3 for parsing

Examples
--------
Format a string:

    >>> from hongdown import format_markdown
    >>> print(format_markdown("Title\\n=====\\n\\n* a\\n* b\\n"), end="")
    Title
    =====
    <BLANKLINE>
     -  a
     -  b

Render a tree built in code:

    >>> from hongdown import serialize
    >>> from hongdown.ast import Document, Paragraph, Text
    >>> serialize(Document(children=[Paragraph(children=[Text(literal="snake_case")])]))
    'snake_case\\n'

See Also
--------
hongdown.ast : Document tree node definitions
hongdown.options : Configuration records

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from hongdown.api import FormatResult, format_file, format_markdown
from hongdown.exceptions import (
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    ConfigValidationError,
    ContractViolationError,
    DependencyError,
    HongdownError,
    ParsingError,
    RenderingError,
)
from hongdown.options.config import Config
from hongdown.renderers.markdown import serialize

__all__ = [
    "__version__",
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigValidationError",
    "ContractViolationError",
    "DependencyError",
    "FormatResult",
    "HongdownError",
    "ParsingError",
    "RenderingError",
    "format_file",
    "format_markdown",
    "serialize",
]
