"""The exported API functions for formatting Markdown."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/hongdown/api.py
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from hongdown.options.config import Config
from hongdown.parsers.markdown import MarkdownParser
from hongdown.renderers.markdown import MarkdownRenderer
from hongdown.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatResult:
    """Outcome of formatting one file.

    Parameters
    ----------
    path : Path
        The file that was formatted
    original : str
        Text read from the file
    formatted : str
        Canonical text
    changed : bool
        Whether formatting changed the text

    """

    path: Path
    original: str
    formatted: str
    changed: bool


def format_markdown(text: str, config: Optional[Config] = None) -> str:
    """Parse Markdown text and render it in canonical form.

    Parameters
    ----------
    text : str
        Markdown source
    config : Config, optional
        Formatting configuration; built-in defaults when None

    Returns
    -------
    str
        The formatted document

    Raises
    ------
    ParsingError
        If the text cannot be parsed
    RenderingError
        If the parsed tree cannot be rendered
    DependencyError
        If mistune is not installed

    Examples
    --------
        >>> format_markdown("* one\\n* two\\n")
        ' -  one\\n -  two\\n'

    """
    with debug_timer(logger, "Parsing"):
        doc = MarkdownParser().parse(text)
    with debug_timer(logger, "Rendering"):
        return MarkdownRenderer(config).render_to_string(doc)


def format_file(path: Union[str, Path], config: Optional[Config] = None, write: bool = False) -> FormatResult:
    """Format a Markdown file, optionally rewriting it in place.

    Parameters
    ----------
    path : str or Path
        File to format
    config : Config, optional
        Formatting configuration; built-in defaults when None
    write : bool, default False
        Rewrite the file when formatting changed it

    Returns
    -------
    FormatResult
        Original and formatted text of the file

    Raises
    ------
    OSError
        If the file cannot be read or written
    UnicodeDecodeError
        If the file is not valid UTF-8

    """
    path = Path(path)
    original = path.read_text(encoding="utf-8")
    formatted = format_markdown(original, config)
    changed = formatted != original

    if write and changed:
        path.write_text(formatted, encoding="utf-8", newline="\n")
        logger.info("Reformatted %s", path)
    else:
        logger.debug("%s: %s", path, "would change" if changed else "unchanged")

    return FormatResult(path=path, original=original, formatted=formatted, changed=changed)
