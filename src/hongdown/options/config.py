#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Formatter configuration record.

This module defines the immutable settings snapshot that drives the
serializer's house style, and its loading from ``.hongdown.toml``.

A complete settings file with every key at its default value::

    line_width = 80

    [heading]
    setext_h1 = true
    setext_h2 = true

    [list]
    unordered_marker = "-"
    leading_spaces = 1
    trailing_spaces = 2
    indent_width = 4

    [ordered_list]
    odd_level_marker = "."
    even_level_marker = ")"

    [code_block]
    fence_char = "~"
    min_fence_length = 4
    space_after_fence = true
    default_language = "text"

"""
# src/hongdown/options/config.py

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

from hongdown.constants import (
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_EVEN_LEVEL_MARKER,
    DEFAULT_FENCE_CHAR,
    DEFAULT_INDENT_WIDTH,
    DEFAULT_LEADING_SPACES,
    DEFAULT_LINE_WIDTH,
    DEFAULT_MIN_FENCE_LENGTH,
    DEFAULT_ODD_LEVEL_MARKER,
    DEFAULT_SETEXT_H1,
    DEFAULT_SETEXT_H2,
    DEFAULT_SPACE_AFTER_FENCE,
    DEFAULT_TRAILING_SPACES,
    DEFAULT_UNORDERED_MARKER,
    FENCE_CHARS,
    ORDERED_MARKERS,
    UNORDERED_MARKERS,
    FenceChar,
    OrderedMarker,
    UnorderedMarker,
)
from hongdown.exceptions import ConfigParseError, ConfigReadError, ConfigValidationError
from hongdown.options.base import (
    ConfigSection,
    require_choice,
    require_non_negative,
    require_positive,
    require_type,
)


@dataclass(frozen=True)
class HeadingConfig(ConfigSection):
    """Heading formatting options.

    Parameters
    ----------
    setext_h1 : bool, default True
        Underline level-1 headings with ``=`` instead of a ``#`` prefix
    setext_h2 : bool, default True
        Underline level-2 headings with ``-`` instead of a ``##`` prefix

    """

    setext_h1: bool = field(
        default=DEFAULT_SETEXT_H1,
        metadata={"help": "Use a === underline for level-1 headings", "type": bool},
    )
    setext_h2: bool = field(
        default=DEFAULT_SETEXT_H2,
        metadata={"help": "Use a --- underline for level-2 headings", "type": bool},
    )

    def __post_init__(self) -> None:
        """Validate that both switches are booleans."""
        require_type("heading.setext_h1", self.setext_h1, bool)
        require_type("heading.setext_h2", self.setext_h2, bool)


@dataclass(frozen=True)
class ListConfig(ConfigSection):
    """Unordered list formatting options.

    The item prefix is ``leading_spaces`` spaces, the marker, then
    ``trailing_spaces`` spaces; nested content is indented by
    ``indent_width``.

    """

    unordered_marker: UnorderedMarker = field(
        default=DEFAULT_UNORDERED_MARKER,
        metadata={"help": "Bullet character: '-', '*' or '+'", "type": str},
    )
    leading_spaces: int = field(
        default=DEFAULT_LEADING_SPACES,
        metadata={"help": "Spaces before the marker", "type": int},
    )
    trailing_spaces: int = field(
        default=DEFAULT_TRAILING_SPACES,
        metadata={"help": "Spaces after the marker", "type": int},
    )
    indent_width: int = field(
        default=DEFAULT_INDENT_WIDTH,
        metadata={"help": "Indentation of nested content", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate marker choice and spacing.

        Raises
        ------
        ConfigValidationError
            If any field value is outside its valid range.

        """
        require_choice("list.unordered_marker", self.unordered_marker, UNORDERED_MARKERS)
        require_type("list.leading_spaces", self.leading_spaces, int)
        require_type("list.trailing_spaces", self.trailing_spaces, int)
        require_type("list.indent_width", self.indent_width, int)
        require_non_negative("list.leading_spaces", self.leading_spaces)
        require_non_negative("list.trailing_spaces", self.trailing_spaces)
        require_non_negative("list.indent_width", self.indent_width)


@dataclass(frozen=True)
class OrderedListConfig(ConfigSection):
    """Ordered list formatting options.

    Nested ordered lists alternate between the two markers so that a child
    list never looks like its parent: ``1.`` at odd depths and ``1)`` at even
    depths by default.

    """

    odd_level_marker: OrderedMarker = field(
        default=DEFAULT_ODD_LEVEL_MARKER,
        metadata={"help": "Marker after the ordinal at odd nesting levels: '.' or ')'", "type": str},
    )
    even_level_marker: OrderedMarker = field(
        default=DEFAULT_EVEN_LEVEL_MARKER,
        metadata={"help": "Marker after the ordinal at even nesting levels: '.' or ')'", "type": str},
    )

    def __post_init__(self) -> None:
        """Validate marker choices."""
        require_choice("ordered_list.odd_level_marker", self.odd_level_marker, ORDERED_MARKERS)
        require_choice("ordered_list.even_level_marker", self.even_level_marker, ORDERED_MARKERS)

    def marker_for_depth(self, depth: int) -> str:
        """Return the marker for a 1-based ordered-list nesting depth."""
        return self.odd_level_marker if depth % 2 == 1 else self.even_level_marker


@dataclass(frozen=True)
class CodeBlockConfig(ConfigSection):
    """Code block formatting options."""

    fence_char: FenceChar = field(
        default=DEFAULT_FENCE_CHAR,
        metadata={"help": "Fence character: '~' or '`'", "type": str},
    )
    min_fence_length: int = field(
        default=DEFAULT_MIN_FENCE_LENGTH,
        metadata={"help": "Minimum number of fence characters", "type": int},
    )
    space_after_fence: bool = field(
        default=DEFAULT_SPACE_AFTER_FENCE,
        metadata={"help": "Put a space between the fence and the info string", "type": bool},
    )
    default_language: str = field(
        default=DEFAULT_CODE_LANGUAGE,
        metadata={"help": "Info string used when a code block has none (empty to omit)", "type": str},
    )

    def __post_init__(self) -> None:
        """Validate fence settings."""
        require_choice("code_block.fence_char", self.fence_char, FENCE_CHARS)
        require_type("code_block.min_fence_length", self.min_fence_length, int)
        require_positive("code_block.min_fence_length", self.min_fence_length)
        require_type("code_block.space_after_fence", self.space_after_fence, bool)
        require_type("code_block.default_language", self.default_language, str)


_SECTIONS: dict[str, type[ConfigSection]] = {
    "heading": HeadingConfig,
    "list": ListConfig,
    "ordered_list": OrderedListConfig,
    "code_block": CodeBlockConfig,
}


@dataclass(frozen=True)
class Config(ConfigSection):
    """Configuration for the hongdown formatter.

    An immutable snapshot of the formatting policy, loaded once and passed
    read-only to the serializer.

    Parameters
    ----------
    line_width : int, default 80
        Preferred maximum line width
    heading : HeadingConfig
        Heading formatting options
    list : ListConfig
        Unordered list formatting options
    ordered_list : OrderedListConfig
        Ordered list formatting options
    code_block : CodeBlockConfig
        Code block formatting options

    Examples
    --------
        >>> config = Config.from_toml("[list]\\nunordered_marker = '*'")
        >>> config.list.unordered_marker
        '*'
        >>> config.heading == HeadingConfig()
        True

    """

    line_width: int = field(
        default=DEFAULT_LINE_WIDTH,
        metadata={"help": "Maximum line width", "type": int},
    )
    heading: HeadingConfig = field(default_factory=HeadingConfig, metadata={"help": "Heading options"})
    list: ListConfig = field(default_factory=ListConfig, metadata={"help": "Unordered list options"})
    ordered_list: OrderedListConfig = field(
        default_factory=OrderedListConfig, metadata={"help": "Ordered list options"}
    )
    code_block: CodeBlockConfig = field(default_factory=CodeBlockConfig, metadata={"help": "Code block options"})

    def __post_init__(self) -> None:
        """Validate the top-level fields."""
        require_type("line_width", self.line_width, int)
        require_positive("line_width", self.line_width)
        for name, section_type in _SECTIONS.items():
            require_type(name, getattr(self, name), section_type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], section: str = "") -> Config:
        """Build a configuration from the parsed settings document.

        Parameters
        ----------
        data : Mapping[str, Any]
            Top-level TOML table
        section : str, default ""
            Unused; accepted for signature compatibility with sections

        Returns
        -------
        Config
            The configuration; absent keys and tables keep their defaults

        Raises
        ------
        ConfigValidationError
            If a key is unknown or a value is invalid

        """
        kwargs: dict[str, Any] = {}
        scalars: dict[str, Any] = {}
        for key, value in data.items():
            if key in _SECTIONS:
                if not isinstance(value, Mapping):
                    raise ConfigValidationError(
                        f"'{key}' must be a table, got {type(value).__name__}", field_name=key, field_value=value
                    )
                kwargs[key] = _SECTIONS[key].from_dict(value, section=key)
            else:
                scalars[key] = value
        top = super().from_dict(scalars)
        return top.create_updated(**kwargs) if kwargs else top

    @classmethod
    def from_toml(cls, text: str, path: str | None = None) -> Config:
        """Parse a configuration from TOML text.

        Parameters
        ----------
        text : str
            Contents of a settings file
        path : str, optional
            Where the text came from, for error messages

        Returns
        -------
        Config
            Parsed configuration

        Raises
        ------
        ConfigParseError
            If the text is not valid TOML or holds invalid settings

        """
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(path, str(e), original_error=e) from e
        try:
            return cls.from_dict(data)
        except ConfigValidationError as e:
            raise ConfigParseError(path, e.message, original_error=e) from e

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load a configuration from a settings file.

        Parameters
        ----------
        path : str or Path
            Path to a ``.hongdown.toml`` file

        Returns
        -------
        Config
            Parsed configuration

        Raises
        ------
        ConfigReadError
            If the file cannot be read
        ConfigParseError
            If the file contents are invalid

        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(str(path), original_error=e) from e
        return cls.from_toml(text, path=str(path))

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a nested dictionary of TOML values."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, ConfigSection):
                result[f.name] = {sf.name: getattr(value, sf.name) for sf in fields(value)}
            else:
                result[f.name] = value
        return result
