#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the hongdown library.

This module defines specialized exception classes for the error conditions
that can occur while loading settings, parsing Markdown and rendering the
canonical output.

Exception Hierarchy
-------------------
- HongdownError (base exception)

  - ConfigError (settings file problems)
    - ConfigReadError (I/O and permission failures)
    - ConfigParseError (invalid TOML, unknown keys, wrong field types)

  - ConfigValidationError (field value out of range, also a ValueError)

  - ParsingError (Markdown parser failures)

  - RenderingError (output generation failures)
    - ContractViolationError (malformed input tree, always fatal)

  - DependencyError (missing optional packages)

"""

from __future__ import annotations


class HongdownError(Exception):
    """Base exception class for all hongdown-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigError(HongdownError):
    """Base exception for settings file errors.

    Parameters
    ----------
    message : str
        Description of the problem
    file_path : str, optional
        Path to the settings file involved
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ConfigReadError(ConfigError):
    """Exception raised when a settings file cannot be read.

    This covers missing files given explicitly, permission errors and
    any other I/O failure.

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the read error."""
        if message is None:
            detail = f": {original_error}" if original_error else ""
            message = f"failed to read {file_path}{detail}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ConfigParseError(ConfigError):
    """Exception raised when a settings file is not a valid configuration.

    Parameters
    ----------
    file_path : str or None
        Path to the malformed file (None when parsing a bare string)
    diagnostic : str
        What is wrong with the contents
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str | None, diagnostic: str, original_error: Exception | None = None):
        """Initialize the parse error."""
        location = file_path if file_path is not None else "<string>"
        super().__init__(f"failed to parse {location}: {diagnostic}", file_path=file_path, original_error=original_error)
        self.diagnostic = diagnostic


class ConfigValidationError(HongdownError, ValueError):
    """Exception raised when a configuration field has an invalid value.

    Parameters
    ----------
    message : str
        Description of the validation failure
    field_name : str, optional
        Dotted name of the offending field (e.g. ``list.indent_width``)
    field_value : Any, optional
        The rejected value

    """

    def __init__(self, message: str, field_name: str | None = None, field_value: object = None):
        """Initialize the validation error."""
        super().__init__(message)
        self.field_name = field_name
        self.field_value = field_value


class ParsingError(HongdownError):
    """Exception raised when the Markdown parser fails."""


class RenderingError(HongdownError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class ContractViolationError(RenderingError):
    """Exception raised when the input tree breaks a serializer contract.

    The serializer trusts its input; when that trust is broken (for example
    a table row with more cells than the table has alignments) rendering
    stops rather than emitting corrupted output.

    """


class DependencyError(HongdownError):
    """Exception raised when a required optional package is missing.

    Parameters
    ----------
    package_name : str
        Name of the missing distribution
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The ImportError that triggered this error

    """

    def __init__(self, package_name: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the dependency error."""
        if message is None:
            message = f"'{package_name}' is required for this operation. Install with: pip install {package_name}"
        super().__init__(message, original_error)
        self.package_name = package_name
