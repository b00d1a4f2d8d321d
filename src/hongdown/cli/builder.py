#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/cli/builder.py
"""Argument parser and exit codes for the hongdown CLI."""

from __future__ import annotations

import argparse

from hongdown import __version__
from hongdown.exceptions import (
    ConfigError,
    ConfigValidationError,
    DependencyError,
)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_FILE_ERROR = 4

# Exit code for --check when at least one file is not formatted
EXIT_CHECK_FAILED = EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hongdown",
        description="Format Markdown files in a canonical house style.",
        epilog="Settings are read from the nearest .hongdown.toml above each file "
        "(or above the current directory for standard input).",
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Markdown files to format; reads standard input when omitted or '-'",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--write", "-w", action="store_true", help="Rewrite files in place")
    mode.add_argument(
        "--check",
        "-c",
        action="store_true",
        help="Exit with status 1 if any file is not already formatted; write nothing",
    )
    mode.add_argument("--diff", "-d", action="store_true", help="Print a unified diff of the changes; write nothing")

    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Colorize diff output (default: auto, when standard output is a terminal)",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Use this settings file instead of searching for .hongdown.toml",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        type=str.upper,
        help="Set logging level for debugging (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Also append log records to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log at DEBUG with timestamps and module names, including parse and render timings",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ConfigError, ConfigValidationError)):
        return EXIT_CONFIG_ERROR

    if isinstance(exception, (OSError, UnicodeDecodeError)):
        return EXIT_FILE_ERROR

    return EXIT_ERROR
