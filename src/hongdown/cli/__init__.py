"""Command-line interface for the hongdown Markdown formatter.

Examples
--------
Print the formatted form of a file::

    $ hongdown README.md

Rewrite files in place::

    $ hongdown --write docs/*.md

Fail in CI when a file is not formatted::

    $ hongdown --check README.md CHANGELOG.md

Show what would change::

    $ hongdown --diff --color=always README.md

Format standard input::

    $ cat notes.md | hongdown > notes.formatted.md

"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from hongdown.api import format_file, format_markdown
from hongdown.cli.builder import (
    EXIT_CHECK_FAILED,
    EXIT_SUCCESS,
    create_parser,
    get_exit_code_for_exception,
)
from hongdown.cli.config import discover_config
from hongdown.diff import colorize_diff, unified_diff
from hongdown.exceptions import HongdownError
from hongdown.logging_utils import configure_logging
from hongdown.options.config import Config

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


class ConfigResolver:
    """Resolve the configuration that applies to each input.

    An explicit configuration applies everywhere. Otherwise the settings file
    is discovered from the input's directory, and the result is cached per
    directory so that a batch of sibling files reads it once.

    """

    def __init__(self, explicit: Optional[Config] = None):
        """Initialize the resolver with an optional explicit configuration."""
        self.explicit = explicit
        self._cache: Dict[Path, Config] = {}

    def for_directory(self, directory: Path) -> Config:
        """Return the configuration for inputs located in ``directory``.

        Raises
        ------
        ConfigReadError
            If a discovered settings file cannot be read
        ConfigParseError
            If a discovered settings file is invalid

        """
        if self.explicit is not None:
            return self.explicit

        directory = directory.resolve()
        if directory not in self._cache:
            discovered = discover_config(directory)
            self._cache[directory] = discovered[1] if discovered else Config()
        return self._cache[directory]


def _use_color(choice: str) -> bool:
    if choice == "always":
        return True
    if choice == "never":
        return False
    return sys.stdout.isatty()


def _emit(
    parsed_args: argparse.Namespace, name: str, original: str, formatted: str, changed: bool, use_color: bool
) -> int:
    """Report the result of formatting one input according to the mode."""
    if parsed_args.check:
        if changed:
            print(f"{name} is not formatted", file=sys.stderr)
            return EXIT_CHECK_FAILED
        return EXIT_SUCCESS

    if parsed_args.diff:
        for line in colorize_diff(unified_diff(original, formatted, path=name), use_color=use_color):
            sys.stdout.write(line)
        return EXIT_SUCCESS

    if not parsed_args.write or name == "-":
        sys.stdout.write(formatted)
    return EXIT_SUCCESS


def _process_stdin(parsed_args: argparse.Namespace, resolver: ConfigResolver, use_color: bool) -> int:
    """Format standard input, discovering settings from the working directory."""
    try:
        config = resolver.for_directory(Path.cwd())
        original = sys.stdin.read()
        formatted = format_markdown(original, config)
    except (HongdownError, OSError, UnicodeDecodeError) as e:
        print(f"Error: <stdin>: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return _emit(parsed_args, "-", original, formatted, formatted != original, use_color)


def _process_file(path: Path, parsed_args: argparse.Namespace, resolver: ConfigResolver, use_color: bool) -> int:
    """Format one file according to the selected mode."""
    try:
        config = resolver.for_directory(path.parent)
        result = format_file(path, config, write=parsed_args.write)
    except (HongdownError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {path}: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return _emit(parsed_args, str(path), result.original, result.formatted, result.changed, use_color)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        0 on success; 1 when ``--check`` finds unformatted input or on a
        generic error; 2 when a required package is missing; 3 for settings
        file errors; 4 for input file errors. With several inputs the first
        error wins over a check failure.

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # --trace implies DEBUG regardless of --log-level
    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    explicit_config = None
    if parsed_args.config:
        try:
            explicit_config = Config.from_file(parsed_args.config)
        except HongdownError as e:
            print(f"Error: {e}", file=sys.stderr)
            return get_exit_code_for_exception(e)

    resolver = ConfigResolver(explicit_config)
    use_color = _use_color(parsed_args.color)

    exit_code = EXIT_SUCCESS
    for name in parsed_args.files or ["-"]:
        if name == "-":
            code = _process_stdin(parsed_args, resolver, use_color)
        else:
            code = _process_file(Path(name), parsed_args, resolver, use_color)

        if code != EXIT_SUCCESS and exit_code in (EXIT_SUCCESS, EXIT_CHECK_FAILED):
            exit_code = code

    logger.debug("Exiting with status %d", exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
