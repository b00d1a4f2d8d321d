#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Settings file discovery and loading for the hongdown CLI.

The settings file is a ``.hongdown.toml`` found by walking from a start
directory up through every ancestor to the filesystem root. The first file
found wins; when none is found the built-in defaults apply, which is a normal
outcome rather than an error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from hongdown.constants import CONFIG_FILE_NAME
from hongdown.options.config import Config

logger = logging.getLogger(__name__)


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the settings file by searching parent directories.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to the first ``.hongdown.toml`` found, or None if not found

    Examples
    --------
    >>> config_path = find_config_in_parents()
    >>> if config_path:
    ...     print(f"Found config at: {config_path}")

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        config_path = current / CONFIG_FILE_NAME
        if config_path.is_file():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config(start_dir: Optional[Path] = None) -> Optional[Tuple[Path, Config]]:
    """Find and load the settings file that applies to a directory.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start searching from, defaults to the current working
        directory

    Returns
    -------
    tuple of (Path, Config) or None
        The settings file and its configuration, or None when no file exists

    Raises
    ------
    ConfigReadError
        If the file exists but cannot be read
    ConfigParseError
        If the file is not valid TOML or holds invalid settings

    """
    config_path = find_config_in_parents(start_dir)
    if config_path is None:
        logger.debug("No %s found above %s; using defaults", CONFIG_FILE_NAME, start_dir or Path.cwd())
        return None

    logger.debug("Loading settings from %s", config_path)
    return config_path, Config.from_file(config_path)

