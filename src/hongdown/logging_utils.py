"""Logging setup for the hongdown command line.

Formatted Markdown goes to stdout, so every log record is written to stderr
and, when ``--log-file`` is given, appended to that file as well.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

CONSOLE_FORMAT = "hongdown: %(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the CLI's handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name such as ``"DEBUG"``; unknown
        names fall back to WARNING, the CLI default.
    log_file : str, optional
        File that receives a copy of every record.
    trace_mode : bool, default False
        Add timestamps and logger names, which shows the parse and render
        timings per module.

    Returns
    -------
    logging.Logger
        The root logger.

    """
    resolved_level = (
        log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.WARNING)
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Cannot open log file %s: %s", log_file, exc)
        else:
            # the file always carries timestamps so runs can be told apart
            file_handler.setFormatter(logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT))
            root_logger.addHandler(file_handler)
            root_logger.debug("Logging to file: %s", log_file)

    return root_logger
