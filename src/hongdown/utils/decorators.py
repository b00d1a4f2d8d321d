#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hongdown/utils/decorators.py
"""Decorators and context managers shared by the parser and the API."""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from importlib import metadata
from typing import Any, Callable, Generator, List, Optional, Tuple

from packaging import version
from packaging.specifiers import SpecifierSet

from hongdown.exceptions import DependencyError


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of a distribution, or None if absent."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check whether the installed version of a package satisfies a specifier.

    Parameters
    ----------
    package_name : str
        Distribution name
    version_spec : str
        Version specifier, e.g. ``">=3.0.0"``

    Returns
    -------
    tuple
        (meets_requirement, installed_version)

    """
    installed_version = get_package_version(package_name)
    if not installed_version:
        return False, None
    return version.parse(installed_version) in SpecifierSet(version_spec), installed_version


def requires_dependencies(component: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required packages before running the decorated function.

    Parameters
    ----------
    component : str
        Name of the component that needs the packages, used in messages
    packages : list of tuple
        ``(install_name, import_name, version_spec)`` triples; an empty
        ``version_spec`` accepts any installed version

    Returns
    -------
    Callable
        Decorator

    Raises
    ------
    DependencyError
        When the decorated function is called and a package is missing or
        too old

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def parse(self, text):
        ...     import mistune

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    raise DependencyError(
                        install_name,
                        f"The {component} component requires '{install_name}'. "
                        f"Install with: pip install '{install_name}{version_spec}'",
                        original_error=e,
                    ) from e

                if version_spec:
                    meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                    if not meets_requirement:
                        raise DependencyError(
                            install_name,
                            f"The {component} component requires '{install_name}{version_spec}', "
                            f"found {installed_version or 'unknown'}. "
                            f"Install with: pip install --upgrade '{install_name}{version_spec}'",
                        )

            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the duration of a block at DEBUG level.

    Nothing is measured when DEBUG logging is disabled.

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Formatting README.md"):
        ...     pass

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
