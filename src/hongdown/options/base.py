"""Base classes for configuration records.

This module defines the foundation shared by every section of the
formatter configuration.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from hongdown.exceptions import ConfigValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ConfigSection(CloneFrozenMixin):
    """Base class for one table of the settings file.

    Subclasses declare their keys as frozen dataclass fields with a
    ``"help"`` entry in the field metadata. ``from_dict`` builds an instance
    from the corresponding TOML table, rejecting unknown keys and values of
    the wrong type.

    """

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], section: str = "") -> Self:
        """Build a section from a mapping of settings.

        Parameters
        ----------
        data : Mapping[str, Any]
            Keys and values of the TOML table
        section : str, default ""
            Dotted name of the table, used in error messages

        Returns
        -------
        Self
            The populated section; missing keys keep their defaults

        Raises
        ------
        ConfigValidationError
            If a key is unknown or a value has the wrong type

        """
        known = {f.name: f for f in fields(cls) if f.init}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            dotted = f"{section}.{key}" if section else key
            if key not in known:
                raise ConfigValidationError(f"unknown key '{dotted}'", field_name=dotted, field_value=value)
            expected = known[key].metadata.get("type")
            if expected is not None and not _matches_type(value, expected):
                raise ConfigValidationError(
                    f"'{dotted}' must be {expected.__name__}, got {type(value).__name__}",
                    field_name=dotted,
                    field_value=value,
                )
            kwargs[key] = value
        return cls(**kwargs)


def _matches_type(value: Any, expected: type) -> bool:
    # bool is a subclass of int; TOML keeps them distinct and so do we
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def require_type(name: str, value: Any, expected: type) -> None:
    """Raise ConfigValidationError unless ``value`` is an instance of ``expected``.

    ``True`` and ``False`` are not accepted where an integer is expected.
    """
    if not _matches_type(value, expected):
        raise ConfigValidationError(
            f"{name} must be {expected.__name__}, got {type(value).__name__}", field_name=name, field_value=value
        )


def require_choice(name: str, value: Any, choices: tuple[str, ...]) -> None:
    """Raise ConfigValidationError unless ``value`` is one of ``choices``."""
    if value not in choices:
        allowed = ", ".join(repr(c) for c in choices)
        raise ConfigValidationError(f"{name} must be one of {allowed}, got {value!r}", field_name=name, field_value=value)


def require_non_negative(name: str, value: int) -> None:
    """Raise ConfigValidationError if ``value`` is negative."""
    if value < 0:
        raise ConfigValidationError(f"{name} must be non-negative, got {value}", field_name=name, field_value=value)


def require_positive(name: str, value: int) -> None:
    """Raise ConfigValidationError unless ``value`` is positive."""
    if value <= 0:
        raise ConfigValidationError(f"{name} must be positive, got {value}", field_name=name, field_value=value)
