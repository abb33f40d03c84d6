# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default validate/serialize behaviours keyed by option type."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Protocol

from .types import FLAG_PREFIX, OptionScalar, OptionType


class OptionBehavior(Protocol):
    """Define the contract shared by per-type option behaviours."""

    def validate(self, value: OptionScalar, allowed_values: tuple[str, ...]) -> bool:
        """Return ``True`` when ``value`` is acceptable for the option.

        Args:
            value: Candidate scalar value.
            allowed_values: Enumerated values for select options, empty otherwise.
        """

    def serialize(self, name: str, value: OptionScalar) -> str:
        """Return the command-line fragment representing ``value``.

        Args:
            name: Registered option name without the flag prefix.
            value: Validated scalar value.
        """


@dataclass(slots=True, frozen=True)
class _BooleanBehavior:
    """Render boolean options as bare flags."""

    def validate(self, value: OptionScalar, allowed_values: tuple[str, ...]) -> bool:
        del allowed_values
        return isinstance(value, bool)

    def serialize(self, name: str, value: OptionScalar) -> str:
        return flag_token(name) if value else ""


@dataclass(slots=True, frozen=True)
class _StringBehavior:
    """Render string options as quoted flag values."""

    def validate(self, value: OptionScalar, allowed_values: tuple[str, ...]) -> bool:
        del allowed_values
        return isinstance(value, str)

    def serialize(self, name: str, value: OptionScalar) -> str:
        return quoted_value(name, value)


@dataclass(slots=True, frozen=True)
class _IntegerBehavior:
    """Render integer options as quoted decimal values."""

    def validate(self, value: OptionScalar, allowed_values: tuple[str, ...]) -> bool:
        del allowed_values
        # bool is an int subclass; True must not pass as 1.
        return isinstance(value, int) and not isinstance(value, bool)

    def serialize(self, name: str, value: OptionScalar) -> str:
        return quoted_value(name, value)


@dataclass(slots=True, frozen=True)
class _SelectBehavior:
    """Restrict values to an enumerated set and render them quoted."""

    def validate(self, value: OptionScalar, allowed_values: tuple[str, ...]) -> bool:
        return isinstance(value, str) and value in allowed_values

    def serialize(self, name: str, value: OptionScalar) -> str:
        return quoted_value(name, value)


def flag_token(name: str) -> str:
    """Return the long flag token for ``name``.

    Args:
        name: Registered option name.

    Returns:
        str: Flag token such as ``--timing``.
    """

    return f"{FLAG_PREFIX}{name}"


def quoted_value(name: str, value: OptionScalar) -> str:
    """Return ``--name "value"`` with ``value`` inserted verbatim.

    Args:
        name: Registered option name.
        value: Scalar value rendered with :func:`str`.

    Returns:
        str: Flag/value fragment. Embedded quotes are not escaped.
    """

    return f'{flag_token(name)} "{value}"'


TYPE_BEHAVIORS: Final[Mapping[OptionType, OptionBehavior]] = MappingProxyType(
    {
        OptionType.BOOLEAN: _BooleanBehavior(),
        OptionType.STRING: _StringBehavior(),
        OptionType.INTEGER: _IntegerBehavior(),
        OptionType.SELECT: _SelectBehavior(),
    },
)


def behavior_for(option_type: OptionType) -> OptionBehavior:
    """Return the default behaviour registered for ``option_type``.

    Args:
        option_type: Option type tag.

    Returns:
        OptionBehavior: Strategy providing default validation and serialization.
    """

    return TYPE_BEHAVIORS[option_type]


__all__ = [
    "OptionBehavior",
    "TYPE_BEHAVIORS",
    "behavior_for",
    "flag_token",
    "quoted_value",
]
