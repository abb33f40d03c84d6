# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option definition model used by the registry."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from .behaviors import OptionBehavior, behavior_for
from .errors import CatalogIntegrityError
from .types import Cardinality, OptionScalar, OptionSerializer, OptionType, OptionValidator
from .utils import expect_string, optional_bool, optional_callable, optional_string, string_array

_OPTION_TYPE_ALIASES: Final[dict[str, OptionType]] = {
    "boolean": OptionType.BOOLEAN,
    "bool": OptionType.BOOLEAN,
    "string": OptionType.STRING,
    "str": OptionType.STRING,
    "integer": OptionType.INTEGER,
    "int": OptionType.INTEGER,
    "select": OptionType.SELECT,
    "choice": OptionType.SELECT,
}


def normalize_option_type(value: Any, *, context: str) -> OptionType:
    """Return the canonical option type for a raw catalog value.

    Args:
        value: Raw type value or :class:`OptionType` member.
        context: Human-readable context used in error messages.

    Returns:
        OptionType: Normalised option type.

    Raises:
        CatalogIntegrityError: If the value does not describe a known type.
    """

    if isinstance(value, OptionType):
        return value
    raw = expect_string(value, key="type", context=context).lower()
    if raw not in _OPTION_TYPE_ALIASES:
        raise CatalogIntegrityError(f"{context}: unknown option type '{raw}'")
    return _OPTION_TYPE_ALIASES[raw]


@dataclass(frozen=True, slots=True)
class OptionDefinition:
    """Immutable schema entry describing one processor option."""

    name: str
    option_type: OptionType
    cardinality: Cardinality = Cardinality.SINGLE
    allowed_values: tuple[str, ...] = ()
    description: str | None = None
    short_flag: str | None = None
    validator: OptionValidator | None = field(default=None, compare=False)
    serializer: OptionSerializer | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        context = f"option '{self.name}'"
        if self.option_type is OptionType.SELECT and not self.allowed_values:
            raise CatalogIntegrityError(f"{context}: select options require allowed values")
        if self.option_type is not OptionType.SELECT and self.allowed_values:
            raise CatalogIntegrityError(f"{context}: only select options may declare allowed values")
        if len(set(self.allowed_values)) != len(self.allowed_values):
            raise CatalogIntegrityError(f"{context}: allowed values must be unique")

    @property
    def repeatable(self) -> bool:
        """Return ``True`` when the option may be supplied several times."""

        return self.cardinality is Cardinality.REPEATABLE

    @property
    def behavior(self) -> OptionBehavior:
        """Return the default behaviour registered for the option type."""

        return behavior_for(self.option_type)

    def validate(self, value: OptionScalar) -> bool:
        """Return ``True`` when ``value`` satisfies the option's rules.

        The per-option validator takes precedence over the type default.
        """

        if self.validator is not None:
            return bool(self.validator(self.name, value))
        return self.behavior.validate(value, self.allowed_values)

    def serialize(self, value: OptionScalar) -> str:
        """Return the command-line fragment for a single scalar ``value``."""

        if self.serializer is not None:
            return self.serializer(self.name, value)
        return self.behavior.serialize(self.name, value)

    @staticmethod
    def from_mapping(data: Mapping[str, Any], *, context: str) -> OptionDefinition:
        """Create an ``OptionDefinition`` from a catalog mapping.

        Args:
            data: Mapping describing a single option definition.
            context: Human-readable context used in error messages.

        Returns:
            OptionDefinition: Frozen option definition instance.

        Raises:
            CatalogIntegrityError: If required option metadata is missing or invalid.
        """

        name_value = expect_string(data.get("name"), key="name", context=context)
        entry_context = f"{context}.{name_value}"
        option_type_value = normalize_option_type(data.get("type"), context=entry_context)
        repeatable_value = optional_bool(
            data.get("repeatable"),
            key="repeatable",
            context=entry_context,
            default=False,
        )
        return OptionDefinition(
            name=name_value,
            option_type=option_type_value,
            cardinality=Cardinality.REPEATABLE if repeatable_value else Cardinality.SINGLE,
            allowed_values=string_array(data.get("choices"), key="choices", context=entry_context),
            description=optional_string(data.get("description"), key="description", context=entry_context),
            short_flag=optional_string(data.get("shortFlag"), key="shortFlag", context=entry_context),
            validator=optional_callable(data.get("validate"), key="validate", context=entry_context),
            serializer=optional_callable(data.get("serialize"), key="serialize", context=entry_context),
        )


__all__ = ["OptionDefinition", "normalize_option_type"]
