# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read-only registry of option definitions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from .catalog import ZORBA_OPTIONS
from .errors import CatalogIntegrityError, UnknownOptionError
from .model import OptionDefinition
from .types import OptionScalar
from .utils import expect_mapping

LOGGER = logging.getLogger(__name__)


class OptionRegistry:
    """Map option names to their immutable definitions.

    The registry never changes after construction and may be shared freely
    between option sets.
    """

    __slots__ = ("_definitions",)

    def __init__(self, definitions: Iterable[OptionDefinition]) -> None:
        """Index ``definitions`` by name.

        Args:
            definitions: Option definitions to register.

        Raises:
            CatalogIntegrityError: If two definitions share the same name.
        """

        indexed: dict[str, OptionDefinition] = {}
        for definition in definitions:
            if definition.name in indexed:
                raise CatalogIntegrityError(f"duplicate option definition '{definition.name}'")
            indexed[definition.name] = definition
        self._definitions: Mapping[str, OptionDefinition] = MappingProxyType(indexed)

    @classmethod
    def from_mappings(cls, entries: Iterable[Mapping[str, Any]], *, context: str = "options") -> OptionRegistry:
        """Build a registry from raw catalog mappings.

        Args:
            entries: Catalog entries accepted by :meth:`OptionDefinition.from_mapping`.
            context: Prefix used in integrity error messages.

        Returns:
            OptionRegistry: Registry containing one definition per entry.
        """

        return cls(
            OptionDefinition.from_mapping(
                expect_mapping(entry, key=f"{context}[{index}]", context=context),
                context=context,
            )
            for index, entry in enumerate(entries)
        )

    def exists(self, name: str) -> bool:
        """Return ``True`` when ``name`` is a registered option."""

        return name in self._definitions

    def valid(self, name: str, value: OptionScalar) -> bool:
        """Return ``True`` when ``value`` is acceptable for option ``name``.

        Unknown option names yield ``False`` rather than raising.
        """

        definition = self._definitions.get(name)
        if definition is None:
            return False
        return definition.validate(value)

    def is_repeatable(self, name: str) -> bool:
        """Return ``True`` when ``name`` is a registered repeatable option."""

        definition = self._definitions.get(name)
        return definition is not None and definition.repeatable

    def serialize_one(self, name: str, value: OptionScalar) -> str:
        """Render a single scalar ``value`` of option ``name``.

        Callers iterate repeatable values themselves.

        Raises:
            UnknownOptionError: If ``name`` is not registered.
        """

        return self.definition(name).serialize(value)

    def definition(self, name: str) -> OptionDefinition:
        """Return the definition registered for ``name``.

        Raises:
            UnknownOptionError: If ``name`` is not registered.
        """

        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownOptionError(name) from None

    def names(self) -> tuple[str, ...]:
        """Return registered option names in declaration order."""

        return tuple(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[OptionDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


@lru_cache(maxsize=1)
def default_registry() -> OptionRegistry:
    """Return the process-wide registry of ``zorba`` options."""

    registry = OptionRegistry.from_mappings(ZORBA_OPTIONS, context="zorba")
    LOGGER.debug("loaded %d zorba option definitions", len(registry))
    return registry


__all__ = ["OptionRegistry", "default_registry"]
