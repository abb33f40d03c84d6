# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Mutable, schema-validated collection of option assignments."""

from __future__ import annotations

import copy
from collections.abc import ItemsView, Iterator, Mapping, Sequence
from typing import Any

from .errors import (
    CannotDisableError,
    CannotEnableError,
    InvalidOptionValueError,
    OptionError,
    OptionNotSetError,
    UnknownOptionError,
)
from .registry import OptionRegistry, default_registry
from .types import OptionScalar, OptionValue


def _is_value_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class OptionSet:
    """Collect option assignments and render them as command-line arguments.

    Every write is validated against the registry; a rejected write leaves the
    set unchanged. Assignments keep insertion order, which is also the order in
    which :meth:`render` emits them.

    Construction from ``initial`` replays :meth:`set` key by key. When a later
    key is rejected, the keys before it stay applied to the half-built instance
    and the error propagates to the caller.
    """

    __slots__ = ("_assignments", "_registry")

    def __init__(
        self,
        initial: Mapping[str, OptionValue] | None = None,
        *,
        registry: OptionRegistry | None = None,
    ) -> None:
        """Create an option set, optionally seeded from ``initial``.

        Args:
            initial: Option assignments applied in iteration order.
            registry: Registry used for validation. Defaults to the ``zorba`` registry.

        Raises:
            UnknownOptionError: If ``initial`` names an unregistered option.
            InvalidOptionValueError: If a value in ``initial`` fails validation.
        """

        self._registry = registry if registry is not None else default_registry()
        self._assignments: dict[str, OptionScalar | list[OptionScalar]] = {}
        for name, value in (initial or {}).items():
            self.set(name, value)

    @property
    def registry(self) -> OptionRegistry:
        """Return the registry backing this option set."""

        return self._registry

    def set(self, name: str, value: OptionValue) -> None:
        """Assign ``value`` to option ``name``, replacing any previous value.

        Scalars given for repeatable options are stored as one-element lists.

        Args:
            name: Registered option name.
            value: Scalar value, or a sequence of scalars for repeatable options.

        Raises:
            UnknownOptionError: If ``name`` is not registered.
            InvalidOptionValueError: If the value (or any element) fails validation.
        """

        if not self._registry.exists(name):
            raise UnknownOptionError(name)
        if self._registry.is_repeatable(name):
            values = list(value) if _is_value_sequence(value) else [value]
            for entry in values:
                if not self._registry.valid(name, entry):
                    raise InvalidOptionValueError(name, entry)
            self._assignments[name] = values
            return
        if not self._registry.valid(name, value):
            raise InvalidOptionValueError(name, value)
        self._assignments[name] = value

    def append(self, name: str, value: OptionScalar) -> None:
        """Add ``value`` to the values of the repeatable option ``name``.

        Raises:
            UnknownOptionError: If ``name`` is not registered.
            OptionError: If ``name`` is not repeatable.
            InvalidOptionValueError: If ``value`` fails validation.
        """

        if not self._registry.exists(name):
            raise UnknownOptionError(name)
        if not self._registry.is_repeatable(name):
            raise OptionError(name, f"Option '{name}' is not repeatable")
        current = self.get(name) if self.has(name) else []
        self.set(name, [*current, value])

    def enable(self, name: str) -> None:
        """Switch the boolean option ``name`` on.

        Raises:
            CannotEnableError: If ``name`` does not accept ``True``.
        """

        if not self._registry.valid(name, True):
            raise CannotEnableError(name)
        self.set(name, True)

    def disable(self, name: str) -> None:
        """Switch the boolean option ``name`` off by omitting it entirely.

        Raises:
            CannotDisableError: If ``name`` does not accept ``False``.
        """

        if not self._registry.valid(name, False):
            raise CannotDisableError(name)
        self._assignments.pop(name, None)

    def has(self, name: str) -> bool:
        """Return ``True`` when ``name`` has an assigned value."""

        return name in self._assignments

    def get(self, name: str) -> OptionValue:
        """Return the value assigned to ``name``.

        Repeatable values are returned as a fresh list; write changes back
        through :meth:`set`.

        Raises:
            OptionNotSetError: If ``name`` has no assigned value.
        """

        try:
            value = self._assignments[name]
        except KeyError:
            raise OptionNotSetError(name) from None
        return list(value) if isinstance(value, list) else value

    def unset(self, name: str) -> None:
        """Remove ``name`` from the set; absent names are ignored."""

        self._assignments.pop(name, None)

    def render(self) -> str:
        """Return the command-line fragment for all assignments.

        Fragments are joined by single spaces in insertion order. Empty
        fragments (false booleans) are kept in place, so only the outer
        whitespace is trimmed.
        """

        fragments: list[str] = []
        for name, value in self._assignments.items():
            if isinstance(value, list) and self._registry.is_repeatable(name):
                fragments.append(" ".join(self._registry.serialize_one(name, entry) for entry in value))
            else:
                fragments.append(self._registry.serialize_one(name, value))
        return " ".join(fragments).strip()

    def copy(self) -> OptionSet:
        """Return an independent clone sharing the same registry."""

        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, OptionValue]:
        """Return a detached ``dict`` of the current assignments."""

        return copy.deepcopy(self._assignments)

    def items(self) -> ItemsView[str, OptionValue]:
        """Return a view over detached ``(name, value)`` pairs."""

        return self.to_dict().items()

    def __deepcopy__(self, memo: dict[int, Any]) -> OptionSet:
        clone = OptionSet.__new__(OptionSet)
        clone._registry = self._registry
        clone._assignments = copy.deepcopy(self._assignments, memo)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._assignments

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._assignments))

    def __len__(self) -> int:
        return len(self._assignments)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._assignments!r})"


__all__ = ["OptionSet"]
