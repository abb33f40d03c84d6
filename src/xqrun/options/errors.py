# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by option registry and option set operations."""

from __future__ import annotations

from .types import OptionValue


class CatalogIntegrityError(RuntimeError):
    """Raised when option catalog metadata violates semantic invariants."""


class OptionError(ValueError):
    """Base class for errors raised while reading or mutating option sets."""

    def __init__(self, name: str, message: str) -> None:
        """Initialise the error with the offending option ``name``.

        Args:
            name: Option name involved in the failure.
            message: Human-readable description of the failure.
        """

        super().__init__(message)
        self.name = name


class UnknownOptionError(OptionError):
    """Raised when an option name is absent from the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Unknown option '{name}'")


class InvalidOptionValueError(OptionError):
    """Raised when a value fails the validation rules of its option."""

    def __init__(self, name: str, value: OptionValue) -> None:
        """Initialise the error with the rejected ``value``.

        Args:
            name: Option name whose validation failed.
            value: Offending scalar value (or repeatable element).
        """

        super().__init__(name, f"Invalid value {value!r} for option '{name}'")
        self.value = value


class CannotEnableError(OptionError):
    """Raised when ``enable`` targets an option that does not accept ``True``."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Option '{name}' cannot be enabled")


class CannotDisableError(OptionError):
    """Raised when ``disable`` targets an option that does not accept ``False``."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Option '{name}' cannot be disabled")


class OptionNotSetError(OptionError, KeyError):
    """Raised when reading an option that has no assigned value."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Option '{name}' is not set")

    def __str__(self) -> str:
        return str(self.args[0])


__all__ = (
    "CannotDisableError",
    "CannotEnableError",
    "CatalogIntegrityError",
    "InvalidOptionValueError",
    "OptionError",
    "OptionNotSetError",
    "UnknownOptionError",
)
