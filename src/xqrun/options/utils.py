# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating raw option catalog entries."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .errors import CatalogIntegrityError


def expect_string(value: Any, *, key: str, context: str) -> str:
    """Return ``value`` as a non-empty ``str`` or raise a catalog error.

    Args:
        value: Raw value extracted from the catalog entry.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: Validated string value.

    Raises:
        CatalogIntegrityError: If ``value`` is not a non-empty string.
    """
    if not isinstance(value, str) or not value:
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a non-empty string")
    return value


def optional_string(value: Any, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string with validation.

    Args:
        value: Raw value extracted from the catalog entry.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str | None: ``value`` when present, otherwise ``None``.

    Raises:
        CatalogIntegrityError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a string if present")
    return value


def optional_bool(value: Any, *, key: str, context: str, default: bool) -> bool:
    """Return ``value`` as ``bool``, falling back to ``default`` when absent.

    Raises:
        CatalogIntegrityError: If ``value`` is present but not a bool.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise CatalogIntegrityError(f"{context}: expected '{key}' to be a boolean")


def string_array(value: Any, *, key: str, context: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings with validation.

    Args:
        value: Raw value extracted from the catalog entry.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[str, ...]: Tuple containing all string entries from ``value``.

    Raises:
        CatalogIntegrityError: If ``value`` is not a sequence of strings.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an array of strings")
    result: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise CatalogIntegrityError(f"{context}: expected '{key}[{index}]' to be a string")
        result.append(item)
    return tuple(result)


def optional_callable(value: Any, *, key: str, context: str) -> Callable[..., Any] | None:
    """Return ``value`` when it is callable, ``None`` when absent.

    Raises:
        CatalogIntegrityError: If ``value`` is present but not callable.
    """
    if value is None:
        return None
    if not callable(value):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be callable")
    return value


def expect_mapping(value: Any, *, key: str, context: str) -> Mapping[str, Any]:
    """Return ``value`` as a mapping or raise an error.

    Raises:
        CatalogIntegrityError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an object")
    return value


__all__ = (
    "expect_mapping",
    "expect_string",
    "optional_bool",
    "optional_callable",
    "optional_string",
    "string_array",
)
