# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option schema registry and validated option sets for the ``zorba`` CLI."""

from __future__ import annotations

from .catalog import AS_FILES_FLAG, PARSE_ONLY_OPTION, ZORBA_OPTIONS
from .errors import (
    CannotDisableError,
    CannotEnableError,
    CatalogIntegrityError,
    InvalidOptionValueError,
    OptionError,
    OptionNotSetError,
    UnknownOptionError,
)
from .model import OptionDefinition
from .option_set import OptionSet
from .registry import OptionRegistry, default_registry
from .types import Cardinality, OptionScalar, OptionType, OptionValue

__all__ = (
    "AS_FILES_FLAG",
    "PARSE_ONLY_OPTION",
    "ZORBA_OPTIONS",
    "CannotDisableError",
    "CannotEnableError",
    "Cardinality",
    "CatalogIntegrityError",
    "InvalidOptionValueError",
    "OptionDefinition",
    "OptionError",
    "OptionNotSetError",
    "OptionRegistry",
    "OptionScalar",
    "OptionSet",
    "OptionType",
    "OptionValue",
    "UnknownOptionError",
    "default_registry",
)
