# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and enumerations for option definitions."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Final, TypeAlias

OptionScalar: TypeAlias = bool | int | str | os.PathLike[str]
OptionValue: TypeAlias = OptionScalar | Sequence[OptionScalar]
OptionValidator: TypeAlias = Callable[[str, OptionScalar], bool]
OptionSerializer: TypeAlias = Callable[[str, OptionScalar], str]

FLAG_PREFIX: Final[str] = "--"


class OptionType(str, Enum):
    """Enumerate value types accepted by processor options."""

    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"
    SELECT = "select"


class Cardinality(str, Enum):
    """Enumerate how many times an option may appear on the command line."""

    SINGLE = "single"
    REPEATABLE = "repeatable"


__all__ = [
    "FLAG_PREFIX",
    "Cardinality",
    "OptionScalar",
    "OptionSerializer",
    "OptionType",
    "OptionValidator",
    "OptionValue",
]
