# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process execution helpers."""

from __future__ import annotations

from .process import TIMEOUT_EXIT_CODE, CommandOptions, run_command

__all__ = ["TIMEOUT_EXIT_CODE", "CommandOptions", "run_command"]
