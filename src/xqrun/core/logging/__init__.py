# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers for console output and debug streams."""

from __future__ import annotations

from .console import RichConsoleManager, detect_tty, get_console_manager
from .public import enable_debug_logging, fail, info, ok, warn

__all__ = [
    "RichConsoleManager",
    "detect_tty",
    "enable_debug_logging",
    "fail",
    "get_console_manager",
    "info",
    "ok",
    "warn",
]
