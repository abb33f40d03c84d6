# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, option parsing)."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ..core.logging import enable_debug_logging
from ..core.logging import fail as core_fail
from ..core.logging import info as core_info
from ..core.logging import ok as core_ok
from ..core.logging import warn as core_warn
from ..options import InvalidOptionValueError, OptionDefinition, OptionScalar, OptionSet, OptionType

_TRUE_WORDS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\S+)")

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        core_info(message, use_emoji=self.use_emoji)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Print ``message`` with highlighted ``key=value`` pairs when debug mode is on."""

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` and enable debug records when requested.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether ``xqrun`` debug logging should stream to stderr.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    if debug:
        enable_debug_logging()
    console = Console(no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji, debug_enabled=debug)


def coerce_value(definition: OptionDefinition, raw: str) -> OptionScalar:
    """Convert command-line text into a value of the option's type.

    Raises:
        InvalidOptionValueError: If ``raw`` cannot represent a value of the type.
    """

    if definition.option_type is OptionType.BOOLEAN:
        lowered = raw.strip().lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        raise InvalidOptionValueError(definition.name, raw)
    if definition.option_type is OptionType.INTEGER:
        try:
            return int(raw)
        except ValueError:
            raise InvalidOptionValueError(definition.name, raw) from None
    return raw


def apply_assignments(
    option_set: OptionSet,
    assignments: Sequence[str],
    enabled: Sequence[str] = (),
) -> OptionSet:
    """Apply ``NAME=VALUE`` assignments and enabled flags to ``option_set``.

    Repeated assignments of a repeatable option accumulate in order and
    replace any configured default; other options keep the last value given.

    Raises:
        CLIError: If an assignment lacks the ``=`` separator.
        OptionError: If a name is unknown or a value is rejected.
    """

    collected: dict[str, list[OptionScalar]] = {}
    for assignment in assignments:
        name, separator, raw = assignment.partition("=")
        if not separator or not name:
            raise CLIError(f"Expected NAME=VALUE, got {assignment!r}", exit_code=2)
        definition = option_set.registry.definition(name)
        value = coerce_value(definition, raw)
        if definition.repeatable:
            collected.setdefault(name, []).append(value)
        else:
            collected[name] = [value]
    for name, values in collected.items():
        option_set.set(name, values if option_set.registry.is_repeatable(name) else values[-1])
    for name in enabled:
        option_set.enable(name)
    return option_set


__all__ = ["CLIError", "CLILogger", "apply_assignments", "build_cli_logger", "coerce_value"]
