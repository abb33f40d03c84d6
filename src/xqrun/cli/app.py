# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for building and running ``zorba`` commands."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ..config import ConfigError, load_config
from ..options import OptionError, OptionSet, OptionType, default_registry
from ..processor import XQueryProcessor
from .shared import CLIError, CLILogger, apply_assignments, build_cli_logger

app = typer.Typer(
    help="Typed option builder and runner for the Zorba XQuery processor.",
    add_completion=False,
    no_args_is_help=True,
)

OptionAssignments = Annotated[
    list[str] | None,
    typer.Option("--option", "-o", help="Option assignment as NAME=VALUE; repeatable."),
]
EnabledFlags = Annotated[
    list[str] | None,
    typer.Option("--enable", "-e", help="Boolean option to switch on; repeatable."),
]
RootOption = Annotated[Path, typer.Option("--root", "-r", help="Project root holding xqrun configuration.")]
NoEmojiOption = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in messages.")]
DebugOption = Annotated[bool, typer.Option("--debug", help="Stream debug logging to stderr.")]
QueryFile = Annotated[Path, typer.Argument(help="Query file passed to the processor.")]


def _prepare(
    root: Path,
    assignments: Sequence[str],
    enabled: Sequence[str],
    query_file: Path | None = None,
) -> tuple[XQueryProcessor, OptionSet]:
    """Load configuration and build the option set for a command.

    Raises:
        CLIError: If configuration or option input is invalid.
    """

    try:
        processor = XQueryProcessor(load_config(root.resolve()))
        option_set = processor.new_option_set()
        if query_file is not None:
            option_set.set("query", str(query_file))
        apply_assignments(option_set, assignments, enabled)
    except (ConfigError, OptionError) as exc:
        raise CLIError(str(exc), exit_code=2) from exc
    return processor, option_set


def _exit_with(logger: CLILogger, exc: CLIError) -> typer.Exit:
    logger.fail(str(exc))
    return typer.Exit(code=exc.exit_code)


@app.command("options")
def options_command(
    option_type: Annotated[
        OptionType | None,
        typer.Option("--type", "-t", help="Only list options of this type."),
    ] = None,
) -> None:
    """List every option the processor accepts."""

    table = Table(title="zorba options")
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("Short")
    table.add_column("Repeatable")
    table.add_column("Values")
    table.add_column("Description")
    registry = default_registry()
    shown = 0
    for definition in registry:
        if option_type is not None and definition.option_type is not option_type:
            continue
        shown += 1
        table.add_row(
            definition.name,
            definition.option_type.value,
            f"-{definition.short_flag}" if definition.short_flag else "",
            "yes" if definition.repeatable else "",
            ", ".join(definition.allowed_values),
            definition.description or "",
        )
    logger = build_cli_logger(emoji=False)
    logger.console.print(table)
    logger.info(f"{shown} of {len(registry)} options shown")


@app.command("render")
def render_command(
    option: OptionAssignments = None,
    enable: EnabledFlags = None,
    root: RootOption = Path(),
    no_emoji: NoEmojiOption = False,
    debug: DebugOption = False,
) -> None:
    """Print the command-line arguments for the given options."""

    logger = build_cli_logger(emoji=not no_emoji, debug=debug)
    try:
        _, option_set = _prepare(root, option or [], enable or [])
    except CLIError as exc:
        raise _exit_with(logger, exc) from exc
    logger.debug(f"root={root} options={len(option_set)}")
    logger.echo(option_set.render())


@app.command("run")
def run_command(
    query_file: QueryFile,
    option: OptionAssignments = None,
    enable: EnabledFlags = None,
    root: RootOption = Path(),
    no_emoji: NoEmojiOption = False,
    debug: DebugOption = False,
) -> None:
    """Execute a query file and print the processor output."""

    logger = build_cli_logger(emoji=not no_emoji, debug=debug)
    try:
        processor, option_set = _prepare(root, option or [], enable or [], query_file)
    except CLIError as exc:
        raise _exit_with(logger, exc) from exc
    logger.debug(f"query={query_file} args={option_set.render()}")
    lines = processor.execute(option_set)
    if lines is None:
        raise _exit_with(logger, CLIError(f"Query execution failed: {query_file}"))
    if not lines:
        logger.warn(f"{query_file} produced no output")
    for line in lines:
        logger.echo(line)


@app.command("check")
def check_command(
    query_file: QueryFile,
    option: OptionAssignments = None,
    root: RootOption = Path(),
    no_emoji: NoEmojiOption = False,
    debug: DebugOption = False,
) -> None:
    """Parse a query file without executing it."""

    logger = build_cli_logger(emoji=not no_emoji, debug=debug)
    try:
        processor, option_set = _prepare(root, option or [], (), query_file)
    except CLIError as exc:
        raise _exit_with(logger, exc) from exc
    logger.debug(f"query={query_file} root={root}")
    if not processor.validate(option_set):
        raise _exit_with(logger, CLIError(f"Query does not parse: {query_file}"))
    logger.ok(f"{query_file} parses")


__all__ = ["app"]
