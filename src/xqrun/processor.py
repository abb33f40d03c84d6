# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invoke the ``zorba`` binary with a rendered option set."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .config import ProcessorConfig
from .core.runtime import CommandOptions, run_command
from .options import AS_FILES_FLAG, PARSE_ONLY_OPTION, OptionRegistry, OptionSet, OptionValue, default_registry

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InvocationResult:
    """Captured outcome of one processor invocation."""

    lines: tuple[str, ...]
    exit_code: int
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        """Return ``True`` when the processor exited with status ``0``."""

        return self.exit_code == 0


def locate_executable(config: ProcessorConfig) -> Path | None:
    """Return the configured executable, or the one found on ``PATH``.

    Args:
        config: Processor configuration.

    Returns:
        Path | None: Candidate executable path, ``None`` when nothing was found.
    """

    if config.executable is not None:
        return config.executable
    found = shutil.which(config.executable_name)
    return Path(found) if found else None


def is_runnable(path: Path) -> bool:
    """Return ``True`` when ``path`` is an existing executable file."""

    return path.is_file() and os.access(path, os.X_OK)


def build_command(path: Path, rendered: str) -> list[str]:
    """Return the argument vector for running ``path`` with ``rendered`` options.

    Query arguments are always passed as file paths.

    Raises:
        ValueError: If ``rendered`` contains unbalanced quotes.
    """

    return [str(path), AS_FILES_FLAG, *shlex.split(rendered)]


def invoke(path: Path, rendered: str, *, options: CommandOptions | None = None) -> InvocationResult:
    """Run the processor at ``path`` and capture its output.

    Args:
        path: Processor executable.
        rendered: Output of :meth:`OptionSet.render`.
        options: Subprocess execution options.

    Returns:
        InvocationResult: Standard output split into lines and the exit status.
    """

    completed = run_command(build_command(path, rendered), options=options)
    return InvocationResult(
        lines=tuple(completed.stdout.splitlines()),
        exit_code=completed.returncode,
        stderr=completed.stderr or "",
    )


class XQueryProcessor:
    """Run option sets through the external XQuery processor.

    :meth:`execute` returns ``None`` whenever the processor cannot be run or
    reports a non-zero exit status; callers branch on that value rather than
    catching an exception.
    """

    def __init__(self, config: ProcessorConfig | None = None, *, registry: OptionRegistry | None = None) -> None:
        self.config = config or ProcessorConfig()
        self.registry = registry if registry is not None else default_registry()

    def new_option_set(self, initial: Mapping[str, OptionValue] | None = None) -> OptionSet:
        """Return an option set seeded with configured defaults and ``initial``."""

        option_set = OptionSet(self.config.defaults, registry=self.registry)
        for name, value in (initial or {}).items():
            option_set.set(name, value)
        return option_set

    def command_options(self) -> CommandOptions:
        """Return subprocess options derived from the configuration."""

        env = {**os.environ, **self.config.env} if self.config.env else None
        return CommandOptions(cwd=self.config.cwd, env=env, timeout=self.config.timeout)

    def run(self, option_set: OptionSet) -> InvocationResult | None:
        """Invoke the processor, returning ``None`` when it cannot be started."""

        path = locate_executable(self.config)
        if path is None:
            LOGGER.warning("%s executable not found", self.config.executable_name)
            return None
        if not is_runnable(path):
            LOGGER.warning("%s is missing or not executable", path)
            return None
        rendered = option_set.render()
        LOGGER.debug("invoking executable=%s args=%s", path, rendered)
        try:
            return invoke(path, rendered, options=self.command_options())
        except OSError as exc:
            LOGGER.warning("failed to start %s: %s", path, exc)
            return None
        except ValueError as exc:
            LOGGER.warning("cannot split arguments %s: %s", rendered, exc)
            return None

    def execute(self, option_set: OptionSet) -> list[str] | None:
        """Return the processor's output lines, or ``None`` on failure."""

        result = self.run(option_set)
        if result is None:
            return None
        if not result.succeeded:
            LOGGER.warning("processor exited with status %d: %s", result.exit_code, result.stderr.strip())
            return None
        return list(result.lines)

    def validate(self, option_set: OptionSet) -> bool:
        """Return ``True`` when the query in ``option_set`` parses.

        The check runs on a clone with ``parse-only`` enabled, so
        ``option_set`` itself is left untouched.
        """

        probe = option_set.copy()
        probe.enable(PARSE_ONLY_OPTION)
        return self.execute(probe) is not None


__all__ = [
    "InvocationResult",
    "XQueryProcessor",
    "build_command",
    "invoke",
    "is_runnable",
    "locate_executable",
]
