# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging

# Bandit: subprocess usage is intentional; commands are argument lists and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

LOGGER = logging.getLogger(__name__)

TIMEOUT_EXIT_CODE: Final[int] = 124


@dataclass(slots=True, frozen=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    timeout: float | None = None
    discard_stdin: bool = True

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must be non-negative")


def _ensure_text(value: str | bytes | None) -> str:
    """Return ``value`` decoded to text, or an empty string when missing."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[str]:
    """Execute ``args`` and capture its output as text.

    A timed-out command is reported as a completed process with exit code
    :data:`TIMEOUT_EXIT_CODE` instead of raising.

    Args:
        args: Executable path followed by its arguments.
        options: Execution options; defaults to :class:`CommandOptions`.

    Returns:
        CompletedProcess[str]: Captured exit status, stdout and stderr.

    Raises:
        ValueError: If ``args`` is empty.
        OSError: If the executable cannot be started.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")
    resolved = options or CommandOptions()
    command = [str(arg) for arg in args]
    LOGGER.debug("running command=%s", command)
    try:
        # Bandit: arguments are an explicit list, no shell expansion.
        return subprocess.run(  # nosec B603
            command,
            cwd=str(resolved.cwd) if resolved.cwd is not None else None,
            env=dict(resolved.env) if resolved.env is not None else None,
            check=False,
            capture_output=True,
            text=True,
            timeout=resolved.timeout,
            stdin=subprocess.DEVNULL if resolved.discard_stdin else None,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {resolved.timeout:.1f}s"
        return subprocess.CompletedProcess(
            args=command,
            returncode=TIMEOUT_EXIT_CODE,
            stdout=_ensure_text(exc.stdout),
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )


__all__ = ["TIMEOUT_EXIT_CODE", "CommandOptions", "run_command"]
