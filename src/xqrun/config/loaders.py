# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load :class:`ProcessorConfig` from TOML files and the environment."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .models import ConfigError, ProcessorConfig

LOGGER = logging.getLogger(__name__)

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = "xqrun.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "xqrun"
ENV_EXECUTABLE: Final[str] = "XQRUN_EXECUTABLE"
ENV_TIMEOUT: Final[str] = "XQRUN_TIMEOUT"


def _read_toml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc


def _normalise_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``data`` with top-level kebab-case keys converted to snake_case."""

    return {key.replace("-", "_"): value for key, value in data.items()}


def _merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = {**current, **value}
        else:
            merged[key] = value
    return merged


def _pyproject_section(path: Path) -> dict[str, Any]:
    data = _read_toml(path)
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return {}
    return _normalise_keys(section)


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if executable := env.get(ENV_EXECUTABLE):
        overrides["executable"] = executable
    if timeout := env.get(ENV_TIMEOUT):
        try:
            overrides["timeout"] = float(timeout)
        except ValueError as exc:
            raise ConfigError(f"{ENV_TIMEOUT} must be a number, got {timeout!r}") from exc
    return overrides


def load_config(root: Path, *, env: Mapping[str, str] | None = None) -> ProcessorConfig:
    """Return the processor configuration for the project at ``root``.

    Sources are layered in order: ``[tool.xqrun]`` from ``pyproject.toml``,
    then ``xqrun.toml``, then the ``XQRUN_EXECUTABLE`` and ``XQRUN_TIMEOUT``
    environment variables.

    Args:
        root: Project directory searched for configuration files.
        env: Environment mapping; defaults to :data:`os.environ`.

    Returns:
        ProcessorConfig: Validated configuration.

    Raises:
        ConfigError: If a file cannot be parsed or a value is invalid.
    """

    payload = _pyproject_section(root / PYPROJECT_FILENAME)
    payload = _merge(payload, _normalise_keys(_read_toml(root / CONFIG_FILENAME)))
    payload = _merge(payload, _env_overrides(os.environ if env is None else env))
    LOGGER.debug("resolved configuration keys=%s", sorted(payload))
    try:
        return ProcessorConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid xqrun configuration: {exc}") from exc


__all__ = ["CONFIG_FILENAME", "ENV_EXECUTABLE", "ENV_TIMEOUT", "load_config"]
