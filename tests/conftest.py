# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from xqrun.options import OptionRegistry


def _shout(name: str, value: object) -> str:
    return f"--{name}={str(value).upper()}"


@pytest.fixture
def small_registry() -> OptionRegistry:
    """Return a compact registry covering every option type and cardinality."""

    return OptionRegistry.from_mappings(
        [
            {"name": "verbose", "type": "boolean"},
            {"name": "parse-only", "type": "boolean"},
            {"name": "title", "type": "string"},
            {"name": "count", "type": "integer"},
            {"name": "mode", "type": "select", "choices": ["fast", "slow"]},
            {"name": "include", "type": "string", "repeatable": True},
            {"name": "level", "type": "integer", "repeatable": True, "validate": lambda _, value: value in (1, 2, 3)},
            {"name": "label", "type": "string", "serialize": _shout},
        ],
        context="fixture",
    )


@pytest.fixture
def fake_processor(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory writing an executable shell script into ``tmp_path``."""

    def _factory(body: str) -> Path:
        script = tmp_path / "zorba"
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _factory
