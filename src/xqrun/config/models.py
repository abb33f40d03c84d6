# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models describing how the ``zorba`` binary is invoked."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DefaultScalar = bool | int | str
DefaultValue = DefaultScalar | list[DefaultScalar]


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ProcessorConfig(BaseModel):
    """Locate and run the external XQuery processor."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    executable: Path | None = None
    executable_name: str = "zorba"
    timeout: float | None = Field(default=None, ge=0)
    cwd: Path | None = None
    env: dict[str, str] = Field(default_factory=dict)
    defaults: dict[str, DefaultValue] = Field(default_factory=dict)

    @field_validator("executable_name")
    @classmethod
    def _non_blank_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("executable_name must not be blank")
        return value


__all__ = ["ConfigError", "ProcessorConfig"]
