# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for the processor wrapper."""

from __future__ import annotations

from .loaders import ENV_EXECUTABLE, ENV_TIMEOUT, load_config
from .models import ConfigError, ProcessorConfig

__all__ = ["ENV_EXECUTABLE", "ENV_TIMEOUT", "ConfigError", "ProcessorConfig", "load_config"]
