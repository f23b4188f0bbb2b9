# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration models and layered loading."""

from __future__ import annotations

from .loaders import (
    ConfigLoader,
    ConfigLoadResult,
    DefaultConfigSource,
    PyProjectConfigSource,
    TomlConfigSource,
    load_config,
)
from .models import ColorConfig, ConfigError, DiagnosticsConfig, IconConfig

__all__ = [
    "ColorConfig",
    "ConfigError",
    "ConfigLoadResult",
    "ConfigLoader",
    "DefaultConfigSource",
    "DiagnosticsConfig",
    "IconConfig",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
