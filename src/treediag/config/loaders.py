# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Config loading with layered precedence and traceability."""

from __future__ import annotations

import copy
import tomllib
from collections.abc import Mapping, MutableMapping, Sequence
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from treediag.interfaces.config import ConfigSource

from .models import ConfigError, DiagnosticsConfig

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PROJECT_CONFIG_FILENAME: Final[str] = ".treediag.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "treediag"
DIAGNOSTICS_KEY: Final[str] = "diagnostics"

_TOML_CACHE: dict[Path, tuple[int, Mapping[str, Any]]] = {}


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` recursively updated with ``override``.

    Args:
        base: Lower-precedence mapping.
        override: Higher-precedence mapping.

    Returns:
        dict[str, Any]: New merged mapping; inputs are left untouched.
    """

    merged: dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in override.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(existing, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _read_toml(path: Path) -> Mapping[str, Any]:
    """Return the parsed TOML document at ``path``.

    Each file keeps one cache entry, reused while its mtime is unchanged and
    replaced once the file is rewritten.

    Args:
        path: TOML document to read.

    Returns:
        Mapping[str, Any]: Parsed document, empty when ``path`` does not exist.

    Raises:
        ConfigError: If the document cannot be read or parsed.
    """

    if not path.exists():
        return {}
    resolved = path.resolve()
    try:
        mtime_ns = resolved.stat().st_mtime_ns
        cached = _TOML_CACHE.get(resolved)
        if cached is not None and cached[0] == mtime_ns:
            return copy.deepcopy(cached[1])
        with resolved.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to read configuration at {path}: {exc}") from exc
    _TOML_CACHE[resolved] = (mtime_ns, copy.deepcopy(data))
    return data


def _diagnostics_table(document: Mapping[str, Any], *, origin: str) -> Mapping[str, Any]:
    """Return the ``diagnostics`` table of ``document``.

    Args:
        document: Parsed TOML document or sub-table.
        origin: Description used in error messages.

    Returns:
        Mapping[str, Any]: Diagnostics settings, empty when absent.

    Raises:
        ConfigError: If the key exists but is not a table.
    """

    section = document.get(DIAGNOSTICS_KEY)
    if section is None:
        return {}
    if not isinstance(section, MutableMapping):
        raise ConfigError(f"'{DIAGNOSTICS_KEY}' in {origin} must be a table")
    return section


class DefaultConfigSource(ConfigSource):
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return DiagnosticsConfig().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource(ConfigSource):
    """Load the ``[diagnostics]`` table from a TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self._path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        return _diagnostics_table(_read_toml(self._path), origin=self.name)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.treediag.diagnostics]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = _read_toml(self._path)
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        treediag_section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(treediag_section, Mapping):
            return {}
        return _diagnostics_table(treediag_section, origin=self.name)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


class ConfigLoadResult(BaseModel):
    """Container bundling a resolved config with provenance metadata."""

    model_config = ConfigDict(validate_assignment=True)

    config: DiagnosticsConfig
    sources: list[str] = Field(default_factory=list)


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, *, sources: Sequence[ConfigSource]) -> None:
        """Initialise a loader that merges the supplied configuration sources.

        Args:
            sources: Ordered collection of configuration sources, lowest
                precedence first.
        """

        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)

    @classmethod
    def for_root(cls, project_root: Path, *, config_path: Path | None = None) -> ConfigLoader:
        """Build a loader for the defaults, pyproject, project file and explicit file.

        Args:
            project_root: Workspace root used to discover configuration files.
            config_path: Optional explicit configuration file with highest precedence.

        Returns:
            ConfigLoader: Loader configured with default precedence ordering.
        """

        sources: list[ConfigSource] = [
            DefaultConfigSource(),
            PyProjectConfigSource(project_root / PYPROJECT_FILENAME),
            TomlConfigSource(project_root / PROJECT_CONFIG_FILENAME),
        ]
        if config_path is not None:
            if not config_path.is_file():
                raise ConfigError(f"Configuration file not found: {config_path}")
            sources.append(TomlConfigSource(config_path))
        return cls(sources=sources)

    def load(self) -> DiagnosticsConfig:
        """Return the merged configuration.

        Returns:
            DiagnosticsConfig: Validated configuration.
        """

        return self.load_with_trace().config

    def load_with_trace(self) -> ConfigLoadResult:
        """Return the merged configuration together with contributing sources.

        Returns:
            ConfigLoadResult: Validated configuration and provenance.

        Raises:
            ConfigError: If a source is unreadable or the result fails validation.
        """

        merged: dict[str, Any] = {}
        contributors: list[str] = []
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            merged = _deep_merge(merged, fragment)
            contributors.append(source.describe())
        try:
            config = DiagnosticsConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"Invalid diagnostics configuration: {exc}") from exc
        return ConfigLoadResult(config=config, sources=contributors)


def load_config(project_root: Path, *, config_path: Path | None = None) -> DiagnosticsConfig:
    """Return the diagnostics configuration resolved for ``project_root``.

    Args:
        project_root: Workspace root used to discover configuration files.
        config_path: Optional explicit configuration file.

    Returns:
        DiagnosticsConfig: Validated configuration.
    """

    return ConfigLoader.for_root(project_root, config_path=config_path).load()


__all__ = [
    "ConfigLoadResult",
    "ConfigLoader",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
