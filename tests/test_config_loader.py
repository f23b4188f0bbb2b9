# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered diagnostics configuration."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from treediag.config import ConfigError, ConfigLoader, DiagnosticsConfig, load_config
from treediag.config.loaders import _TOML_CACHE
from treediag.core.severity import SeverityLevel
from treediag.matching import MatchPolicy


def test_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == DiagnosticsConfig()
    assert config.enable is False
    assert config.debounce_delay == 50
    assert config.severity.min is SeverityLevel.HINT
    assert config.severity.max is SeverityLevel.ERROR
    assert config.match_policy == MatchPolicy(show_on_dirs=False, show_on_open_dirs=True)
    assert config.icons.by_severity()[SeverityLevel.WARNING] == "W"


def test_pyproject_section_is_applied(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[tool.treediag.diagnostics]
enable = true
debounce_delay = 200
show_on_dirs = true

[tool.treediag.diagnostics.severity]
min = "warning"
""".strip(),
        encoding="utf-8",
    )

    result = ConfigLoader.for_root(tmp_path).load_with_trace()

    assert result.config.enable is True
    assert result.config.debounce_delay == 200
    assert result.config.severity.min is SeverityLevel.WARNING
    assert result.config.severity.max is SeverityLevel.ERROR
    assert result.sources == ["Built-in defaults", f"pyproject.toml ({tmp_path / 'pyproject.toml'})"]


def test_project_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.treediag.diagnostics]\ndebounce_delay = 200\nshow_on_dirs = true\n",
        encoding="utf-8",
    )
    (tmp_path / ".treediag.toml").write_text(
        '[diagnostics]\ndebounce_delay = 10\n\n[diagnostics.icons]\nerror = "!"\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.debounce_delay == 10
    assert config.show_on_dirs is True
    assert config.icons.error == "!"
    assert config.icons.warning == "W"


def test_explicit_file_has_highest_precedence(tmp_path: Path) -> None:
    (tmp_path / ".treediag.toml").write_text("[diagnostics]\nshow_on_open_dirs = false\n", encoding="utf-8")
    explicit = tmp_path / "custom.toml"
    explicit.write_text('[diagnostics]\nshow_on_open_dirs = true\n\n[diagnostics.colors]\nhint = "green"\n', encoding="utf-8")

    result = ConfigLoader.for_root(tmp_path, config_path=explicit).load_with_trace()

    assert result.config.show_on_open_dirs is True
    assert result.config.colors.hint == "green"
    assert result.sources[-1] == f"TOML configuration at {explicit}"


def test_missing_explicit_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, config_path=tmp_path / "absent.toml")


def test_invalid_toml_is_an_error(tmp_path: Path) -> None:
    (tmp_path / ".treediag.toml").write_text("[diagnostics\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to read"):
        load_config(tmp_path)


def test_diagnostics_key_must_be_a_table(tmp_path: Path) -> None:
    (tmp_path / ".treediag.toml").write_text('diagnostics = "on"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a table"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "body",
    [
        '[diagnostics.severity]\nmin = "fatal"\n',
        '[diagnostics.severity]\nmin = "error"\nmax = "hint"\n',
        '[diagnostics]\ndebounce_delay = "soon"\n',
    ],
)
def test_invalid_values_are_reported(tmp_path: Path, body: str) -> None:
    (tmp_path / ".treediag.toml").write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid diagnostics configuration"):
        load_config(tmp_path)


def test_to_dict_uses_severity_names() -> None:
    payload = DiagnosticsConfig(severity={"min": "information", "max": "warning"}).to_dict()

    assert payload["severity"] == {"min": "information", "max": "warning"}
    assert payload["icons"] == {"error": "E", "warning": "W", "info": "I", "hint": "H"}
    assert DiagnosticsConfig.model_validate(payload).severity.min is SeverityLevel.INFORMATION


def test_assignment_is_validated() -> None:
    config = DiagnosticsConfig()

    config.show_on_dirs = True
    assert config.match_policy.show_on_dirs is True
    with pytest.raises(ValueError):
        config.debounce_delay = "later"  # type: ignore[assignment]


def test_loader_requires_sources() -> None:
    with pytest.raises(ValueError):
        ConfigLoader(sources=[])


def test_rewritten_config_replaces_its_cache_entry(tmp_path: Path) -> None:
    target = tmp_path / ".treediag.toml"
    target.write_text("[diagnostics]\ndebounce_delay = 10\n", encoding="utf-8")
    assert load_config(tmp_path).debounce_delay == 10

    target.write_text("[diagnostics]\ndebounce_delay = 20\n", encoding="utf-8")
    stat = target.stat()
    os.utime(target, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))

    assert load_config(tmp_path).debounce_delay == 20
    mtime_ns, document = _TOML_CACHE[target.resolve()]
    assert mtime_ns == target.stat().st_mtime_ns
    assert document["diagnostics"]["debounce_delay"] == 20
