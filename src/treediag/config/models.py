# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the diagnostics overlay."""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field

from treediag.core.severity import SeverityLevel, SeverityRange
from treediag.matching.matcher import MatchPolicy

DEFAULT_DEBOUNCE_DELAY_MS: Final[int] = 50


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class _SeverityMapping(BaseModel):
    """Shared shape of the per-severity display mappings."""

    model_config = ConfigDict(validate_assignment=True)

    error: str
    warning: str
    info: str
    hint: str

    def by_severity(self) -> dict[SeverityLevel, str]:
        """Return the mapping keyed by :class:`SeverityLevel`.

        Returns:
            dict[SeverityLevel, str]: Value configured for each severity.
        """

        return {
            SeverityLevel.ERROR: self.error,
            SeverityLevel.WARNING: self.warning,
            SeverityLevel.INFORMATION: self.info,
            SeverityLevel.HINT: self.hint,
        }


class IconConfig(_SeverityMapping):
    """Sign-column glyph shown for each severity."""

    error: str = "E"
    warning: str = "W"
    info: str = "I"
    hint: str = "H"


class ColorConfig(_SeverityMapping):
    """Rich style used to highlight lines of each severity."""

    error: str = "red"
    warning: str = "yellow"
    info: str = "blue"
    hint: str = "cyan"


class DiagnosticsConfig(BaseModel):
    """Settings consumed by the diagnostics orchestrator."""

    model_config = ConfigDict(validate_assignment=True)

    enable: bool = False
    debounce_delay: int = DEFAULT_DEBOUNCE_DELAY_MS
    severity: SeverityRange = Field(default_factory=SeverityRange)
    show_on_dirs: bool = False
    show_on_open_dirs: bool = True
    icons: IconConfig = Field(default_factory=IconConfig)
    colors: ColorConfig = Field(default_factory=ColorConfig)

    @property
    def match_policy(self) -> MatchPolicy:
        """Return the directory roll-up policy derived from the settings."""

        return MatchPolicy(show_on_dirs=self.show_on_dirs, show_on_open_dirs=self.show_on_open_dirs)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible snapshot with severity names.

        Returns:
            dict[str, Any]: Serialised configuration.
        """

        payload = self.model_dump(mode="json")
        payload["severity"] = {
            "min": self.severity.min.name.lower(),
            "max": self.severity.max.name.lower(),
        }
        return payload


__all__ = [
    "ColorConfig",
    "ConfigError",
    "DEFAULT_DEBOUNCE_DELAY_MS",
    "DiagnosticsConfig",
    "IconConfig",
]
