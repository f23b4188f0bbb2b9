# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""In-memory presentation sink recording signs, markers and highlights."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from treediag.core.severity import SeverityLevel


@dataclass(frozen=True, slots=True)
class SignDefinition:
    """Glyph and style registered for one severity."""

    text: str
    style: str


class MarkerTable:
    """Presentation sink keeping per-line markers for a renderer to draw.

    Markers and highlights are independent facilities, mirroring an editor's
    sign column and line highlights.
    """

    def __init__(self) -> None:
        self.signs: dict[SeverityLevel, SignDefinition] = {}
        self.markers: dict[int, SeverityLevel] = {}
        self.highlights: dict[int, SeverityLevel] = {}

    def define_signs(self, icons: Mapping[SeverityLevel, str], colors: Mapping[SeverityLevel, str]) -> None:
        """Register the glyph and style used for each severity.

        Args:
            icons: Sign-column glyph per severity.
            colors: Rich style per severity.
        """

        self.signs = {
            severity: SignDefinition(text=icons.get(severity, ""), style=colors.get(severity, ""))
            for severity in SeverityLevel
        }

    def clear_all_markers(self) -> None:
        """Drop every marker and highlight placed by the previous cycle."""

        self.markers.clear()
        self.highlights.clear()

    def place_marker(self, line: int, severity: SeverityLevel) -> None:
        """Put the sign of ``severity`` in the sign column of ``line``.

        Args:
            line: Rendered line number.
            severity: Severity whose sign is drawn.
        """

        self.markers[line] = severity

    def apply_highlight(self, line: int, severity: SeverityLevel) -> None:
        """Style the name on ``line`` with the colour of ``severity``.

        Args:
            line: Rendered line number.
            severity: Severity whose style is applied.
        """

        self.highlights[line] = severity

    def sign_for(self, line: int) -> SignDefinition | None:
        """Return the sign drawn in the sign column of ``line``, if any."""

        severity = self.markers.get(line)
        if severity is None:
            return None
        return self.signs.get(severity, SignDefinition(text=severity.name[0], style=""))

    def style_for(self, line: int) -> str | None:
        """Return the highlight style of ``line``, if any."""

        severity = self.highlights.get(line)
        if severity is None:
            return None
        sign = self.signs.get(severity)
        return sign.style if sign is not None else None


__all__ = ["MarkerTable", "SignDefinition"]
