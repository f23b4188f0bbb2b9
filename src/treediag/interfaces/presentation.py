# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocol describing the presentation sink fed by the orchestrator."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from treediag.core.severity import SeverityLevel


@runtime_checkable
class PresentationSink(Protocol):
    """Turn ``(line, severity)`` decisions into visible markers."""

    @abstractmethod
    def define_signs(self, icons: Mapping[SeverityLevel, str], colors: Mapping[SeverityLevel, str]) -> None:
        """Register the icon and colour used for each severity."""
        raise NotImplementedError

    @abstractmethod
    def clear_all_markers(self) -> None:
        """Remove every marker and highlight placed by earlier cycles."""
        raise NotImplementedError

    @abstractmethod
    def place_marker(self, line: int, severity: SeverityLevel) -> None:
        """Place the sign-column marker for ``severity`` on ``line``."""
        raise NotImplementedError

    @abstractmethod
    def apply_highlight(self, line: int, severity: SeverityLevel) -> None:
        """Highlight ``line`` using the style registered for ``severity``."""
        raise NotImplementedError


__all__ = ["PresentationSink"]
