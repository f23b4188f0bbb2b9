# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy for diagnostic collection and tree annotation."""

from __future__ import annotations


class DiagnosticsError(Exception):
    """Base class for expected runtime conditions absorbed by the orchestrator."""


class SourceUnavailableError(DiagnosticsError):
    """Raised when a diagnostic source cannot currently be queried."""


class MalformedSourceDataError(DiagnosticsError):
    """Raised when a source returns data that is not ``(path, severity)`` shaped."""


class StaleViewError(DiagnosticsError):
    """Raised when the tree view is invalid or not loaded during a cycle."""


class InvariantViolationError(RuntimeError):
    """Raised when the one-cycle-at-a-time guarantee is broken."""


__all__ = [
    "DiagnosticsError",
    "InvariantViolationError",
    "MalformedSourceDataError",
    "SourceUnavailableError",
    "StaleViewError",
]
