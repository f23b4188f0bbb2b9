# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols describing the collaborators of the diagnostics core."""

from __future__ import annotations

from .config import ConfigSource
from .presentation import PresentationSink
from .sources import AlternateDiagnosticService, DiagnosticSource, NativeDiagnosticHost
from .tree import TreeView

__all__ = [
    "AlternateDiagnosticService",
    "ConfigSource",
    "DiagnosticSource",
    "NativeDiagnosticHost",
    "PresentationSink",
    "TreeView",
]
