# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Recomputation cycle tying sources, matcher and sink together."""

from __future__ import annotations

from .orchestrator import DEBOUNCE_KEY, DiagnosticsOrchestrator
from .status import DiagnosticStatusTable

__all__ = ["DEBOUNCE_KEY", "DiagnosticStatusTable", "DiagnosticsOrchestrator"]
