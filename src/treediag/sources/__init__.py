# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Diagnostic source variants and priority-ordered selection."""

from __future__ import annotations

from .alternate import AlternateServiceSource
from .base import reduce_records
from .json_service import JsonDiagnosticService
from .native import NativeDiagnosticSource, PublishedDiagnosticsHost, document_path
from .registry import build_sources, select_active_source

__all__ = (
    "AlternateServiceSource",
    "JsonDiagnosticService",
    "NativeDiagnosticSource",
    "PublishedDiagnosticsHost",
    "build_sources",
    "document_path",
    "reduce_records",
    "select_active_source",
)
