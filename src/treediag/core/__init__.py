# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Severity domain and shared data models."""

from __future__ import annotations

from .models import DiagnosticRecord, FileSeverityMap, LineNodeView, TreeNodeLike
from .severity import (
    Comparison,
    SeverityLevel,
    SeverityRange,
    compare,
    in_range,
    severity_from_name,
    worst_of,
)

__all__ = [
    "Comparison",
    "DiagnosticRecord",
    "FileSeverityMap",
    "LineNodeView",
    "SeverityLevel",
    "SeverityRange",
    "TreeNodeLike",
    "compare",
    "in_range",
    "severity_from_name",
    "worst_of",
]
