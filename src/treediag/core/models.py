# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the treediag package."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Protocol, TypeAlias, runtime_checkable

from pydantic import BaseModel, ConfigDict

from treediag.core.severity import SeverityLevel

FileSeverityMap: TypeAlias = dict[str, SeverityLevel]


class DiagnosticRecord(BaseModel):
    """Single diagnostic reduced to the fields needed for tree annotation."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    severity: SeverityLevel


@runtime_checkable
class TreeNodeLike(Protocol):
    """Tree-owned node the diagnostics core reads but never mutates."""

    @property
    def id(self) -> Hashable:
        """Return the stable identity of the node."""
        raise NotImplementedError

    @property
    def absolute_path(self) -> str:
        """Return the absolute filesystem path of the node."""
        raise NotImplementedError

    @property
    def is_directory(self) -> bool:
        """Return ``True`` when the node is a directory."""
        raise NotImplementedError

    @property
    def is_open(self) -> bool:
        """Return ``True`` when the directory node is expanded."""
        raise NotImplementedError


LineNodeView: TypeAlias = Mapping[int, TreeNodeLike]


__all__ = [
    "DiagnosticRecord",
    "FileSeverityMap",
    "LineNodeView",
    "TreeNodeLike",
]
