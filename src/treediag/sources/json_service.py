# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Companion diagnostic service reading a JSON diagnostic list from disk."""

from __future__ import annotations

import json
from pathlib import Path

from treediag.exceptions import SourceUnavailableError


class JsonDiagnosticService:
    """Serve ``[{"file": ..., "severity": ...}]`` documents written by other tools."""

    def __init__(self, path: Path) -> None:
        """Point the service at ``path``.

        Args:
            path: JSON document holding the diagnostic list.
        """

        self.path = path

    def is_initialized(self) -> bool:
        """Return ``True`` when the diagnostic document exists."""

        return self.path.is_file()

    def diagnostic_list(self) -> object:
        """Return the decoded JSON document.

        Returns:
            object: Decoded payload; shape is validated by the source adapter.

        Raises:
            SourceUnavailableError: If the document cannot be read or decoded.
        """

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SourceUnavailableError(f"cannot read {self.path}: {exc}") from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise SourceUnavailableError(f"invalid JSON in {self.path}: {exc}") from exc


__all__ = ["JsonDiagnosticService"]
