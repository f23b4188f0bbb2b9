# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Diagnostic source backed by a companion diagnostic service."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import Final

from treediag.core.models import DiagnosticRecord, FileSeverityMap
from treediag.core.severity import SeverityRange, severity_from_name
from treediag.exceptions import DiagnosticsError, MalformedSourceDataError
from treediag.filesystem.paths import canonical_path
from treediag.interfaces.sources import AlternateDiagnosticService

from .base import reduce_records

LOGGER = logging.getLogger(__name__)

_FILE_KEY: Final[str] = "file"
_SEVERITY_KEY: Final[str] = "severity"


class AlternateServiceSource:
    """Collect diagnostics from a companion service once it is initialized."""

    name = "alternate"

    def __init__(self, service: AlternateDiagnosticService, *, base_dir: str | Path | None = None) -> None:
        """Bind the source to ``service``.

        Args:
            service: Companion service exposing a diagnostic list.
            base_dir: Directory anchoring relative file paths; the current
                working directory when omitted.
        """

        self._service = service
        self._base_dir = base_dir

    def is_active(self) -> bool:
        """Return ``True`` when the companion service reports it is initialized."""

        return self._service.is_initialized()

    def collect(self, severity_range: SeverityRange) -> FileSeverityMap:
        """Return the worst in-range severity per file reported by the service.

        An uninitialized service, an unavailable service or an unusable
        response all yield an empty map.

        Args:
            severity_range: Inclusive window of severities to keep.

        Returns:
            FileSeverityMap: Canonical file path to worst severity.
        """

        if not self._service.is_initialized():
            return {}
        try:
            entries = self._entries()
        except DiagnosticsError as exc:
            LOGGER.debug("alternate diagnostic service unusable: %s", exc)
            return {}
        return reduce_records(self._records(entries), severity_range)

    def _entries(self) -> Sequence[object]:
        """Return the raw diagnostic list, validating its overall shape.

        Returns:
            Sequence[object]: Raw entries reported by the service.

        Raises:
            MalformedSourceDataError: If the response is not a list.
            SourceUnavailableError: Propagated from the service.
        """

        payload = self._service.diagnostic_list()
        if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes, bytearray)):
            raise MalformedSourceDataError(f"expected a diagnostic list, got {type(payload).__name__}")
        return payload

    def _records(self, entries: Sequence[object]) -> Iterator[DiagnosticRecord]:
        """Yield records for well-formed entries.

        Args:
            entries: Raw entries reported by the service.

        Yields:
            DiagnosticRecord: Diagnostics resolved to canonical paths.
        """

        for entry in entries:
            try:
                yield _to_record(entry, base_dir=self._base_dir)
            except MalformedSourceDataError as exc:
                LOGGER.debug("skipping alternate diagnostic: %s", exc)


def _to_record(entry: object, *, base_dir: str | Path | None = None) -> DiagnosticRecord:
    """Convert one service entry into a record.

    Args:
        entry: Raw entry expected to carry ``file`` and ``severity`` keys.
        base_dir: Directory anchoring a relative ``file`` value.

    Returns:
        DiagnosticRecord: Parsed record.

    Raises:
        MalformedSourceDataError: If the entry cannot be interpreted.
    """

    if not isinstance(entry, Mapping):
        raise MalformedSourceDataError(f"expected a mapping, got {type(entry).__name__}")
    file_path = entry.get(_FILE_KEY)
    if not isinstance(file_path, str) or not file_path:
        raise MalformedSourceDataError("diagnostic has no file")
    raw_severity = entry.get(_SEVERITY_KEY)
    if not isinstance(raw_severity, (str, int)):
        raise MalformedSourceDataError(f"invalid severity {raw_severity!r}")
    try:
        severity = severity_from_name(raw_severity)
    except ValueError as exc:
        raise MalformedSourceDataError(str(exc)) from exc
    return DiagnosticRecord(file_path=canonical_path(file_path, base_dir=base_dir), severity=severity)


__all__ = ["AlternateServiceSource"]
