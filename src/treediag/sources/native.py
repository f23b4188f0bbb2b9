# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Native diagnostic source backed by buffer-addressed host diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock
from typing import Final
from urllib.parse import unquote, urlparse

from treediag.core.models import DiagnosticRecord, FileSeverityMap
from treediag.core.severity import SeverityLevel, SeverityRange
from treediag.exceptions import DiagnosticsError, MalformedSourceDataError
from treediag.filesystem.paths import canonical_path
from treediag.interfaces.sources import NativeDiagnosticHost

from .base import reduce_records

LOGGER = logging.getLogger(__name__)

_BUFFER_KEY: Final[str] = "buffer"
_SEVERITY_KEY: Final[str] = "severity"
_FILE_SCHEME: Final[str] = "file"
_URI_KEY: Final[str] = "uri"
_DIAGNOSTICS_KEY: Final[str] = "diagnostics"

ChangeListener = Callable[[], None]


class NativeDiagnosticSource:
    """Collect diagnostics from the host's own diagnostic subsystem."""

    name = "native"

    def __init__(self, host: NativeDiagnosticHost, *, base_dir: str | Path | None = None) -> None:
        """Bind the source to ``host``.

        Args:
            host: Host exposing diagnostics and buffer name resolution.
            base_dir: Directory anchoring relative buffer paths; the current
                working directory when omitted.
        """

        self._host = host
        self._base_dir = base_dir

    def is_active(self) -> bool:
        """Return ``True``; the native subsystem is always available."""

        return True

    def collect(self, severity_range: SeverityRange) -> FileSeverityMap:
        """Return the worst in-range severity per file known to the host.

        An unavailable host or an unusable response yields an empty map.

        Args:
            severity_range: Inclusive window of severities to keep.

        Returns:
            FileSeverityMap: Canonical file path to worst severity.
        """

        try:
            records = list(self._records(self._entries()))
        except DiagnosticsError as exc:
            LOGGER.debug("native diagnostic host unusable: %s", exc)
            return {}
        return reduce_records(records, severity_range)

    def _entries(self) -> list[object]:
        """Return the raw host diagnostics, validating their overall shape.

        Returns:
            list[object]: Raw entries reported by the host.

        Raises:
            MalformedSourceDataError: If the response is not an iterable of entries.
            SourceUnavailableError: Propagated from the host.
        """

        payload = self._host.diagnostics()
        if isinstance(payload, (str, bytes, bytearray, Mapping)) or not isinstance(payload, Iterable):
            raise MalformedSourceDataError(f"expected a diagnostic list, got {type(payload).__name__}")
        return list(payload)

    def _records(self, entries: Iterable[object]) -> Iterator[DiagnosticRecord]:
        """Yield well-formed records, skipping malformed or orphaned ones.

        Args:
            entries: Raw entries reported by the host.

        Yields:
            DiagnosticRecord: Diagnostics resolved to canonical paths.
        """

        for raw in entries:
            try:
                record = self._to_record(raw)
            except MalformedSourceDataError as exc:
                LOGGER.debug("skipping native diagnostic: %s", exc)
                continue
            if record is not None:
                yield record

    def _to_record(self, raw: Mapping[str, object]) -> DiagnosticRecord | None:
        """Convert a raw host diagnostic into a record.

        Args:
            raw: Host diagnostic with ``buffer`` and ``severity`` keys.

        Returns:
            DiagnosticRecord | None: Record, or ``None`` when the buffer is invalid.

        Raises:
            MalformedSourceDataError: If the entry lacks a usable buffer or severity.
        """

        if not isinstance(raw, Mapping):
            raise MalformedSourceDataError(f"expected a mapping, got {type(raw).__name__}")
        buffer = raw.get(_BUFFER_KEY)
        if buffer is None or not isinstance(buffer, Hashable):
            raise MalformedSourceDataError("diagnostic has no buffer")
        severity = raw.get(_SEVERITY_KEY)
        if isinstance(severity, bool) or not isinstance(severity, int):
            raise MalformedSourceDataError(f"invalid severity {severity!r}")
        try:
            level = SeverityLevel(severity)
        except ValueError as exc:
            raise MalformedSourceDataError(f"invalid severity {severity!r}") from exc
        path = self._host.buffer_path(buffer)
        if path is None or path == "":
            return None
        if not isinstance(path, str):
            raise MalformedSourceDataError(f"buffer {buffer!r} resolved to {type(path).__name__}, not a path")
        return DiagnosticRecord(file_path=canonical_path(path, base_dir=self._base_dir), severity=level)


@dataclass(slots=True)
class _Document:
    """Diagnostics published for a single open document."""

    path: str
    severities: list[int] = field(default_factory=list)
    is_open: bool = True


class PublishedDiagnosticsHost:
    """Native host storing language-server ``publishDiagnostics`` payloads.

    Each document is given a stable integer buffer number on first publish.
    Publishing replaces the document's diagnostics; closing a document turns
    its buffer invalid so its diagnostics stop contributing.
    """

    def __init__(self) -> None:
        """Initialise an empty host."""

        self._lock = Lock()
        self._documents: dict[int, _Document] = {}
        self._buffers: dict[str, int] = {}
        self._listeners: list[ChangeListener] = []

    def subscribe(self, listener: ChangeListener) -> None:
        """Call ``listener`` after every publish or close.

        Args:
            listener: Zero-argument callable, typically an orchestrator ``update``.
        """

        self._listeners.append(listener)

    def publish(self, document: str, diagnostics: Sequence[Mapping[str, object]]) -> int:
        """Replace the diagnostics of ``document``.

        Args:
            document: ``file://`` URI or filesystem path of the document.
            diagnostics: LSP diagnostic objects; only ``severity`` is read and a
                missing severity counts as an error.

        Returns:
            int: Buffer number assigned to the document.
        """

        path = document_path(document)
        severities = [_lsp_severity(entry) for entry in diagnostics]
        with self._lock:
            buffer = self._buffers.get(path)
            if buffer is None:
                buffer = len(self._buffers) + 1
                self._buffers[path] = buffer
            self._documents[buffer] = _Document(path=path, severities=severities)
        self._notify()
        return buffer

    def handle_publish(self, params: Mapping[str, object]) -> int:
        """Apply a ``textDocument/publishDiagnostics`` notification payload.

        Args:
            params: Notification parameters with ``uri`` and ``diagnostics``.

        Returns:
            int: Buffer number assigned to the document.

        Raises:
            MalformedSourceDataError: If ``params`` is not a publish payload.
        """

        uri = params.get(_URI_KEY)
        entries = params.get(_DIAGNOSTICS_KEY, [])
        if not isinstance(uri, str) or not isinstance(entries, Sequence) or isinstance(entries, str):
            raise MalformedSourceDataError("publishDiagnostics payload requires 'uri' and 'diagnostics'")
        return self.publish(uri, [entry for entry in entries if isinstance(entry, Mapping)])

    def close(self, document: str) -> None:
        """Invalidate the buffer of ``document``.

        Args:
            document: ``file://`` URI or filesystem path of the document.
        """

        path = document_path(document)
        with self._lock:
            buffer = self._buffers.get(path)
            if buffer is None:
                return
            self._documents[buffer].is_open = False
        self._notify()

    def diagnostics(self) -> list[dict[str, object]]:
        """Return a snapshot of every stored diagnostic.

        Returns:
            list[dict[str, object]]: Entries with ``buffer`` and ``severity`` keys.
        """

        with self._lock:
            return [
                {_BUFFER_KEY: buffer, _SEVERITY_KEY: severity}
                for buffer, document in self._documents.items()
                for severity in document.severities
            ]

    def buffer_path(self, buffer: Hashable) -> str | None:
        """Return the path of ``buffer`` while its document is open.

        Args:
            buffer: Buffer number attached to a diagnostic.

        Returns:
            str | None: Document path, ``None`` for closed or unknown buffers.
        """

        with self._lock:
            document = self._documents.get(buffer) if isinstance(buffer, int) else None
            if document is None or not document.is_open:
                return None
            return document.path

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()


def document_path(document: str) -> str:
    """Return the filesystem path named by a ``file://`` URI or plain path.

    Args:
        document: URI or path text.

    Returns:
        str: Filesystem path text.
    """

    parsed = urlparse(document)
    if parsed.scheme != _FILE_SCHEME:
        return document
    path = unquote(parsed.path)
    # file:///C:/x parses to /C:/x
    if len(path) >= 3 and path[0] == "/" and path[1].isalpha() and path[2] == ":":
        path = path[1:]
    if parsed.netloc:
        path = f"//{parsed.netloc}{path}"
    return path


def _lsp_severity(entry: Mapping[str, object]) -> int:
    """Return the numeric severity of an LSP diagnostic, defaulting to error."""

    value = entry.get(_SEVERITY_KEY)
    if value is None:
        return int(SeverityLevel.ERROR)
    return value if isinstance(value, int) else -1


__all__ = ["NativeDiagnosticSource", "PublishedDiagnosticsHost", "document_path"]
