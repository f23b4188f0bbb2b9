# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols describing diagnostic sources and the hosts backing them."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Hashable, Iterable, Mapping
from typing import Protocol, runtime_checkable

from treediag.core.models import FileSeverityMap
from treediag.core.severity import SeverityRange


@runtime_checkable
class DiagnosticSource(Protocol):
    """Produce a per-file worst-severity map from one diagnostic provider."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the identifier of the source implementation.

        Returns:
            str: Identifier used in log output.
        """
        raise NotImplementedError

    @abstractmethod
    def is_active(self) -> bool:
        """Return ``True`` when this source should answer the current cycle.

        Returns:
            bool: Whether the provider backing the source is available.
        """
        raise NotImplementedError

    @abstractmethod
    def collect(self, severity_range: SeverityRange) -> FileSeverityMap:
        """Return the worst accepted severity per canonical file path.

        Args:
            severity_range: Inclusive window of severities to keep.

        Returns:
            FileSeverityMap: Mapping of canonical file path to worst severity.
        """
        raise NotImplementedError


@runtime_checkable
class NativeDiagnosticHost(Protocol):
    """Editor or language-server host exposing buffer-addressed diagnostics."""

    @abstractmethod
    def diagnostics(self) -> Iterable[Mapping[str, object]]:
        """Return raw diagnostics carrying ``buffer`` and ``severity`` keys.

        Returns:
            Iterable[Mapping[str, object]]: Diagnostics currently known to the host.
        """
        raise NotImplementedError

    @abstractmethod
    def buffer_path(self, buffer: Hashable) -> str | None:
        """Return the file path of ``buffer`` or ``None`` when it is invalid.

        Args:
            buffer: Buffer identifier attached to a diagnostic.

        Returns:
            str | None: Path of the buffer, ``None`` for invalid buffers.
        """
        raise NotImplementedError


@runtime_checkable
class AlternateDiagnosticService(Protocol):
    """Companion diagnostic service reporting ``{file, severity}`` entries."""

    @abstractmethod
    def is_initialized(self) -> bool:
        """Return ``True`` once the service is ready to be queried."""
        raise NotImplementedError

    @abstractmethod
    def diagnostic_list(self) -> object:
        """Return the raw diagnostic list reported by the service.

        Returns:
            object: Ideally a sequence of mappings with ``file`` and
            ``severity`` keys; anything else is treated as malformed.

        Raises:
            SourceUnavailableError: If the service cannot be queried.
        """
        raise NotImplementedError


__all__ = ["AlternateDiagnosticService", "DiagnosticSource", "NativeDiagnosticHost"]
