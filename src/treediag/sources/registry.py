# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Priority-ordered selection of the active diagnostic source."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from treediag.interfaces.sources import AlternateDiagnosticService, DiagnosticSource, NativeDiagnosticHost

from .alternate import AlternateServiceSource
from .native import NativeDiagnosticSource

LOGGER = logging.getLogger(__name__)


def build_sources(
    *,
    service: AlternateDiagnosticService | None = None,
    host: NativeDiagnosticHost | None = None,
    base_dir: str | Path | None = None,
) -> list[DiagnosticSource]:
    """Return sources in priority order: companion service first, native second.

    Args:
        service: Optional companion diagnostic service.
        host: Optional native diagnostic host.
        base_dir: Directory anchoring relative diagnostic paths; the current
            working directory when omitted.

    Returns:
        list[DiagnosticSource]: Sources to query, highest priority first.
    """

    sources: list[DiagnosticSource] = []
    if service is not None:
        sources.append(AlternateServiceSource(service, base_dir=base_dir))
    if host is not None:
        sources.append(NativeDiagnosticSource(host, base_dir=base_dir))
    return sources


def select_active_source(sources: Sequence[DiagnosticSource]) -> DiagnosticSource | None:
    """Return the first source reporting itself active.

    Args:
        sources: Sources in priority order.

    Returns:
        DiagnosticSource | None: Active source, ``None`` when none is active.
    """

    for source in sources:
        if source.is_active():
            LOGGER.debug("using diagnostic source '%s'", source.name)
            return source
    LOGGER.debug("no active diagnostic source")
    return None


__all__ = ["build_sources", "select_active_source"]
