# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reduction helpers shared by every diagnostic source variant."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from treediag.core.models import DiagnosticRecord, FileSeverityMap
from treediag.core.severity import SeverityRange, in_range, worst_of

LOGGER = logging.getLogger(__name__)


def reduce_records(records: Iterable[DiagnosticRecord], severity_range: SeverityRange) -> FileSeverityMap:
    """Return the worst in-range severity per file.

    Records outside ``severity_range`` are discarded before reduction so an
    excluded severity can never mask an accepted one on the same file.

    Args:
        records: Diagnostics with canonical file paths.
        severity_range: Inclusive window of accepted severities.

    Returns:
        FileSeverityMap: Mapping of canonical file path to worst severity.
    """

    severity_map: FileSeverityMap = {}
    for record in records:
        if not in_range(record.severity, severity_range):
            continue
        current = severity_map.get(record.file_path)
        severity_map[record.file_path] = (
            record.severity if current is None else worst_of(current, record.severity)
        )
    LOGGER.debug("reduced diagnostics to %d file(s)", len(severity_map))
    return severity_map


__all__ = ["reduce_records"]
