# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Debounced recomputation of diagnostic annotations for a tree."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from threading import Lock
from typing import Final

from treediag.config.models import DiagnosticsConfig
from treediag.core.models import FileSeverityMap, LineNodeView, TreeNodeLike
from treediag.core.severity import SeverityLevel
from treediag.exceptions import DiagnosticsError, InvariantViolationError, StaleViewError
from treediag.interfaces.presentation import PresentationSink
from treediag.interfaces.sources import DiagnosticSource
from treediag.interfaces.tree import TreeView
from treediag.matching.matcher import match_nodes
from treediag.scheduling.debounce import DebounceState, get_debounce_state
from treediag.sources.registry import select_active_source

from .status import DiagnosticStatusTable

LOGGER = logging.getLogger(__name__)

DEBOUNCE_KEY: Final[str] = "diagnostics"


class DiagnosticsOrchestrator:
    """Tie sources, matcher and presentation sink behind the debouncer.

    Every recomputation trigger must go through :meth:`update`; the debouncer
    then guarantees that at most one :meth:`run_cycle` executes at a time.
    """

    def __init__(
        self,
        config: DiagnosticsConfig,
        *,
        sources: Sequence[DiagnosticSource],
        view: TreeView,
        sink: PresentationSink,
        debounce_state: DebounceState | None = None,
        debounce_key: str = DEBOUNCE_KEY,
    ) -> None:
        """Wire the orchestrator to its collaborators.

        Args:
            config: Diagnostics settings.
            sources: Diagnostic sources in priority order.
            view: Tree view supplying the visible line layout.
            sink: Presentation sink receiving marker and highlight calls.
            debounce_state: Scheduler registry; defaults to the process-wide one.
            debounce_key: Key identifying this feature in the registry.
        """

        self.config = config
        self._sources = list(sources)
        self._view = view
        self._sink = sink
        self._debounce = debounce_state or get_debounce_state()
        self._debounce_key = debounce_key
        self._statuses = DiagnosticStatusTable()
        self._cycle_lock = Lock()

    @property
    def debounce_key(self) -> str:
        """Return the key under which cycles are scheduled."""

        return self._debounce_key

    @property
    def statuses(self) -> DiagnosticStatusTable:
        """Return the side table of node statuses written by the last cycle."""

        return self._statuses

    def status_of(self, node: TreeNodeLike) -> SeverityLevel | None:
        """Return the severity assigned to ``node`` by the last cycle."""

        return self._statuses.get(node)

    def setup(self) -> None:
        """Pass the configured icons and colours to the sink."""

        if self.config.enable:
            LOGGER.debug("diagnostics setup")
        self._sink.define_signs(self.config.icons.by_severity(), self.config.colors.by_severity())

    def update(self) -> None:
        """Request a recomputation after the configured quiet period."""

        if not self.config.enable or not self._view.is_valid():
            return
        self._debounce.schedule(self._debounce_key, self.config.debounce_delay, self.run_cycle)

    def clear(self) -> None:
        """Remove every marker from the sink."""

        if not self.config.enable or not self._view.is_valid():
            return
        self._sink.clear_all_markers()

    def run_cycle(self) -> dict[int, SeverityLevel]:
        """Recompute and publish annotations for the visible tree lines.

        Returns:
            dict[int, SeverityLevel]: Severity written per annotated line.

        Raises:
            InvariantViolationError: If another cycle is already running.
        """

        if not self._cycle_lock.acquire(blocking=False):
            raise InvariantViolationError("diagnostics cycles must not overlap")
        try:
            return self._run_cycle()
        finally:
            self._cycle_lock.release()

    def _run_cycle(self) -> dict[int, SeverityLevel]:
        started = time.perf_counter()
        LOGGER.debug("diagnostics update")
        nodes_by_line = self._visible_nodes()
        if nodes_by_line is None:
            return {}

        self._sink.clear_all_markers()
        self._statuses.clear()

        try:
            severity_map = self._collect()
            assignments = match_nodes(severity_map, nodes_by_line, self.config.match_policy)
        except DiagnosticsError as exc:
            LOGGER.warning("diagnostics cycle aborted: %s", exc)
            return {}

        for line in sorted(assignments):
            severity = assignments[line]
            self._statuses.set(nodes_by_line[line], severity)
            self._sink.place_marker(line, severity)
            self._sink.apply_highlight(line, severity)

        LOGGER.debug(
            "diagnostics update annotated %d line(s) in %.3fms",
            len(assignments),
            (time.perf_counter() - started) * 1000,
        )
        return assignments

    def _visible_nodes(self) -> LineNodeView | None:
        """Return the current line layout, or ``None`` when the view is stale."""

        if not self._view.is_valid():
            LOGGER.debug("diagnostics update skipped: view is not loaded")
            return None
        try:
            return self._view.nodes_by_line()
        except StaleViewError as exc:
            LOGGER.debug("diagnostics update skipped: %s", exc)
            return None

    def _collect(self) -> FileSeverityMap:
        """Return the severity map from the active source, empty when none is active."""

        source = select_active_source(self._sources)
        if source is None:
            return {}
        severity_map = source.collect(self.config.severity)
        for path, severity in severity_map.items():
            LOGGER.debug(" bufpath '%s' severity %d", path, severity)
        return severity_map


__all__ = ["DEBOUNCE_KEY", "DiagnosticsOrchestrator"]
