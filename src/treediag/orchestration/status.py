# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Side table holding the diagnostic status of tree nodes."""

from __future__ import annotations

from collections.abc import Hashable, Iterator

from treediag.core.models import TreeNodeLike
from treediag.core.severity import SeverityLevel


class DiagnosticStatusTable:
    """Map node identity to the severity assigned in the latest cycle."""

    def __init__(self) -> None:
        self._statuses: dict[Hashable, SeverityLevel] = {}

    def clear(self) -> None:
        """Forget every status assigned so far."""

        self._statuses.clear()

    def set(self, node: TreeNodeLike, severity: SeverityLevel) -> None:
        """Record ``severity`` as the status of ``node``.

        Args:
            node: Tree node whose ``id`` keys the entry.
            severity: Worst severity matched to the node this cycle.
        """

        self._statuses[node.id] = severity

    def get(self, node: TreeNodeLike) -> SeverityLevel | None:
        """Return the status of ``node``.

        Args:
            node: Tree node to look up by ``id``.

        Returns:
            SeverityLevel | None: Assigned severity, ``None`` when unmarked.
        """

        return self._statuses.get(node.id)

    def __len__(self) -> int:
        """Return the number of nodes carrying a status."""

        return len(self._statuses)

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over the ids of nodes carrying a status."""

        return iter(self._statuses)


__all__ = ["DiagnosticStatusTable"]
