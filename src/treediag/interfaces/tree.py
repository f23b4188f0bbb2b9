# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocol describing the tree/view layer consumed by the orchestrator."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from treediag.core.models import LineNodeView


@runtime_checkable
class TreeView(Protocol):
    """Expose the visible line layout of an externally owned tree."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return ``True`` when the backing surface is valid and loaded.

        Returns:
            bool: Whether a recomputation cycle may run against the view.
        """
        raise NotImplementedError

    @abstractmethod
    def nodes_by_line(self) -> LineNodeView:
        """Return the current mapping of display line to visible node.

        Returns:
            LineNodeView: Fresh line layout for all visible nodes.

        Raises:
            StaleViewError: If the view became invalid while building the layout.
        """
        raise NotImplementedError


__all__ = ["TreeView"]
