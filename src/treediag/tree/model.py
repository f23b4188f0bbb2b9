# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Domain datatypes for filesystem-backed tree nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Final

_NODE_IDS: Final = count(1)


def _next_node_id() -> int:
    return next(_NODE_IDS)


@dataclass(eq=False, slots=True)
class FileTreeNode:
    """File or directory entry; directories carry children and an open flag."""

    absolute_path: str
    name: str
    is_directory: bool = False
    is_open: bool = False
    children: list[FileTreeNode] = field(default_factory=list)
    id: int = field(default_factory=_next_node_id)

    def walk(self) -> list[FileTreeNode]:
        """Return this node followed by every descendant, depth first."""

        nodes = [self]
        for child in self.children:
            nodes.extend(child.walk())
        return nodes


__all__ = ["FileTreeNode"]
