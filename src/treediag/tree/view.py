# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Line layout of a :class:`FileTreeNode` hierarchy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from treediag.exceptions import StaleViewError
from treediag.filesystem.paths import canonical_path, is_strict_descendant

from .model import FileTreeNode

ChangeListener = Callable[[], None]


@dataclass(frozen=True, slots=True)
class TreeLine:
    """One rendered row of the tree."""

    line: int
    depth: int
    node: FileTreeNode


class FileTreeView:
    """Expose visible nodes by display line, numbering from ``starting_line``.

    The root node itself is the header and never occupies a line; its
    children start at ``starting_line`` and open directories contribute their
    children directly below them.
    """

    def __init__(self, root: FileTreeNode | None, *, starting_line: int = 1) -> None:
        """Attach the view to ``root``.

        Args:
            root: Root node, ``None`` when nothing is loaded yet.
            starting_line: Display line of the first child row.
        """

        self._root = root
        self._starting_line = starting_line
        self._loaded = root is not None
        self._listeners: list[ChangeListener] = []

    @property
    def root(self) -> FileTreeNode | None:
        return self._root

    def subscribe(self, listener: ChangeListener) -> None:
        """Call ``listener`` whenever the visible layout changes.

        Args:
            listener: Zero-argument callable, typically an orchestrator ``update``.
        """

        self._listeners.append(listener)

    def is_valid(self) -> bool:
        """Return ``True`` while a tree is loaded."""

        return self._loaded and self._root is not None

    def invalidate(self) -> None:
        """Mark the view as unloaded; cycles skip until :meth:`load` is called."""

        self._loaded = False

    def load(self, root: FileTreeNode) -> None:
        """Replace the tree and mark the view as loaded.

        Args:
            root: New root node.
        """

        self._root = root
        self._loaded = True
        self._notify()

    def lines(self) -> list[TreeLine]:
        """Return the visible rows in display order.

        Returns:
            list[TreeLine]: Rows with their line number and depth.

        Raises:
            StaleViewError: If no tree is loaded.
        """

        if not self.is_valid() or self._root is None:
            raise StaleViewError("tree view is not loaded")
        rows: list[TreeLine] = []
        self._collect(self._root.children, 0, rows)
        return rows

    def nodes_by_line(self) -> dict[int, FileTreeNode]:
        """Return the visible node on each display line.

        Returns:
            dict[int, FileTreeNode]: Display line to node.
        """

        return {row.line: row.node for row in self.lines()}

    def find(self, path: str) -> FileTreeNode | None:
        """Return the node whose canonical path equals ``path``.

        Args:
            path: Path in any separator style.

        Returns:
            FileTreeNode | None: Matching node, ``None`` when absent.
        """

        if self._root is None:
            return None
        target = canonical_path(path)
        for node in self._root.walk():
            if node.absolute_path == target:
                return node
        return None

    def open(self, path: str) -> bool:
        """Expand the directory at ``path`` and every directory above it.

        Args:
            path: Directory path.

        Returns:
            bool: ``True`` when a directory was found.
        """

        node = self.find(path)
        if node is None or not node.is_directory or self._root is None:
            return False
        for candidate in self._root.walk():
            if candidate.is_directory and _contains(candidate, node):
                candidate.is_open = True
        self._notify()
        return True

    def close(self, path: str) -> bool:
        """Collapse the directory at ``path``.

        Args:
            path: Directory path.

        Returns:
            bool: ``True`` when a directory was found.
        """

        node = self.find(path)
        if node is None or not node.is_directory:
            return False
        node.is_open = False
        self._notify()
        return True

    def expand_all(self) -> None:
        """Open every directory in the tree."""

        if self._root is None:
            return
        for node in self._root.walk():
            if node.is_directory:
                node.is_open = True
        self._notify()

    def _collect(self, nodes: list[FileTreeNode], depth: int, rows: list[TreeLine]) -> None:
        for node in nodes:
            rows.append(TreeLine(line=self._starting_line + len(rows), depth=depth, node=node))
            if node.is_directory and node.is_open:
                self._collect(node.children, depth + 1, rows)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()


def _contains(directory: FileTreeNode, node: FileTreeNode) -> bool:
    """Return ``True`` when ``node`` is ``directory`` or lies beneath it."""

    return node.absolute_path == directory.absolute_path or is_strict_descendant(
        node.absolute_path, directory.absolute_path
    )


__all__ = ["FileTreeView", "TreeLine"]
